import sys
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException

from cs_tutor.config import Settings, load_settings
from cs_tutor.errors import (
    ConfigurationError,
    GenerationError,
    ValidationError,
    register_error_handlers,
)
from cs_tutor.prompt import build_prompt
from cs_tutor.schemas import ErrorResponse, HealthResponse, TextRequest, TextResponse
from cs_tutor.services.llm import GeminiClient, TextGenerator
from cs_tutor.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

TEXT_REQUIRED = "Text is required"
HEALTH_MESSAGE = "Server is running with Gemini AI"
FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_generator(request: Request) -> TextGenerator:
    return request.app.state.generator


async def read_text_request(request: Request) -> TextRequest:
    """Parse a JSON or form body into a TextRequest.

    Anything that does not yield a string ``text`` field counts as missing text,
    including bodies the form parser rejects.
    """
    content_type = request.headers.get("content-type", "")
    try:
        if content_type.startswith(FORM_TYPES):
            data = dict(await request.form())
        else:
            body = await request.body()
            data = await request.json() if body.strip() else {}
        return TextRequest.model_validate(data)
    except (ValueError, HTTPException):
        raise ValidationError(TEXT_REQUIRED)


def create_app(settings: Settings, generator: Optional[TextGenerator] = None) -> FastAPI:
    if generator is None:
        generator = GeminiClient(settings.gemini_api_key, settings.gemini_model)

    app = FastAPI(title="CS Tutor Relay")
    app.state.generator = generator

    # CORS middleware (frontend -> backend calls)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse)
    async def health():
        return {"status": "OK", "message": HEALTH_MESSAGE}

    # --- Question endpoint ---
    @app.post(
        "/",
        response_model=TextResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def generate_response(
        request: Request, text_generator: TextGenerator = Depends(get_generator)
    ):
        payload = await read_text_request(request)
        if not payload.text or not payload.text.strip():
            raise ValidationError(TEXT_REQUIRED)

        logger.info(f"Received text: {payload.text}")

        try:
            reply = await text_generator.generate(build_prompt(payload.text))
            if not reply or not reply.strip():
                raise ValueError("Gemini returned an empty response")
        except Exception as e:
            logger.exception(f"Error processing request: {e}")
            raise GenerationError.from_exception(e) from e

        logger.info(f"Gemini response: {reply}")
        # Plain text goes back for browser TTS
        return {"text": reply, "success": True}

    return app


def run() -> None:
    setup_logging()
    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.error(f"Error: {e.message}")
        sys.exit(1)

    setup_logging(settings.log_level)
    app = create_app(settings)

    logger.info(f"Server is running on http://localhost:{settings.port}")
    logger.info(f"Using Gemini AI API ({settings.gemini_model})")
    logger.info("Using browser-based Text-to-Speech")
    logger.info(f"Health check: http://localhost:{settings.port}/health")

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class RelayError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(RelayError):
    """Raised at startup when a required setting is missing or invalid."""


class ValidationError(RelayError):
    status_code = 400


class GenerationError(RelayError):
    status_code = 500

    @classmethod
    def from_exception(cls, exc: Exception) -> "GenerationError":
        detail = str(exc) or "Unknown error"
        return cls(f"Error generating response: {detail}")


async def relay_error_handler(request: Request, exc: RelayError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "success": False},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RelayError, relay_error_handler)

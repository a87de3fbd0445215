import logging
import os
from typing import List, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from cs_tutor.errors import ConfigurationError

DEFAULT_PORT = 3000
DEFAULT_MODEL = "gemini-2.5-flash"
ALLOWED_ORIGINS = ["http://localhost:3001", "http://localhost:3000"]


class Settings(BaseModel):
    gemini_api_key: str
    gemini_model: str = DEFAULT_MODEL
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    allowed_origins: List[str] = ALLOWED_ORIGINS


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from the process environment.

    When no mapping is passed, a ``.env`` file in the working directory is
    loaded first; variables already set in the environment take precedence.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    api_key = (env.get("GEMINI_API_KEY") or "").strip()
    if not api_key:
        raise ConfigurationError("GEMINI_API_KEY is not set in .env file")

    raw_port = (env.get("PORT") or "").strip() or str(DEFAULT_PORT)
    try:
        port = int(raw_port)
    except ValueError:
        raise ConfigurationError(f"PORT must be an integer, got {raw_port!r}")
    if not 1 <= port <= 65535:
        raise ConfigurationError(f"PORT must be between 1 and 65535, got {port}")

    log_level = (env.get("LOG_LEVEL") or "").strip() or "INFO"
    # getLevelName maps unknown names to a "Level X" string instead of an int
    if not isinstance(logging.getLevelName(log_level.upper()), int):
        raise ConfigurationError(f"LOG_LEVEL is not a logging level: {log_level!r}")

    return Settings(
        gemini_api_key=api_key,
        gemini_model=env.get("GEMINI_MODEL") or DEFAULT_MODEL,
        host=env.get("HOST") or "0.0.0.0",
        port=port,
        log_level=log_level,
    )

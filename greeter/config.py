"""Application settings loaded from environment variables."""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from uvicorn.config import LOG_LEVELS

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_SHUTDOWN_TIMEOUT = 10


def _parse_int(value) -> int | None:
    """Plain ASCII digits only; signs, underscores and other scripts are rejected."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    text = str(value).strip()
    if text.isascii() and text.isdigit():
        return int(text)
    return None


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Greeting
    name: str = "World"

    # API
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT

    # Process
    log_level: str = DEFAULT_LOG_LEVEL
    shutdown_timeout: int = DEFAULT_SHUTDOWN_TIMEOUT

    @field_validator("port", mode="before")
    @classmethod
    def _fallback_port(cls, value):
        """Malformed PORT values fall back to the default instead of failing."""
        port = _parse_int(value)
        if port is None:
            logger.warning(f"Ignoring non-numeric PORT={value!r}, using {DEFAULT_PORT}")
            return DEFAULT_PORT
        return port

    @field_validator("shutdown_timeout", mode="before")
    @classmethod
    def _fallback_shutdown_timeout(cls, value):
        timeout = _parse_int(value)
        if timeout is None:
            logger.warning(
                f"Ignoring non-numeric SHUTDOWN_TIMEOUT={value!r}, using {DEFAULT_SHUTDOWN_TIMEOUT}"
            )
            return DEFAULT_SHUTDOWN_TIMEOUT
        return timeout

    @field_validator("log_level", mode="before")
    @classmethod
    def _fallback_log_level(cls, value):
        """Accept any level uvicorn knows, in any case; stored upper-cased."""
        level = str(value).strip().lower()
        if level not in LOG_LEVELS:
            logger.warning(f"Ignoring unknown LOG_LEVEL={value!r}, using {DEFAULT_LOG_LEVEL}")
            return DEFAULT_LOG_LEVEL
        return level.upper()


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings (resolved once)."""
    return Settings()

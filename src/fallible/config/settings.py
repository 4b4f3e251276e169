"""Environment-based configuration using pydantic-settings.

Example:
    >>> from fallible.config import get_settings
    >>> get_settings().error_domain
    'fallible'

    # Or with environment variables:
    # FALLIBLE_ERROR_DOMAIN=billing
    # FALLIBLE_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration for the boundary modules."""

    model_config = SettingsConfigDict(
        env_prefix="FALLIBLE_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_captured: bool = Field(default=True, description="Log exceptions captured into Err at DEBUG")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class FallibleSettings(BaseSettings):
    """Root settings, loaded from FALLIBLE_* environment variables and `.env`.

    Example environment variables:
        FALLIBLE_ERROR_DOMAIN=payments
        FALLIBLE_CAPTURE_TRACEBACK=true
        FALLIBLE_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="FALLIBLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    error_domain: Annotated[str, Field(min_length=1)] = "fallible"
    capture_traceback: bool = Field(default=False, description="Keep traceback text on errors built from exceptions")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> FallibleSettings:
    """Get the global settings instance (cached)."""
    return FallibleSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() rereads the environment."""
    get_settings.cache_clear()

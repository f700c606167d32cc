"""Environment configuration and logging setup for the CLI and HTTP entry points.

The conversion core never reads configuration: these settings only pick
defaults for the outer surfaces (scale mode when a request does not say,
request size limits, log level).
"""

from __future__ import annotations

import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables (optionally via a local `.env`)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    short_scale: bool = Field(default=False, alias="NUMERALS_SHORT_SCALE")
    max_phrase_length: int = Field(default=500, ge=1, alias="NUMERALS_MAX_PHRASE_LENGTH")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If an environment value is present but invalid.
    """
    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc


def configure_logging(settings: Settings) -> None:
    """Configure Python logging for the process."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

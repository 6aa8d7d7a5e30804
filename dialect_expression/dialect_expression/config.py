"""Configuration loaded from environment variables."""

from __future__ import annotations

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Settings loaded from environment variables with DIALECT_EXPRESSION_ prefix."""

    model_config = SettingsConfigDict(
        env_prefix="DIALECT_EXPRESSION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    debug: bool = False

    # Database
    database_url: str = "sqlite://"
    echo: bool = False

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        try:
            make_url(v)
        except ArgumentError as exc:
            raise ValueError(f"Invalid database URL: {v!r}") from exc
        return v


def load_settings(**overrides: object) -> Settings:
    """Load settings from environment, with optional overrides for testing."""
    settings = Settings(**overrides)  # type: ignore[arg-type]

    if settings.debug:
        logger.info(
            "Loaded settings for database: %s",
            make_url(settings.database_url).render_as_string(hide_password=True),
        )

    return settings

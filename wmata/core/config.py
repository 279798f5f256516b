"""Application configuration.

Environment variables are loaded from .env file and can be overridden.
All settings have sensible defaults except the API key, which must be
supplied before any request is made.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wmata.core.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    ResponseFormat,
)

_LOG_LEVELS = frozenset(
    logging.getLevelName(level)
    for level in (
        logging.DEBUG,
        logging.INFO,
        logging.WARNING,
        logging.ERROR,
        logging.CRITICAL,
    )
)


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    # ==========================================================================
    # WMATA API
    # ==========================================================================

    wmata_api_key: str = Field(
        default="",
        alias="WMATA_API_KEY",
        description="Subscription key sent in the api_key header.",
    )
    wmata_base_url: str = Field(default=DEFAULT_BASE_URL, alias="WMATA_BASE_URL")
    wmata_timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS, alias="WMATA_TIMEOUT_SECONDS", gt=0
    )
    wmata_response_format: ResponseFormat = Field(
        default=ResponseFormat.JSON, alias="WMATA_RESPONSE_FORMAT"
    )

    # ==========================================================================
    # Logging
    # ==========================================================================

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # ==========================================================================
    # Pydantic Settings Config
    # ==========================================================================

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # ==========================================================================
    # Validators
    # ==========================================================================

    @field_validator("wmata_base_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, value: Any) -> str:
        return str(value).strip().rstrip("/")

    @field_validator("wmata_response_format", mode="before")
    @classmethod
    def parse_response_format(cls, value: Any) -> ResponseFormat:
        """Accept 'json'/'xml' in any case."""
        return ResponseFormat.parse(value)

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, value: Any) -> str:
        level = str(value).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level '{value}'.")
        return level


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()

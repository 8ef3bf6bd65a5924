"""Core configuration.

- Centralises environment variables (pydantic-settings) away from the CLI.
- Adapters (HTTP) and the printer read their knobs from the same object.

With no environment variables and no `.env` file the defaults reproduce the
plain behaviour: the SF dataset, pages of 10 rows, a 4-space column buffer.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_DATASET_URL = "http://data.sfgov.org/resource/bbb8-hzi6.json"


class AppSettings(BaseSettings):
    """Central application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FOODTRUCK_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    dataset_url: str = Field(
        default=DEFAULT_DATASET_URL,
        min_length=8,
        description="JSON endpoint of the mobile food schedule dataset.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout for the dataset request (seconds).",
    )
    user_agent: str = Field(
        default="foodtruck-finder/0.1",
        min_length=1,
        description="User-Agent sent with the dataset request.",
    )

    page_size: int = Field(
        default=10,
        ge=1,
        description="Rows printed before waiting for the user to press Enter.",
    )
    col_buffer: int = Field(
        default=4,
        ge=0,
        description="Extra spaces between the NAME and ADDRESS columns.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Root log level (DEBUG, INFO, WARNING, ERROR).",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level

    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

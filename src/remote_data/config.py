"""
Configuration — typed, validated settings for the HTTP transport.

Uses pydantic-settings to:
  - Load from environment variables prefixed with REMOTE_DATA_
  - Fall back to a .env file in the working directory
  - Validate types and constraints when the settings are built

    REMOTE_DATA_BASE_URL=https://api.example.com
    REMOTE_DATA_TIMEOUT_SECONDS=10
    REMOTE_DATA_HEADERS='{"Accept": "application/json"}'
    REMOTE_DATA_LOG_FORMAT=json
"""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ClientSettings(BaseSettings):
    """
    Settings for remote_data.http_client and remote_data.log.

    Load order (highest priority first):
      1. Keyword arguments
      2. Environment variables
      3. .env file
      4. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="REMOTE_DATA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(default="", description="Prefix joined to relative request URLs")
    timeout_seconds: float = Field(default=30.0, gt=0, description="Per-request timeout")
    follow_redirects: bool = Field(default=False)
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Default headers; per-request headers take precedence",
    )
    log_level: str = Field(default="INFO", description="Minimum level rendered by configure_logging")
    log_format: Literal["console", "json"] = Field(default="console")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept standard level names in any case; store them upper-cased."""
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {value!r}")
        return level

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level)


def load_settings() -> ClientSettings:
    """Build settings from the environment and .env file."""
    return ClientSettings()

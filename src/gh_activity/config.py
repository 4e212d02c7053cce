"""Configuration for the activity CLI.

Settings are read from environment variables only:
- GITHUB_BASE_URL      (optional, useful for GitHub Enterprise)
- GH_ACTIVITY_TIMEOUT  (optional, seconds)
- LOG_LEVEL            (optional)
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ActivitySettings(BaseSettings):
    """Runtime settings for fetching events."""

    github_base_url: str = Field(
        default="https://api.github.com",
        validation_alias="GITHUB_BASE_URL",
        description="GitHub API base URL",
    )
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        allow_inf_nan=False,
        validation_alias="GH_ACTIVITY_TIMEOUT",
        description="Timeout in seconds for the events request",
    )
    log_level: str = Field(
        default="WARNING",
        validation_alias="LOG_LEVEL",
        description="Root logging level (logs go to stderr)",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
    )

    @field_validator("github_base_url")
    @classmethod
    def _require_base_url(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("GITHUB_BASE_URL must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level: {value!r}")
        return level

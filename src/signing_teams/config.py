"""
Configuration — typed, validated settings loaded from environment/.env.

Uses pydantic-settings. Every variable carries the SIGNING_TEAMS_ prefix and
nested models use "__" as delimiter, so SIGNING_TEAMS_SECURITY__EXECUTABLE
maps to security.executable. A `.env` file in the working directory is read
as a fallback; environment variables win.

    SIGNING_TEAMS_SECURITY__KEYCHAINS='["~/Library/Keychains/ci.keychain-db"]'
    SIGNING_TEAMS_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from signing_teams.adapters.security_command import (
    DEFAULT_CERTIFICATE_NAME,
    DEFAULT_EXECUTABLE,
)


class SecuritySettings(BaseModel):
    """How to invoke the keychain query tool."""

    executable: str = Field(
        default=DEFAULT_EXECUTABLE,
        description="Path or name of the `security` executable",
    )
    certificate_name: str = Field(
        default=DEFAULT_CERTIFICATE_NAME,
        description="Common-name substring passed to `find-certificate -c`",
    )
    keychains: list[str] = Field(
        default_factory=list,
        description="Keychains to search instead of the default search list",
    )

    @field_validator("executable", "certificate_name")
    @classmethod
    def reject_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class AppSettings(BaseSettings):
    """
    Root settings.

    Load order (highest priority first):
      1. Environment variables
      2. .env file
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="SIGNING_TEAMS_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    security: SecuritySettings = Field(default_factory=lambda: SecuritySettings())
    log_level: str = Field(default="WARNING")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept standard logging level names in any case."""
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level

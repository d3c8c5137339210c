# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application settings loaded from the environment."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration.

    Values come from environment variables (case-insensitive) or a ``.env``
    file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Back Office API"
    database_url: str = "sqlite:///./backoffice.db"
    log_level: str = "INFO"
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    # Header carrying the user id established by the upstream auth layer
    identity_header: str = "X-Authenticated-User"

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unsupported log level: {value}")
        return level

    @field_validator("identity_header")
    @classmethod
    def _require_identity_header(cls, value: str) -> str:
        header = value.strip()
        if not header:
            raise ValueError("identity_header must not be blank")
        return header


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()

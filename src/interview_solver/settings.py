"""Environment settings for the interview solver."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class SolverSettings(BaseSettings):
    """Startup values loaded from environment variables or a .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Credential and target language
    gemini_api_key: str | None = None
    language: str | None = None

    # Logging
    log_level: str = "INFO"
    log_json_format: bool = True


@lru_cache
def get_settings() -> SolverSettings:
    """Get cached settings instance."""
    return SolverSettings()

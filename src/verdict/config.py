"""Configuration settings for verdict."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from verdict.core.models import ResultsFormat


class Settings(BaseSettings):
    """Settings loaded from ``VERDICT_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="VERDICT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Results
    results_format: ResultsFormat = ResultsFormat.NUNIT
    results_files: list[Path] = Field(default_factory=list)

    # Matching
    case_sensitive: bool = True
    strict: bool = False

    # Logging
    log_level: str = "WARNING"
    log_json_format: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

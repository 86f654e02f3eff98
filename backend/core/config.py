"""
Configuration management using Pydantic Settings.
Values come from UTBK_* environment variables or a local .env file.
"""

import os
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class Settings(BaseSettings):
    """Application settings with validation."""

    model_config = SettingsConfigDict(
        env_prefix="UTBK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    DATA_FILE: str = Field(
        default=os.path.join(PROJECT_ROOT, "data", "skor.json"),
        description="JSON file with the minimum-score records",
    )
    CACHE_THRESHOLDS: bool = Field(
        default=False,
        description="Keep the dataset in memory after the first successful load",
    )
    LOG_LEVEL: str = Field(default="INFO")
    CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["*"])

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"LOG_LEVEL must be a standard logging level, got {v!r}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()

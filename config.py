"""
Configuration settings for drill-trainer.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from DRILL_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DRILL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Storage
    # ========================================
    state_dir: Path = Field(
        default=Path("."),
        description="Directory holding <name>.json session files",
    )

    # ========================================
    # Drill
    # ========================================
    working_set_size: int = Field(
        default=7,
        ge=1,
        description="Number of questions drilled at the same time",
    )
    bank_min: int = Field(
        default=1,
        description="Smallest operand of the default addition bank",
    )
    bank_max: int = Field(
        default=10,
        description="Largest operand of the default addition bank",
    )
    skip_first_answer: bool = Field(
        default=True,
        description="Treat the first answer of each run as warm-up and ignore it",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for question picking (random when unset)",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: str = Field(
        default="WARNING",
        description="Loguru level for the stderr sink",
    )
    echo_log: bool = Field(
        default=False,
        description="Echo every diagnostic to stderr as '// <message>'",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

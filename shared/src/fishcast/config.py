"""Application configuration from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Validation harness
    sun_tolerance_minutes: float = Field(default=15.0, gt=0, alias="FISHCAST_SUN_TOLERANCE_MINUTES")
    moon_tolerance: float = Field(default=0.15, gt=0, le=0.5, alias="FISHCAST_MOON_TOLERANCE")

    # Logging
    log_level: str = Field(default="INFO", alias="FISHCAST_LOG_LEVEL")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reset_settings_cache() -> None:
    """Clear cached settings (useful in tests)."""
    get_settings.cache_clear()

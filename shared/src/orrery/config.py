"""Engine configuration from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    # Generation
    max_positions: int = Field(default=10_000, ge=1, alias="ORRERY_MAX_POSITIONS")
    default_aspect_orb: float = Field(default=5.0, ge=0.0, alias="ORRERY_DEFAULT_ASPECT_ORB")
    generation_timeout_seconds: float = Field(default=30.0, gt=0.0, alias="ORRERY_GENERATION_TIMEOUT_SECONDS")

    # Validation
    validation_tolerance: float = Field(default=1.0, ge=0.0, alias="ORRERY_VALIDATION_TOLERANCE")
    validation_max_reference_points: int = Field(default=100, ge=0, alias="ORRERY_VALIDATION_MAX_REFERENCE_POINTS")
    validation_match_window_hours: float = Field(default=24.0, gt=0.0, alias="ORRERY_VALIDATION_MATCH_WINDOW_HOURS")

    # Logging
    log_level: str = Field(default="INFO", alias="ORRERY_LOG_LEVEL")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reset_settings_cache() -> None:
    """Clear cached settings (useful in tests)."""
    get_settings.cache_clear()

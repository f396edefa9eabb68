"""Typed settings configuration - single source of truth for policy constants."""

from datetime import time
from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Destination sequencing
    default_visit_days: int = 3

    # Activity scheduling
    default_activity_minutes: int = 120
    day_window_start: time = time(6, 0)
    day_window_end: time = time(23, 0)
    min_free_slot_minutes: int = 30

    # Budget status thresholds (percent used)
    budget_over_pct: float = 100
    budget_near_limit_pct: float = 80
    budget_on_track_pct: float = 50

    @model_validator(mode="after")
    def validate_policy(self) -> "Settings":
        """Ensure the day window and budget thresholds are coherent."""
        if self.day_window_start >= self.day_window_end:
            raise ValueError("day_window_start must be before day_window_end")
        if not self.budget_over_pct > self.budget_near_limit_pct > self.budget_on_track_pct:
            raise ValueError("budget thresholds must be strictly descending")
        if self.default_visit_days < 0 or self.default_activity_minutes < 0:
            raise ValueError("default durations must be non-negative")
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

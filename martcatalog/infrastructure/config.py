"""Engine configuration.

Loads settings from environment variables with sensible defaults.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from MARTCATALOG_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MARTCATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Pagination
    default_page_size: int = Field(default=24, gt=0)
    infinite_page_size: int = Field(default=24, gt=0)

    # Query cache
    cache_max_size: int = Field(default=50, gt=0)
    cache_ttl_seconds: float = Field(default=300.0, gt=0)

    # Simulated latency
    simulate_latency: bool = True
    latency_scale: float = Field(default=1.0, ge=0)

    # Recommendations and search
    featured_limit: int = Field(default=8, gt=0)
    related_limit: int = Field(default=4, gt=0)
    suggestion_limit: int = Field(default=10, gt=0)
    min_suggestion_length: int = Field(default=2, ge=1)
    search_max_length: int = Field(default=100, gt=0)
    random_seed: int | None = None

    # Logging
    log_level: str = "INFO"
    log_json: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get process-wide settings, loaded once."""
    return Settings()

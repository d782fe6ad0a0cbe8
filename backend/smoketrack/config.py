"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - civil_utc_offset_hours is the only source for the calendar timezone

Design Decisions:
    - Defaults provided for all non-secret settings so docker-compose works as-is
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://smoketrack:smoketrack@db:5432/smoketrack"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Calendar boundaries (day/week/month) are computed in this fixed zone
    civil_utc_offset_hours: int = 8

    # Violation ledger
    violation_list_default_limit: int = 50
    violation_list_max_limit: int = 500

    # Statistics
    statistics_trend_days: int = 30

    # Leaderboard
    leaderboard_limit: int = 100

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("civil_utc_offset_hours")
    @classmethod
    def check_offset(cls, v: int) -> int:
        if not -12 <= v <= 14:
            raise ValueError("civil_utc_offset_hours must be within -12..14")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()

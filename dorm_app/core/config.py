"""Application configuration settings."""

from functools import lru_cache
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Dormitory Management Dashboard"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    API_V1_PREFIX: str = "/api/v1"

    # Login gate (single hardcoded account)
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "123456"

    # Reporting
    TIMEZONE: str = "UTC"
    REPORT_LANGUAGE: Literal["en", "ar"] = "en"

    # Demo data
    SEED_DEMO_DATA: bool = True
    SEED_RANDOM_SEED: int | None = None

    CORS_ORIGINS: list[str] = ["*"]

    @field_validator("TIMEZONE")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except ZoneInfoNotFoundError as exc:
            raise ValueError(f"Unknown timezone: {v}") from exc
        return v

    @property
    def tzinfo(self) -> ZoneInfo:
        """Timezone used to sample "now" for dates and reports."""
        return ZoneInfo(self.TIMEZONE)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key for signing JWT tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        default=60,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    app_timezone: str = Field(
        default="UTC",
        description="IANA timezone (or UTC offset) used for calendar-day labels",
    )
    feed_window_hours: int = Field(
        default=24,
        description="Width of the window in which a user's actions merge into one card",
        gt=0,
    )
    feed_page_size: int = Field(
        default=20,
        description="Number of recent posts consolidated for a feed page",
        gt=0,
        le=200,
    )
    feed_preview_limit: int = Field(
        default=3,
        description="Items rendered inline per card before the '+N more' disclosure",
        gt=0,
    )
    cors_origins: str = Field(
        default="http://localhost:5173",
        description="Comma separated origins allowed to call the API from a browser",
    )

    @property
    def allowed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def feed_window_seconds(self) -> int:
        return self.feed_window_hours * 3600


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear cached settings and everything derived from them."""

    from consumed.utils.datetime import get_app_timezone

    get_settings.cache_clear()
    get_app_timezone.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]

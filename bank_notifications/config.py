"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

StorageBackend = Literal["memory", "database"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    app_timezone: str = Field(
        default="UTC",
        description="Timezone used to stamp creation and delivery times",
    )
    storage_backend: StorageBackend = Field(
        default="memory",
        description="Where notifications are kept: a process-local dict or a SQL database",
    )
    database_url: str = Field(
        default="sqlite+pysqlite:///:memory:",
        description="SQLAlchemy URL used when STORAGE_BACKEND is 'database'",
        min_length=1,
    )
    log_level: LogLevel = Field(
        default="INFO",
        description="Root logging level applied when the API application starts",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]

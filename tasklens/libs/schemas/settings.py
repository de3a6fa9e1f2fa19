"""Application settings management leveraging pydantic v2."""

from __future__ import annotations

import os
from functools import lru_cache
from typing import List

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

if os.getenv("ENV", "development") in {"development", "dev", "local"}:
    from dotenv import load_dotenv

    load_dotenv(override=False)


class AppSettings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    app_name: str = Field(
        default="Tasklens",
        validation_alias=AliasChoices("APP_NAME", "TASKLENS_APP_NAME"),
    )
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("ENVIRONMENT", "TASKLENS_ENVIRONMENT"),
    )
    api_prefix: str = Field(
        default="/api",
        validation_alias=AliasChoices("API_PREFIX", "TASKLENS_API_PREFIX"),
    )
    # JSON list in the environment, e.g. '["http://localhost:3000"]'.
    cors_allow_origins: List[str] = Field(
        default_factory=lambda: ["*"],
        validation_alias=AliasChoices("CORS_ALLOW_ORIGINS", "TASKLENS_CORS_ALLOW_ORIGINS"),
    )
    enable_metrics: bool = Field(
        default=True,
        validation_alias=AliasChoices("ENABLE_METRICS", "TASKLENS_ENABLE_METRICS"),
    )

    model_config = SettingsConfigDict(
        env_file=(".env", "tasklens/.env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_development(self) -> bool:
        return self.environment.lower() in {"development", "dev", "local", "test"}


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Load environment variables and return a cached settings instance."""

    return AppSettings()


__all__ = ["AppSettings", "get_settings"]

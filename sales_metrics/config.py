"""
Configuration settings for seller sales metrics.

Uses Pydantic Settings to load environment variables for logging and the
analysis defaults the CLI applies. The analyzer itself never reads settings;
callers pass an `AnalysisOptions` explicitly.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Analysis defaults
    top_products_limit: int = Field(10, ge=1, alias="TOP_PRODUCTS_LIMIT")
    revenue_strategy: str = Field("simple", alias="REVENUE_STRATEGY")
    bonus_strategy: str = Field("by_profit", alias="BONUS_STRATEGY")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]

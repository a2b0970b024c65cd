"""
Configuration management for the News Aggregator.

Uses Pydantic settings for type-safe configuration with environment variable support.
All settings can be overridden via environment variables or a local .env file.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .types import DEFAULT_CATEGORIES


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Credentials are read from NEWS_API_KEY and GUARDIAN_API_KEY.
    Categories can be overridden with a JSON list: CATEGORIES='["business", "science"]'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ==========================================================================
    # Application Metadata
    # ==========================================================================
    app_name: str = "News Aggregator"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = Field(default="INFO", description="Root log level for CLI and API")

    # ==========================================================================
    # Provider Credentials
    # ==========================================================================
    news_api_key: Optional[str] = Field(
        default=None,
        description="NewsAPI.org API key (top-headlines)",
    )
    guardian_api_key: Optional[str] = Field(
        default=None,
        description="Guardian Open Platform API key (content search)",
    )

    # ==========================================================================
    # Provider Endpoints
    # ==========================================================================
    newsapi_base_url: str = "https://newsapi.org/v2"
    guardian_base_url: str = "https://content.guardianapis.com"
    news_language: str = "en"
    guardian_show_fields: str = "headline,byline,trailText"

    # ==========================================================================
    # Aggregation
    # ==========================================================================
    request_timeout: float = Field(default=10.0, gt=0, description="Per-request timeout in seconds")
    max_concurrent_categories: int = Field(
        default=4,
        ge=1,
        le=32,
        description="Categories fetched at once by fetch_all (1 = one category at a time)",
    )
    default_top_limit: int = Field(default=10, ge=1, le=100)
    categories: tuple[str, ...] = Field(default=DEFAULT_CATEGORIES)

    @field_validator("categories")
    @classmethod
    def _check_categories(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("at least one category is required")
        if any(not c for c in value):
            raise ValueError("categories must be non-empty strings")
        if len(set(value)) != len(value):
            raise ValueError("categories must be unique")
        return value


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()

"""Configuration management using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Matching
    match_threshold: float = Field(
        default=0.3,
        ge=0.0,
        description="Minimum combined score for a query to resolve to an intent",
    )
    catalog_path: str | None = Field(
        default=None,
        description="Path to an intent catalog JSON file (packaged catalog if unset)",
    )

    # API Settings
    api_title: str = Field(
        default="FAQ Intent Matcher",
        description="API title",
    )
    api_version: str = Field(
        default="0.1.0",
        description="API version",
    )
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins for the chat widget",
    )

    # Observability
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_json: bool = Field(
        default=True,
        description="Enable JSON structured logging",
    )
    enable_metrics: bool = Field(
        default=True,
        description="Expose Prometheus metrics on /metrics",
    )
    service_name: str = Field(
        default="faq-matcher",
        description="Service name for logs and metrics",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

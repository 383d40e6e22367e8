"""Application configuration.

Uses pydantic-settings for environment variable support.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support.

    All settings can be overridden via environment variables.
    Example: API_BASE_URL, HTTP_TIMEOUT, LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # Application
    # =========================================================================
    app_name: str = Field(default="posts_mcp", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )

    # =========================================================================
    # Remote posts resource
    # =========================================================================
    api_base_url: str = Field(
        default="http://localhost:3000/api/posts/",
        description="URL of the remote posts collection",
    )
    http_timeout: float = Field(
        default=30.0,
        gt=0,
        le=300,
        description="Transport timeout in seconds",
    )
    http_user_agent: str = Field(
        default="posts-mcp/0.1.0",
        description="User-Agent header sent with every request",
    )

    # =========================================================================
    # Logging
    # =========================================================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format",
    )
    log_file: str | None = Field(
        default=None,
        description="Optional log file path",
    )

    # =========================================================================
    # Validators
    # =========================================================================
    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        """Ensure the collection URL ends with a slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("api_base_url must be an http(s) URL")
        if not v.endswith("/"):
            v = f"{v}/"
        return v

    @property
    def effective_log_level(self) -> str:
        """Log level actually applied; debug mode forces DEBUG."""
        return "DEBUG" if self.debug else self.log_level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()

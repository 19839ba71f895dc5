"""Configuration management using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    Every field can be set with a ``POLYTORIA_`` prefixed environment variable
    (e.g. ``POLYTORIA_PT_AUTH_COOKIE``) or from a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="POLYTORIA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Rate Limiting
    handle_ratelimits: bool = Field(
        default=True,
        description="Retry requests that are rate limited (HTTP 429)",
    )
    ratelimit_base_delay_seconds: float = Field(
        default=0.25,
        ge=0,
        description="Delay before the first retry of a rate limited request",
    )
    ratelimit_delay_step_seconds: float = Field(
        default=0.25,
        ge=0,
        description="Delay added for every further retry",
    )
    ratelimit_max_retries: int | None = Field(
        default=None,
        ge=0,
        description="Maximum retries per request, None retries until the API recovers",
    )

    # Authentication
    pt_auth_cookie: str | None = Field(
        default=None,
        description="Value of the PT_AUTH cookie, required for internal APIs",
    )

    # Logging
    debug: bool = Field(
        default=True,
        description="Log every request attempt",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    # Endpoints
    api_base_url: str = Field(
        default="https://api.polytoria.com/v1",
        description="Root of the public API",
    )
    site_base_url: str = Field(
        default="https://polytoria.com",
        description="Root of the website, which hosts the internal APIs",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

"""
Shared configuration management for the scraper API.
"""

from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="allow"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")
    debug_mode: bool = Field(default=False)

    @property
    def effective_log_level(self) -> str:
        return "debug" if self.debug_mode else self.log_level


class CacheConfig(BaseConfig):
    """Redis cache settings.

    All fields are optional: with neither ``redis_url`` nor ``redis_addr``
    set the service runs without a cache.
    """

    redis_url: Optional[str] = Field(default=None)
    redis_addr: Optional[str] = Field(default=None)
    redis_password: Optional[str] = Field(default=None)
    redis_db: int = Field(default=0)

    @field_validator("redis_url", "redis_addr", "redis_password", mode="before")
    @classmethod
    def _blank_as_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("redis_db", mode="before")
    @classmethod
    def _lenient_db(cls, value: Any) -> int:
        # Unparseable index falls back to the default database
        try:
            return int(value)
        except (TypeError, ValueError):
            return 0


def get_config(**overrides: Any) -> CacheConfig:
    """Get cache configuration from the environment."""
    return CacheConfig(**overrides)

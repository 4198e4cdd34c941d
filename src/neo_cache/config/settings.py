"""
Application configuration for neo-cache.

Settings are built once at startup and passed down explicitly; the cache core
never reads a module-level settings instance.
"""
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..features.cache.entities.config import CacheSettings


class AppSettings(BaseSettings):
    """Service settings for the books API."""

    model_config = SettingsConfigDict(
        env_prefix="NEO_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore"
    )

    # Core Application Settings
    app_name: str = Field(default="neo-cache", description="Application name")
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Root log level")

    # Database Configuration
    database_url: Optional[str] = Field(default=None, description="PostgreSQL DSN, in-memory store if unset")
    database_schema: str = Field(default="public", description="Schema holding the books table")
    database_pool_min_size: int = Field(default=1, ge=1, description="Minimum pool connections")
    database_pool_max_size: int = Field(default=10, ge=1, description="Maximum pool connections")

    # Cache Configuration
    cache: CacheSettings = Field(default_factory=CacheSettings)

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate log level."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unsupported log level: {v}")
        return level

    @field_validator('database_schema')
    @classmethod
    def validate_schema(cls, v: str) -> str:
        """Schema names are interpolated into SQL, allow identifiers only."""
        if not v.replace("_", "").isalnum():
            raise ValueError(f"Invalid schema name: {v}")
        return v

    @model_validator(mode='after')
    def validate_pool_sizes(self) -> "AppSettings":
        if self.database_pool_min_size > self.database_pool_max_size:
            raise ValueError("database_pool_min_size cannot exceed database_pool_max_size")
        return self

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def uses_postgres(self) -> bool:
        return bool(self.database_url)

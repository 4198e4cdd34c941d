"""Cache configuration for neo-cache."""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .protocols import CacheBackend


class CacheSettings(BaseSettings):
    """Two-tier cache settings."""
    
    model_config = SettingsConfigDict(
        env_prefix="NEO_CACHE_",
        case_sensitive=False,
        extra="ignore"
    )
    
    # Remote tier
    remote_backend: CacheBackend = Field(default=CacheBackend.REDIS, description="Remote cache backend")
    redis_url: str = Field(default="redis://localhost:6379/0", description="Redis connection URL")
    redis_key_prefix: str = Field(default="", description="Prefix applied to every Redis key")
    redis_connection_timeout: float = Field(default=5.0, gt=0, description="Redis connection timeout in seconds")
    redis_command_timeout: float = Field(default=3.0, gt=0, description="Redis command timeout in seconds")
    redis_max_connections: int = Field(default=50, ge=1, description="Max Redis connections")
    redis_envelope_enabled: bool = Field(default=True, description="Frame Redis values with a metadata envelope")
    remote_ttl_seconds: Optional[int] = Field(default=None, description="Remote entry TTL, None for no expiry")
    
    # Local tier
    local_ttl_seconds: Optional[int] = Field(default=None, description="Local entry TTL, None for process lifetime")
    local_max_entries: Optional[int] = Field(default=None, description="Local LRU bound, None for unbounded")
    
    @field_validator('remote_ttl_seconds', 'local_ttl_seconds', 'local_max_entries')
    @classmethod
    def validate_positive(cls, v):
        """Optional limits must be positive when set."""
        if v is not None and v <= 0:
            raise ValueError(f"Must be a positive integer or unset, got {v}")
        return v

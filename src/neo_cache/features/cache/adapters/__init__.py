"""Cache adapters - local tier and remote (Redis / in-memory) implementations."""

from .memory_adapter import LocalCache, MemoryRemoteCache
from .redis_adapter import RedisRemoteCache, create_redis_client, create_redis_remote_cache

__all__ = [
    "LocalCache",
    "MemoryRemoteCache",
    "RedisRemoteCache",
    "create_redis_client",
    "create_redis_remote_cache",
]

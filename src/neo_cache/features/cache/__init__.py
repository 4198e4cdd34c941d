"""Two-tier cache feature for neo-cache.

A process-local tier and a shared remote tier in front of a durable backing
store, coordinated by ``CacheOrchestrator``.
"""

from .entities import (
    Store,
    RemoteCache,
    EntryCodec,
    CacheBackend,
    CacheEntry,
    CacheSettings,
)
from .adapters import (
    LocalCache,
    MemoryRemoteCache,
    RedisRemoteCache,
    create_redis_client,
    create_redis_remote_cache,
)
from .codecs import JsonEntryCodec, extract_payload
from .services import (
    CacheOrchestrator,
    CacheTier,
    LoadResult,
    SingleFlight,
    create_cache_orchestrator,
)

__all__ = [
    # Entities
    "Store",
    "RemoteCache",
    "EntryCodec",
    "CacheBackend",
    "CacheEntry",
    "CacheSettings",

    # Adapters
    "LocalCache",
    "MemoryRemoteCache",
    "RedisRemoteCache",
    "create_redis_client",
    "create_redis_remote_cache",

    # Codecs
    "JsonEntryCodec",
    "extract_payload",

    # Services
    "CacheOrchestrator",
    "CacheTier",
    "LoadResult",
    "SingleFlight",
    "create_cache_orchestrator",
]

"""neo-cache - two-tier read-through caching for async services.

A process-local tier and a shared Redis tier in front of a durable store,
with a books API built on top.
"""

from .__version__ import __version__
from .features.cache import (
    CacheOrchestrator,
    LoadResult,
    LocalCache,
    MemoryRemoteCache,
    RedisRemoteCache,
    JsonEntryCodec,
    SingleFlight,
    CacheSettings,
    create_cache_orchestrator,
)

__all__ = [
    "__version__",
    "CacheOrchestrator",
    "LoadResult",
    "LocalCache",
    "MemoryRemoteCache",
    "RedisRemoteCache",
    "JsonEntryCodec",
    "SingleFlight",
    "CacheSettings",
    "create_cache_orchestrator",
]

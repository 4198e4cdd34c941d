"""Cache entities - domain objects, protocols and configuration."""

from .protocols import Store, RemoteCache, EntryCodec, CacheBackend
from .cache_entry import CacheEntry
from .config import CacheSettings

__all__ = [
    "Store",
    "RemoteCache",
    "EntryCodec",
    "CacheBackend",
    "CacheEntry",
    "CacheSettings",
]

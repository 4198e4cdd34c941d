"""In-memory cache adapters for neo-cache.

``LocalCache`` is the process-local tier: synchronous, never performs I/O and
is discarded with the process. ``MemoryRemoteCache`` implements the remote
cache protocol in-process so several orchestrators can share one "remote"
tier in tests and single-process development.
"""

import asyncio
import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from ..entities.cache_entry import CacheEntry

logger = logging.getLogger(__name__)
V = TypeVar('V')


class LocalCache(Generic[V]):
    """Thread-safe in-process key to CacheEntry map.

    Unbounded and non-expiring by default. ``max_entries`` turns on LRU
    eviction, ``ttl_seconds`` makes entries expire lazily on read.
    """

    def __init__(
        self,
        max_entries: Optional[int] = None,
        ttl_seconds: Optional[int] = None,
        clock: Callable[[], float] = time.time
    ):
        if max_entries is not None and max_entries <= 0:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        if ttl_seconds is not None and ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")

        self._entries: "OrderedDict[Any, CacheEntry[V]]" = OrderedDict()
        self._max_entries = max_entries
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._stats = {
            "hits": 0,
            "misses": 0,
            "sets": 0,
            "deletes": 0,
            "evictions": 0,
            "expirations": 0,
        }

    def get(self, key: Any) -> Optional[CacheEntry[V]]:
        """Get entry by key, None on miss or expiry."""
        with self._lock:
            entry = self._entries.get(key)

            if entry is None:
                self._stats["misses"] += 1
                return None

            if entry.is_expired(self._ttl_seconds, self._clock()):
                del self._entries[key]
                self._stats["expirations"] += 1
                self._stats["misses"] += 1
                return None

            # Move to end for LRU tracking
            self._entries.move_to_end(key)
            self._stats["hits"] += 1
            return entry

    def set(self, key: Any, value: V) -> CacheEntry[V]:
        """Store value under key, evicting the least recently used entry when full."""
        entry = CacheEntry(key=key, value=value, stored_at=self._clock())

        with self._lock:
            if key in self._entries:
                del self._entries[key]
            elif self._max_entries is not None and len(self._entries) >= self._max_entries:
                evicted_key, _ = self._entries.popitem(last=False)
                self._stats["evictions"] += 1
                logger.debug(f"Evicted local cache entry {evicted_key!r}")

            self._entries[key] = entry
            self._stats["sets"] += 1

        return entry

    def delete(self, key: Any) -> bool:
        """Delete entry, True if it existed."""
        with self._lock:
            if key in self._entries:
                del self._entries[key]
                self._stats["deletes"] += 1
                return True
            return False

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._entries.clear()

    def keys(self) -> List[Any]:
        """Snapshot of current keys, least recently used first."""
        with self._lock:
            return list(self._entries.keys())

    def get_stats(self) -> Dict[str, Any]:
        """Get local tier statistics."""
        with self._lock:
            total_requests = self._stats["hits"] + self._stats["misses"]
            hit_rate = (self._stats["hits"] / total_requests) if total_requests > 0 else 0.0

            return {
                **self._stats,
                "size": len(self._entries),
                "max_entries": self._max_entries,
                "ttl_seconds": self._ttl_seconds,
                "hit_rate": hit_rate,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: Any) -> bool:
        with self._lock:
            entry = self._entries.get(key)
            return entry is not None and not entry.is_expired(self._ttl_seconds, self._clock())


@dataclass
class _RemoteEntry:
    value: bytes
    expires_at: Optional[float] = None

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and now >= self.expires_at


class MemoryRemoteCache:
    """In-process implementation of the RemoteCache protocol."""

    def __init__(self, clock: Callable[[], float] = time.time):
        self._data: Dict[str, _RemoteEntry] = {}
        self._clock = clock
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> Optional[bytes]:
        """Get raw bytes for key."""
        async with self._lock:
            entry = self._data.get(key)
            if entry is None:
                return None
            if entry.is_expired(self._clock()):
                del self._data[key]
                return None
            return entry.value

    async def set(self, key: str, value: bytes, ttl: Optional[int] = None) -> bool:
        """Store raw bytes with optional TTL."""
        expires_at = self._clock() + ttl if ttl and ttl > 0 else None
        async with self._lock:
            self._data[key] = _RemoteEntry(value=bytes(value), expires_at=expires_at)
        return True

    async def delete(self, key: str) -> bool:
        """Delete key, True if it existed."""
        async with self._lock:
            return self._data.pop(key, None) is not None

    async def ping(self) -> bool:
        """Always healthy."""
        return True

    def __len__(self) -> int:
        return len(self._data)

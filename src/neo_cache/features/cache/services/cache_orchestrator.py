"""Cache orchestrator - read-through two-tier cache in front of a store.

Reads go local tier → remote tier → backing store, populating the tiers on
the way back. Writes commit to the backing store first and then update or
evict the remote tier and the local tier, in that order. Only backing store
failures are surfaced; every cache tier failure degrades to the next tier.
"""

import functools
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Generic, Iterator, Optional, TypeVar

from ..adapters.memory_adapter import LocalCache, MemoryRemoteCache
from ..adapters.redis_adapter import create_redis_remote_cache
from ..entities.config import CacheSettings
from ..entities.protocols import CacheBackend, EntryCodec, RemoteCache, Store
from .single_flight import SingleFlight
from ....core.exceptions.database import (
    StoreError,
    StoreUnavailableError,
    EntityNotFoundError,
)

logger = logging.getLogger(__name__)

K = TypeVar('K')
V = TypeVar('V')
T = TypeVar('T')

_MISSING = object()


class CacheTier(str, Enum):
    """Tier that answered a load."""
    LOCAL = "local"
    REMOTE = "remote"
    STORE = "store"


@dataclass(frozen=True)
class LoadResult(Generic[V]):
    """Outcome of ``CacheOrchestrator.load``.

    Unpacks as ``value, found = await orchestrator.load(key)``.
    """

    value: Optional[V]
    found: bool
    source: Optional[CacheTier] = None

    def __iter__(self) -> Iterator[Any]:
        yield self.value
        yield self.found


class CacheOrchestrator(Generic[K, V]):
    """Two-tier read-through cache over a durable store.

    The orchestrator owns its local tier for its whole lifetime; a new
    orchestrator starts with an empty local tier while the remote tier and
    the store are shared. Concurrent loads that miss the local tier for the
    same key are coalesced into a single upstream fetch.

    ``put`` and ``invalidate`` do not take part in load coalescing, so a load
    racing a write may briefly repopulate the local tier with the value it
    fetched before the write. That window is accepted.
    """

    def __init__(
        self,
        store: Store[K, V],
        remote_cache: RemoteCache,
        codec: EntryCodec[V],
        local_cache: Optional[LocalCache[V]] = None,
        key_builder: Callable[[K], str] = str,
        remote_ttl_seconds: Optional[int] = None
    ):
        """Initialize cache orchestrator.

        Args:
            store: Backing store, the source of truth
            remote_cache: Shared remote cache tier
            codec: Codec for the remote tier byte representation
            local_cache: Process-local tier, a fresh unbounded one if omitted
            key_builder: Maps an entity key to its cache key
            remote_ttl_seconds: TTL passed to the remote tier on writes
        """
        self._store = store
        self._remote = remote_cache
        self._codec = codec
        self._local: LocalCache[V] = local_cache if local_cache is not None else LocalCache()
        self._key_builder = key_builder
        self._remote_ttl_seconds = remote_ttl_seconds
        self._single_flight: SingleFlight[LoadResult[V]] = SingleFlight()
        self._stats = {
            "local_hits": 0,
            "remote_hits": 0,
            "store_hits": 0,
            "misses": 0,
            "remote_errors": 0,
            "decode_errors": 0,
            "write_through_errors": 0,
        }

    @property
    def local_cache(self) -> LocalCache[V]:
        return self._local

    def cache_key(self, key: K) -> str:
        """Cache key used by both tiers for an entity key."""
        return self._key_builder(key)

    # Public operations

    async def load(self, key: K) -> LoadResult[V]:
        """Load a value through local tier, remote tier and store.

        Returns ``found=False`` when the store has no entity for key.

        Raises:
            StoreUnavailableError: If both cache tiers miss and the store fails
        """
        cache_key = self.cache_key(key)

        entry = self._local.get(cache_key)
        if entry is not None:
            self._stats["local_hits"] += 1
            logger.debug(f"Local cache hit for {cache_key}")
            return LoadResult(entry.value, True, CacheTier.LOCAL)

        return await self._single_flight.do(
            cache_key,
            functools.partial(self._load_upstream, key, cache_key)
        )

    async def put(self, key: K, value: V) -> None:
        """Write value to the store, then to the remote and local tiers.

        Raises:
            EntityNotFoundError: If the store has no entity for key
            StoreUnavailableError: If the store write fails; no tier is touched
        """
        await self._call_store("update", key, self._store.update(key, value))

        cache_key = self.cache_key(key)
        await self._write_remote(cache_key, value)
        self._write_local(cache_key, value)

    async def invalidate(self, key: K) -> None:
        """Delete key from the store, then from the remote and local tiers.

        A key absent from the store is still evicted from both tiers before
        the not-found condition is raised.

        Raises:
            EntityNotFoundError: If the store had nothing to delete
            StoreUnavailableError: If the store delete fails; no tier is touched
        """
        cache_key = self.cache_key(key)

        try:
            await self._call_store("delete", key, self._store.delete(key))
        except EntityNotFoundError:
            await self._evict(cache_key)
            raise

        await self._evict(cache_key)

    def get_stats(self) -> Dict[str, Any]:
        """Get orchestrator statistics."""
        return {
            **self._stats,
            "coalesced_loads": self._single_flight.coalesced_count,
            "in_flight_loads": len(self._single_flight),
            "local": self._local.get_stats(),
        }

    # Upstream read path

    async def _load_upstream(self, key: K, cache_key: str) -> LoadResult[V]:
        value = await self._read_remote(cache_key)
        if value is not _MISSING:
            self._stats["remote_hits"] += 1
            logger.debug(f"Remote cache hit for {cache_key}")
            self._write_local(cache_key, value)
            return LoadResult(value, True, CacheTier.REMOTE)

        value = await self._call_store("get", key, self._store.get(key))
        if value is None:
            self._stats["misses"] += 1
            logger.debug(f"Store miss for {cache_key}")
            return LoadResult(None, False)

        self._stats["store_hits"] += 1
        logger.debug(f"Store hit for {cache_key}, populating cache tiers")
        await self._write_remote(cache_key, value)
        self._write_local(cache_key, value)
        return LoadResult(value, True, CacheTier.STORE)

    async def _read_remote(self, cache_key: str) -> Any:
        try:
            raw = await self._remote.get(cache_key)
        except Exception as e:
            self._stats["remote_errors"] += 1
            logger.warning(f"Remote cache read failed for {cache_key}, treating as miss: {e}")
            return _MISSING

        if raw is None:
            return _MISSING

        try:
            return self._codec.decode(raw)
        except Exception as e:
            self._stats["decode_errors"] += 1
            logger.warning(f"Discarding undecodable remote entry for {cache_key}: {e}")
            return _MISSING

    # Best-effort tier writes

    async def _write_remote(self, cache_key: str, value: V) -> None:
        try:
            data = self._codec.encode(value)
            await self._remote.set(cache_key, data, self._remote_ttl_seconds)
        except Exception as e:
            self._stats["write_through_errors"] += 1
            logger.error(f"Failed to write {cache_key} to remote cache: {e}")

    def _write_local(self, cache_key: str, value: V) -> None:
        try:
            self._local.set(cache_key, value)
        except Exception as e:
            self._stats["write_through_errors"] += 1
            logger.error(f"Failed to write {cache_key} to local cache: {e}")

    async def _evict(self, cache_key: str) -> None:
        try:
            await self._remote.delete(cache_key)
        except Exception as e:
            self._stats["write_through_errors"] += 1
            logger.error(f"Failed to evict {cache_key} from remote cache: {e}")

        try:
            self._local.delete(cache_key)
        except Exception as e:
            self._stats["write_through_errors"] += 1
            logger.error(f"Failed to evict {cache_key} from local cache: {e}")

    # Store access

    async def _call_store(self, operation: str, key: K, call: Awaitable[T]) -> T:
        try:
            return await call
        except EntityNotFoundError:
            raise
        except StoreError as e:
            logger.error(f"Store {operation} failed for {key!r}: {e}")
            raise
        except Exception as e:
            logger.error(f"Store {operation} failed for {key!r}: {e}")
            raise StoreUnavailableError(
                f"Store {operation} failed for {key!r}: {e}",
                details={"operation": operation, "key": str(key)}
            ) from e


# Factory function for dependency injection
def create_cache_orchestrator(
    store: Store[K, V],
    codec: EntryCodec[V],
    settings: Optional[CacheSettings] = None,
    remote_cache: Optional[RemoteCache] = None,
    key_builder: Callable[[K], str] = str
) -> CacheOrchestrator[K, V]:
    """Create cache orchestrator from settings.

    Args:
        store: Backing store
        codec: Remote tier codec
        settings: Cache settings, read from the environment if omitted
        remote_cache: Remote tier, built from ``settings.remote_backend`` if omitted
        key_builder: Maps an entity key to its cache key

    Returns:
        Configured cache orchestrator with a fresh local tier
    """
    settings = settings or CacheSettings()

    if remote_cache is None:
        if settings.remote_backend == CacheBackend.REDIS:
            remote_cache = create_redis_remote_cache(settings)
        else:
            remote_cache = MemoryRemoteCache()

    return CacheOrchestrator(
        store=store,
        remote_cache=remote_cache,
        codec=codec,
        local_cache=LocalCache(
            max_entries=settings.local_max_entries,
            ttl_seconds=settings.local_ttl_seconds,
        ),
        key_builder=key_builder,
        remote_ttl_seconds=settings.remote_ttl_seconds,
    )

"""Tests for the local cache tier and the in-memory remote cache."""

import pytest

from neo_cache.features.cache.adapters.memory_adapter import LocalCache, MemoryRemoteCache
from neo_cache.features.cache.entities.cache_entry import CacheEntry


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestLocalCache:
    """Test LocalCache get/set/delete, LRU and TTL."""

    def test_set_and_get(self):
        cache = LocalCache()

        entry = cache.set("k", {"a": 1})

        assert isinstance(entry, CacheEntry)
        assert cache.get("k").value == {"a": 1}
        assert len(cache) == 1
        assert "k" in cache

    def test_get_missing_returns_none(self):
        cache = LocalCache()

        assert cache.get("missing") is None
        assert cache.get_stats()["misses"] == 1

    def test_set_overwrites(self):
        cache = LocalCache()
        cache.set("k", "old")
        cache.set("k", "new")

        assert cache.get("k").value == "new"
        assert len(cache) == 1

    def test_delete(self):
        cache = LocalCache()
        cache.set("k", "v")

        assert cache.delete("k") is True
        assert cache.delete("k") is False
        assert cache.get("k") is None

    def test_unbounded_by_default(self):
        cache = LocalCache()
        for i in range(1000):
            cache.set(i, i)

        assert len(cache) == 1000
        assert cache.get_stats()["evictions"] == 0

    def test_lru_eviction(self):
        cache = LocalCache(max_entries=2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.get("a")  # a is now most recently used
        cache.set("c", 3)

        assert cache.keys() == ["a", "c"]
        assert cache.get("b") is None
        assert cache.get_stats()["evictions"] == 1

    def test_overwrite_does_not_evict(self):
        cache = LocalCache(max_entries=2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.set("a", 10)

        assert sorted(cache.keys()) == ["a", "b"]
        assert cache.get_stats()["evictions"] == 0

    def test_ttl_expiry(self):
        clock = FakeClock()
        cache = LocalCache(ttl_seconds=10, clock=clock)
        cache.set("k", "v")

        clock.now += 9
        assert cache.get("k").value == "v"

        clock.now += 1
        assert cache.get("k") is None
        assert "k" not in cache
        assert cache.get_stats()["expirations"] == 1

    def test_entries_never_expire_without_ttl(self):
        clock = FakeClock()
        cache = LocalCache(clock=clock)
        cache.set("k", "v")

        clock.now += 10 ** 9

        assert cache.get("k").value == "v"

    def test_clear(self):
        cache = LocalCache()
        cache.set("a", 1)
        cache.set("b", 2)

        cache.clear()

        assert len(cache) == 0

    def test_stats_hit_rate(self):
        cache = LocalCache()
        cache.set("k", "v")
        cache.get("k")
        cache.get("missing")

        stats = cache.get_stats()
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["hit_rate"] == 0.5
        assert stats["size"] == 1

    @pytest.mark.parametrize("kwargs", [{"max_entries": 0}, {"ttl_seconds": -1}])
    def test_rejects_non_positive_limits(self, kwargs):
        with pytest.raises(ValueError):
            LocalCache(**kwargs)


class TestCacheEntry:
    """Test CacheEntry age and expiry helpers."""

    def test_age_and_expiry(self):
        entry = CacheEntry(key="k", value="v", stored_at=100.0)

        assert entry.age(130.0) == 30.0
        assert entry.is_expired(None, 10 ** 9) is False
        assert entry.is_expired(30, 129.0) is False
        assert entry.is_expired(30, 130.0) is True


class TestMemoryRemoteCache:
    """Test the in-process remote tier."""

    @pytest.mark.asyncio
    async def test_set_get_delete(self):
        remote = MemoryRemoteCache()

        assert await remote.set("k", b"payload") is True
        assert await remote.get("k") == b"payload"
        assert await remote.delete("k") is True
        assert await remote.delete("k") is False
        assert await remote.get("k") is None

    @pytest.mark.asyncio
    async def test_ttl(self):
        clock = FakeClock()
        remote = MemoryRemoteCache(clock=clock)
        await remote.set("k", b"v", ttl=5)

        clock.now += 4
        assert await remote.get("k") == b"v"

        clock.now += 1
        assert await remote.get("k") is None
        assert len(remote) == 0

    @pytest.mark.asyncio
    async def test_ping(self):
        assert await MemoryRemoteCache().ping() is True

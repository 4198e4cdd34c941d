"""Pytest configuration and fixtures for neo-cache tests."""

import asyncio
from typing import Callable, Dict, List, Optional
from unittest.mock import AsyncMock

import pytest

from neo_cache.core.exceptions import EntityNotFoundError
from neo_cache.features.books.entities.book import Book
from neo_cache.features.books.services.book_service import book_cache_key
from neo_cache.features.cache.adapters.memory_adapter import LocalCache, MemoryRemoteCache
from neo_cache.features.cache.codecs.json_codec import JsonEntryCodec
from neo_cache.features.cache.services.cache_orchestrator import CacheOrchestrator


class RecordingStore:
    """Dict-backed store that counts calls and can be slowed down or broken."""

    def __init__(self, delay: float = 0.0):
        self.data: Dict[int, Book] = {}
        self.delay = delay
        self.calls: List[str] = []
        self.get_calls = 0
        self.fail_with: Optional[Exception] = None

    async def _enter(self, operation: str) -> None:
        self.calls.append(operation)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail_with is not None:
            raise self.fail_with

    async def get(self, key: int) -> Optional[Book]:
        self.get_calls += 1
        await self._enter("get")
        return self.data.get(key)

    async def create(self, value: Book) -> int:
        await self._enter("create")
        key = max(self.data, default=0) + 1
        self.data[key] = value.with_id(key)
        return key

    async def update(self, key: int, value: Book) -> None:
        await self._enter("update")
        if key not in self.data:
            raise EntityNotFoundError("Book", str(key))
        self.data[key] = value

    async def delete(self, key: int) -> None:
        await self._enter("delete")
        if self.data.pop(key, None) is None:
            raise EntityNotFoundError("Book", str(key))

    async def list(self, predicate: Optional[Callable] = None, offset: int = 0, limit: int = 100) -> List[Book]:
        await self._enter("list")
        books = [self.data[k] for k in sorted(self.data)]
        if predicate is not None:
            books = [b for b in books if predicate(b)]
        return books[offset:offset + limit]


class FakeRedis:
    """Minimal async stand-in for a binary ``redis.asyncio.Redis`` client."""

    def __init__(self):
        self.data: Dict[str, bytes] = {}
        self.expirations: Dict[str, Optional[int]] = {}

    async def get(self, key):
        return self.data.get(key)

    async def set(self, key, value, ex=None):
        self.data[key] = value
        self.expirations[key] = ex
        return True

    async def delete(self, key):
        return 1 if self.data.pop(key, None) is not None else 0

    async def ping(self):
        return True

    async def aclose(self):
        pass


@pytest.fixture
def t1_book():
    """The book used by the staleness scenarios."""
    return Book(id=7, title="t1", author="a1", isbn="isbn1")


@pytest.fixture
def store():
    """Recording store for orchestrator tests."""
    return RecordingStore()


@pytest.fixture
def remote_cache():
    """Shared in-process remote tier."""
    return MemoryRemoteCache()


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def book_codec():
    return JsonEntryCodec(Book)


@pytest.fixture
def make_orchestrator(store, remote_cache, book_codec):
    """Build orchestrators sharing store and remote tier, each with a fresh local tier."""
    def _make(**kwargs) -> CacheOrchestrator:
        params = {
            "store": store,
            "remote_cache": remote_cache,
            "codec": book_codec,
            "local_cache": LocalCache(),
            "key_builder": book_cache_key,
        }
        params.update(kwargs)
        return CacheOrchestrator(**params)
    return _make


@pytest.fixture
def orchestrator(make_orchestrator):
    return make_orchestrator()


@pytest.fixture
def mock_pool():
    """Mock asyncpg pool for testing."""
    pool = AsyncMock()
    pool.fetchrow = AsyncMock()
    pool.fetchval = AsyncMock()
    pool.fetch = AsyncMock(return_value=[])
    pool.execute = AsyncMock()
    return pool

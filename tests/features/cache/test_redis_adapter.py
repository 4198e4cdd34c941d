"""Tests for the Redis remote cache adapter."""

import asyncio
import re
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from redis.exceptions import (
    ConnectionError as RedisConnectionError,
    RedisError,
    TimeoutError as RedisTimeoutError,
)

from neo_cache.core.exceptions import CacheConnectionError, CacheTimeoutError
from neo_cache.features.cache.adapters.redis_adapter import (
    RedisRemoteCache,
    build_envelope,
    create_redis_client,
    create_redis_remote_cache,
)
from neo_cache.features.cache.entities.config import CacheSettings


class TestEnvelope:
    """Test the framing prefix."""

    def test_envelope_format(self):
        assert build_envelope(1700000000.5) == b"neo1|1700000000500|"

    def test_envelope_contains_no_json_openers(self):
        envelope = build_envelope()

        assert re.fullmatch(rb"neo1\|\d+\|", envelope)


class TestRedisRemoteCache:
    """Test RedisRemoteCache against a mocked client."""

    @pytest.fixture
    def mock_redis(self):
        client = AsyncMock()
        client.get = AsyncMock(return_value=None)
        client.set = AsyncMock(return_value=True)
        client.delete = AsyncMock(return_value=1)
        client.ping = AsyncMock(return_value=True)
        return client

    @pytest.fixture
    def remote(self, mock_redis):
        return RedisRemoteCache(mock_redis, key_prefix="books:")

    @pytest.mark.asyncio
    async def test_get_prefixes_key(self, remote, mock_redis):
        mock_redis.get.return_value = b"neo1|1|{}"

        assert await remote.get("book_7") == b"neo1|1|{}"
        mock_redis.get.assert_awaited_once_with("books:book_7")

    @pytest.mark.asyncio
    async def test_get_miss(self, remote):
        assert await remote.get("book_7") is None

    @pytest.mark.asyncio
    async def test_get_str_response_is_encoded(self, remote, mock_redis):
        mock_redis.get.return_value = '{"a": 1}'

        assert await remote.get("k") == b'{"a": 1}'

    @pytest.mark.asyncio
    async def test_set_writes_envelope_and_ttl(self, remote, mock_redis):
        with patch("neo_cache.features.cache.adapters.redis_adapter.time.time", return_value=1700000000.0):
            assert await remote.set("book_7", b'{"id":7}', ttl=60) is True

        mock_redis.set.assert_awaited_once_with("books:book_7", b'neo1|1700000000000|{"id":7}', ex=60)

    @pytest.mark.asyncio
    async def test_set_without_envelope_or_ttl(self, mock_redis):
        remote = RedisRemoteCache(mock_redis, envelope=False)

        await remote.set("k", b"[1]")

        mock_redis.set.assert_awaited_once_with("k", b"[1]", ex=None)

    @pytest.mark.asyncio
    async def test_delete(self, remote, mock_redis):
        assert await remote.delete("k") is True

        mock_redis.delete.return_value = 0
        assert await remote.delete("k") is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("operation,args", [
        ("get", ("k",)),
        ("set", ("k", b"{}")),
        ("delete", ("k",)),
    ])
    @pytest.mark.parametrize("error,expected", [
        (RedisTimeoutError("slow"), CacheTimeoutError),
        (asyncio.TimeoutError(), CacheTimeoutError),
        (RedisConnectionError("refused"), CacheConnectionError),
        (OSError("unreachable"), CacheConnectionError),
        (RedisError("READONLY"), CacheConnectionError),
    ])
    async def test_errors_are_translated(self, remote, mock_redis, operation, args, error, expected):
        getattr(mock_redis, operation).side_effect = error

        with pytest.raises(expected):
            await getattr(remote, operation)(*args)

    @pytest.mark.asyncio
    async def test_ping(self, remote, mock_redis):
        assert await remote.ping() is True

        mock_redis.ping.side_effect = RedisConnectionError("refused")
        assert await remote.ping() is False

    @pytest.mark.asyncio
    async def test_close(self, remote, mock_redis):
        await remote.close()

        mock_redis.aclose.assert_awaited_once()


class TestFactories:
    """Test client construction from settings."""

    def test_create_redis_client_uses_settings(self):
        settings = CacheSettings(
            redis_url="redis://cache:6380/2",
            redis_command_timeout=1.5,
            redis_connection_timeout=2.5,
            redis_max_connections=7,
        )

        with patch("neo_cache.features.cache.adapters.redis_adapter.redis.from_url") as from_url:
            create_redis_client(settings)

        from_url.assert_called_once_with(
            "redis://cache:6380/2",
            socket_timeout=1.5,
            socket_connect_timeout=2.5,
            max_connections=7,
            decode_responses=False,
        )

    def test_create_remote_cache_with_client(self):
        client = MagicMock()
        settings = CacheSettings(redis_key_prefix="neo:", redis_envelope_enabled=False)

        remote = create_redis_remote_cache(settings, redis_client=client)

        assert remote._redis is client
        assert remote._key_prefix == "neo:"
        assert remote._envelope is False

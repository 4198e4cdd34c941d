"""Redis remote cache adapter for neo-cache."""

import asyncio
import logging
import time
from typing import Optional

import redis.asyncio as redis
from redis.exceptions import (
    RedisError,
    ConnectionError as RedisConnectionError,
    TimeoutError as RedisTimeoutError,
)

from ..entities.config import CacheSettings
from ....core.exceptions.infrastructure import (
    CacheConnectionError,
    CacheTimeoutError,
)

logger = logging.getLogger(__name__)

ENVELOPE_MARKER = b"neo1"
ENVELOPE_SEPARATOR = b"|"


def build_envelope(stored_at: Optional[float] = None) -> bytes:
    """Build the framing prefix written in front of every payload.

    The prefix carries only ASCII digits and separators so it can never be
    mistaken for the start of a JSON payload.
    """
    stored_at_ms = int((time.time() if stored_at is None else stored_at) * 1000)
    return ENVELOPE_MARKER + ENVELOPE_SEPARATOR + str(stored_at_ms).encode("ascii") + ENVELOPE_SEPARATOR


class RedisRemoteCache:
    """RemoteCache implementation backed by ``redis.asyncio``.

    Values are returned exactly as stored, envelope included; the entry codec
    is responsible for locating the payload inside it.
    """

    def __init__(
        self,
        redis_client: redis.Redis,
        key_prefix: str = "",
        envelope: bool = True
    ):
        """Initialize Redis remote cache.

        Args:
            redis_client: Async Redis client (binary responses)
            key_prefix: Prefix for all cache keys
            envelope: Frame stored values with a metadata envelope
        """
        self._redis = redis_client
        self._key_prefix = key_prefix
        self._envelope = envelope

    def _build_key(self, key: str) -> str:
        return f"{self._key_prefix}{key}"

    async def get(self, key: str) -> Optional[bytes]:
        """Get raw bytes for key."""
        redis_key = self._build_key(key)
        try:
            value = await self._redis.get(redis_key)
        except (RedisTimeoutError, asyncio.TimeoutError) as e:
            raise CacheTimeoutError(f"Redis GET timed out for {redis_key}: {e}") from e
        except (RedisConnectionError, OSError) as e:
            raise CacheConnectionError(f"Redis unreachable on GET {redis_key}: {e}") from e
        except RedisError as e:
            raise CacheConnectionError(f"Redis GET failed for {redis_key}: {e}") from e

        if value is None:
            return None
        if isinstance(value, str):
            value = value.encode("utf-8")
        return value

    async def set(self, key: str, value: bytes, ttl: Optional[int] = None) -> bool:
        """Store raw bytes, framed with the envelope when enabled."""
        redis_key = self._build_key(key)
        data = build_envelope() + value if self._envelope else value
        try:
            result = await self._redis.set(redis_key, data, ex=ttl if ttl and ttl > 0 else None)
        except (RedisTimeoutError, asyncio.TimeoutError) as e:
            raise CacheTimeoutError(f"Redis SET timed out for {redis_key}: {e}") from e
        except (RedisConnectionError, OSError) as e:
            raise CacheConnectionError(f"Redis unreachable on SET {redis_key}: {e}") from e
        except RedisError as e:
            raise CacheConnectionError(f"Redis SET failed for {redis_key}: {e}") from e

        return bool(result)

    async def delete(self, key: str) -> bool:
        """Delete key, True if it existed."""
        redis_key = self._build_key(key)
        try:
            deleted = await self._redis.delete(redis_key)
        except (RedisTimeoutError, asyncio.TimeoutError) as e:
            raise CacheTimeoutError(f"Redis DEL timed out for {redis_key}: {e}") from e
        except (RedisConnectionError, OSError) as e:
            raise CacheConnectionError(f"Redis unreachable on DEL {redis_key}: {e}") from e
        except RedisError as e:
            raise CacheConnectionError(f"Redis DEL failed for {redis_key}: {e}") from e

        return deleted > 0

    async def ping(self) -> bool:
        """Health check - verify Redis is responsive."""
        try:
            response = await self._redis.ping()
            return response is True or response == b"PONG"
        except Exception as e:
            logger.warning(f"Redis ping failed: {e}")
            return False

    async def close(self) -> None:
        """Close the underlying client."""
        await self._redis.aclose()


def create_redis_client(settings: CacheSettings) -> redis.Redis:
    """Create an async Redis client from cache settings."""
    return redis.from_url(
        settings.redis_url,
        socket_timeout=settings.redis_command_timeout,
        socket_connect_timeout=settings.redis_connection_timeout,
        max_connections=settings.redis_max_connections,
        decode_responses=False,
    )


def create_redis_remote_cache(
    settings: CacheSettings,
    redis_client: Optional[redis.Redis] = None
) -> RedisRemoteCache:
    """Create Redis remote cache with configuration.

    Args:
        settings: Cache settings
        redis_client: Optional pre-built client, created from settings if omitted

    Returns:
        Configured Redis remote cache
    """
    return RedisRemoteCache(
        redis_client=redis_client or create_redis_client(settings),
        key_prefix=settings.redis_key_prefix,
        envelope=settings.redis_envelope_enabled,
    )

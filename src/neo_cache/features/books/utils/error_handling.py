"""Error handling utilities for book store operations."""

import asyncio
import functools
import logging
from typing import Any, Callable

import asyncpg

from ....core.exceptions import NeoCacheError, StoreUnavailableError

logger = logging.getLogger(__name__)

# Failures that mean the database could not serve the call
DATABASE_FAILURES = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    asyncio.TimeoutError,
)


def store_error_handler(operation_name: str):
    """Decorator translating database failures into ``StoreUnavailableError``.

    Errors already in the neo-cache hierarchy pass through unchanged.

    Usage:
        @store_error_handler("get book")
        async def get(self, key):
            ...
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> Any:
            try:
                return await func(*args, **kwargs)
            except NeoCacheError:
                raise
            except DATABASE_FAILURES as e:
                logger.error(f"Database failure during {operation_name}: {e}")
                raise StoreUnavailableError(
                    f"Failed to {operation_name}: {e}",
                    details={"operation": operation_name, "cause": type(e).__name__}
                ) from e

        return wrapper
    return decorator


def parse_row_count(status: str) -> int:
    """Row count from an asyncpg command status such as ``"DELETE 1"``."""
    try:
        return int(status.rsplit(" ", 1)[-1])
    except (AttributeError, ValueError):
        logger.warning(f"Unrecognized command status: {status!r}")
        return 0

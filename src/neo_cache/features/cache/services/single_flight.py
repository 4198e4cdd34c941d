"""Per-key coalescing of concurrent async calls."""

import asyncio
import functools
import logging
from typing import Any, Awaitable, Callable, Dict, Generic, Hashable, TypeVar

logger = logging.getLogger(__name__)
T = TypeVar('T')


class SingleFlight(Generic[T]):
    """Coalesces concurrent calls for the same key into one execution.

    The first caller for a key starts the call as a task; callers arriving
    while it runs await the same task and receive its result or exception.
    The gate for a key is dropped as soon as its task finishes, so the next
    call starts a fresh execution. Cancelling a waiter never cancels the
    shared task.
    """

    def __init__(self):
        self._calls: Dict[Hashable, "asyncio.Task[T]"] = {}
        self._coalesced = 0

    async def do(self, key: Hashable, fn: Callable[[], Awaitable[T]]) -> T:
        """Run fn once per key for all concurrent callers."""
        task = self._calls.get(key)

        if task is None or task.done():
            task = asyncio.ensure_future(fn())
            self._calls[key] = task
            task.add_done_callback(functools.partial(self._forget, key))
        else:
            self._coalesced += 1
            logger.debug(f"Joined in-flight call for {key!r}")

        return await asyncio.shield(task)

    def _forget(self, key: Hashable, task: "asyncio.Task[Any]") -> None:
        if self._calls.get(key) is task:
            del self._calls[key]
        # Mark the exception retrieved when every waiter was cancelled
        if not task.cancelled():
            task.exception()

    def in_flight(self, key: Hashable) -> bool:
        """Check whether a call for key is currently running."""
        task = self._calls.get(key)
        return task is not None and not task.done()

    @property
    def coalesced_count(self) -> int:
        """Number of calls that joined an in-flight execution."""
        return self._coalesced

    def __len__(self) -> int:
        return sum(1 for task in self._calls.values() if not task.done())

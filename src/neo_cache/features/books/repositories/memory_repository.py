"""In-memory book store.

Dict-backed implementation of the ``Store`` protocol for tests and
single-process development. Ids are assigned sequentially from 1.
"""

import asyncio
import logging
from typing import Callable, Dict, List, Optional

from ..entities.book import Book
from ....core.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class InMemoryBookStore:
    """Book store held in process memory."""

    def __init__(self):
        self._books: Dict[int, Book] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def get(self, key: int) -> Optional[Book]:
        """Get book by id, None if absent."""
        async with self._lock:
            return self._books.get(key)

    async def create(self, value: Book) -> int:
        """Insert a new book and return its id."""
        async with self._lock:
            book_id = self._next_id
            self._next_id += 1
            self._books[book_id] = value.with_id(book_id)

        logger.info(f"Created book {book_id}")
        return book_id

    async def update(self, key: int, value: Book) -> None:
        """Replace the book stored under key."""
        async with self._lock:
            if key not in self._books:
                raise EntityNotFoundError("Book", str(key))
            self._books[key] = value.with_id(key)

    async def delete(self, key: int) -> None:
        """Delete the book stored under key."""
        async with self._lock:
            if self._books.pop(key, None) is None:
                raise EntityNotFoundError("Book", str(key))

    async def list(
        self,
        predicate: Optional[Callable[[Book], bool]] = None,
        offset: int = 0,
        limit: int = 100
    ) -> List[Book]:
        """List books matching predicate, ordered by id."""
        async with self._lock:
            books = [self._books[book_id] for book_id in sorted(self._books)]

        if predicate is not None:
            books = [book for book in books if predicate(book)]
        return books[offset:offset + limit]

    def __len__(self) -> int:
        return len(self._books)

"""Book service.

Reads, updates and deletes of a single book go through the two-tier cache
orchestrator. Creating and listing talk to the store directly: new books are
cached on first read and listings are never cached.
"""

import logging
from typing import List, Optional

from ..entities.book import Book, BookFilter
from ...cache.codecs.json_codec import JsonEntryCodec
from ...cache.entities.config import CacheSettings
from ...cache.entities.protocols import RemoteCache, Store
from ...cache.services.cache_orchestrator import CacheOrchestrator, create_cache_orchestrator
from ....core.exceptions import EntityNotFoundError, ValidationError

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset({"title", "author", "isbn"})


def book_cache_key(book_id: int) -> str:
    """Cache key shared by every service instance for a book id."""
    return f"book_{book_id}"


class BookService:
    """Book operations over a store fronted by the cache orchestrator."""

    DEFAULT_PAGE_SIZE = 10
    MAX_PAGE_SIZE = 100

    def __init__(self, store: Store[int, Book], orchestrator: CacheOrchestrator[int, Book]):
        self._store = store
        self._orchestrator = orchestrator

    @property
    def orchestrator(self) -> CacheOrchestrator[int, Book]:
        return self._orchestrator

    async def add_book(self, title: str, author: str, isbn: str = "") -> int:
        """Create a book and return its id."""
        try:
            book = Book(id=None, title=title, author=author, isbn=isbn)
        except ValueError as e:
            raise ValidationError(str(e)) from e

        book_id = await self._store.create(book)
        logger.info(f"Added book {book_id}: {title!r} by {author!r}")
        return book_id

    async def get_book(self, book_id: int) -> Optional[Book]:
        """Get a book through the cache, None if it does not exist."""
        result = await self._orchestrator.load(book_id)
        return result.value if result.found else None

    async def update_book(self, book_id: int, **changes) -> Book:
        """Apply field changes to a book and write it through the cache.

        The current value is read from the store, so changes committed by
        other processes are preserved. Fields passed as None are left
        unchanged.

        Raises:
            ValidationError: On unknown fields or an invalid resulting book
            EntityNotFoundError: If the book does not exist
        """
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValidationError(
                f"Cannot update fields: {', '.join(sorted(unknown))}",
                details={"fields": sorted(unknown)}
            )

        # Base the change on the committed value, never on a cached copy
        current = await self._store.get(book_id)
        if current is None:
            raise EntityNotFoundError("Book", str(book_id))

        try:
            updated = current.with_changes(**{k: v for k, v in changes.items() if v is not None})
        except ValueError as e:
            raise ValidationError(str(e)) from e

        await self._orchestrator.put(book_id, updated)
        logger.info(f"Updated book {book_id}")
        return updated

    async def remove_book(self, book_id: int) -> None:
        """Delete a book and evict it from both cache tiers."""
        await self._orchestrator.invalidate(book_id)
        logger.info(f"Removed book {book_id}")

    async def list_books(
        self,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        book_filter: Optional[BookFilter] = None
    ) -> List[Book]:
        """List one page of books ordered by id, bypassing the cache.

        Raises:
            ValidationError: If page < 1 or page_size is outside 1..100
        """
        if page < 1:
            raise ValidationError("page must be at least 1", details={"page": page})
        if page_size < 1 or page_size > self.MAX_PAGE_SIZE:
            raise ValidationError(
                f"page_size must be between 1 and {self.MAX_PAGE_SIZE}",
                details={"page_size": page_size}
            )

        offset = (page - 1) * page_size
        return await self._store.list(predicate=book_filter, offset=offset, limit=page_size)


# Factory function for dependency injection
def create_book_service(
    store: Store[int, Book],
    settings: Optional[CacheSettings] = None,
    remote_cache: Optional[RemoteCache] = None
) -> BookService:
    """Create a book service with a fresh cache orchestrator.

    Args:
        store: Book store
        settings: Cache settings, read from the environment if omitted
        remote_cache: Remote tier, built from settings if omitted

    Returns:
        Configured book service
    """
    orchestrator = create_cache_orchestrator(
        store=store,
        codec=JsonEntryCodec(Book),
        settings=settings,
        remote_cache=remote_cache,
        key_builder=book_cache_key,
    )
    return BookService(store, orchestrator)

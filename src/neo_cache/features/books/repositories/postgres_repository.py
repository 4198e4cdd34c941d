"""PostgreSQL book store using asyncpg.

Accepts any asyncpg pool and schema name. Row-count outcomes of UPDATE and
DELETE decide not-found; connection level failures surface as
``StoreUnavailableError``.
"""

import logging
from typing import Any, Callable, List, Optional, Tuple

import asyncpg

from ..entities.book import Book, BookFilter
from ..utils.error_handling import store_error_handler, parse_row_count
from ..utils.queries import (
    BOOKS_CREATE_TABLE,
    BOOK_INSERT,
    BOOK_GET_BY_ID,
    BOOK_UPDATE,
    BOOK_DELETE,
    BOOK_LIST,
    BOOK_LIST_ALL,
    FILTER_COLUMNS,
)
from ....config.settings import AppSettings
from ....core.exceptions import ConfigurationError, EntityNotFoundError

logger = logging.getLogger(__name__)


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def build_filter_clause(book_filter: Optional[BookFilter]) -> Tuple[str, List[Any]]:
    """Compile a BookFilter to an ``ILIKE`` WHERE clause and its parameters."""
    if book_filter is None or book_filter.is_empty:
        return "", []

    conditions = []
    params: List[Any] = []
    for column in FILTER_COLUMNS:
        value = getattr(book_filter, column)
        if value:
            params.append(f"%{_escape_like(value)}%")
            conditions.append(f"{column} ILIKE ${len(params)}")

    return "WHERE " + " AND ".join(conditions), params


class PostgresBookStore:
    """Book store backed by a PostgreSQL table."""

    def __init__(self, pool: asyncpg.Pool, schema: str = "public"):
        """Initialize with an asyncpg pool.

        Args:
            pool: Connection pool
            schema: Database schema name holding the books table
        """
        self._pool = pool
        self._schema = schema

    @store_error_handler("create books table")
    async def ensure_schema(self) -> None:
        """Create the books table if it does not exist."""
        await self._pool.execute(BOOKS_CREATE_TABLE.format(schema=self._schema))
        logger.info(f"Ensured table {self._schema}.books")

    @store_error_handler("get book")
    async def get(self, key: int) -> Optional[Book]:
        """Get book by id."""
        row = await self._pool.fetchrow(BOOK_GET_BY_ID.format(schema=self._schema), key)
        return self._map_row_to_book(row) if row else None

    @store_error_handler("create book")
    async def create(self, value: Book) -> int:
        """Insert a book and return the generated id."""
        book_id = await self._pool.fetchval(
            BOOK_INSERT.format(schema=self._schema),
            value.title, value.author, value.isbn
        )
        logger.info(f"Created book {book_id}")
        return int(book_id)

    @store_error_handler("update book")
    async def update(self, key: int, value: Book) -> None:
        """Replace the book stored under key."""
        status = await self._pool.execute(
            BOOK_UPDATE.format(schema=self._schema),
            key, value.title, value.author, value.isbn
        )
        if parse_row_count(status) == 0:
            raise EntityNotFoundError("Book", str(key))

    @store_error_handler("delete book")
    async def delete(self, key: int) -> None:
        """Delete the book stored under key."""
        status = await self._pool.execute(BOOK_DELETE.format(schema=self._schema), key)
        if parse_row_count(status) == 0:
            raise EntityNotFoundError("Book", str(key))

    @store_error_handler("list books")
    async def list(
        self,
        predicate: Optional[Callable[[Book], bool]] = None,
        offset: int = 0,
        limit: int = 100
    ) -> List[Book]:
        """List books ordered by id.

        A ``BookFilter`` predicate is evaluated by the database; any other
        callable is applied in Python over the full table.
        """
        if predicate is None or isinstance(predicate, BookFilter):
            where_clause, params = build_filter_clause(predicate)
            query = BOOK_LIST.format(
                schema=self._schema,
                where_clause=where_clause,
                offset_param=len(params) + 1,
                limit_param=len(params) + 2,
            )
            rows = await self._pool.fetch(query, *params, offset, limit)
            return [self._map_row_to_book(row) for row in rows]

        rows = await self._pool.fetch(BOOK_LIST_ALL.format(schema=self._schema))
        books = [book for book in map(self._map_row_to_book, rows) if predicate(book)]
        return books[offset:offset + limit]

    def _map_row_to_book(self, row: Any) -> Book:
        return Book(
            id=row["id"],
            title=row["title"],
            author=row["author"],
            isbn=row["isbn"],
        )


async def create_database_pool(settings: AppSettings) -> asyncpg.Pool:
    """Create an asyncpg pool from application settings."""
    if not settings.database_url:
        raise ConfigurationError("database_url is required for the PostgreSQL store")

    pool = await asyncpg.create_pool(
        dsn=settings.database_url,
        min_size=settings.database_pool_min_size,
        max_size=settings.database_pool_max_size,
    )
    logger.info(f"Database pool created (min={settings.database_pool_min_size}, max={settings.database_pool_max_size})")
    return pool

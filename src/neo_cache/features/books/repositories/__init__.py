"""Book store implementations."""

from .memory_repository import InMemoryBookStore
from .postgres_repository import PostgresBookStore, create_database_pool, build_filter_clause

__all__ = [
    "InMemoryBookStore",
    "PostgresBookStore",
    "create_database_pool",
    "build_filter_clause",
]

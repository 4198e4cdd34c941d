"""FastAPI application factory for the books service."""

import logging
from typing import Optional

from fastapi import FastAPI

from .__version__ import __version__
from .api.exception_handlers import register_exception_handlers
from .config.logging_config import LoggingConfig
from .config.settings import AppSettings
from .features.books.repositories import InMemoryBookStore, PostgresBookStore, create_database_pool
from .features.books.routers import router as books_router, get_book_service
from .features.books.services import BookService, create_book_service

logger = logging.getLogger(__name__)


def create_app(service: BookService, settings: Optional[AppSettings] = None) -> FastAPI:
    """Create the books API around a configured service.

    Args:
        service: Book service the routes are served from
        settings: Application settings, read from the environment if omitted
    """
    settings = settings or AppSettings()
    LoggingConfig.configure(settings.log_level)

    app = FastAPI(title=settings.app_name, version=__version__)
    register_exception_handlers(app, is_production=settings.is_production)
    app.include_router(books_router)
    app.dependency_overrides[get_book_service] = lambda: service

    logger.info(f"{settings.app_name} configured for {settings.environment}")
    return app


async def build_book_service(settings: AppSettings) -> BookService:
    """Build a book service backed by PostgreSQL when configured, memory otherwise."""
    if settings.uses_postgres:
        pool = await create_database_pool(settings)
        store = PostgresBookStore(pool, schema=settings.database_schema)
        await store.ensure_schema()
    else:
        logger.warning("No database_url configured, using in-memory book store")
        store = InMemoryBookStore()

    return create_book_service(store, settings=settings.cache)

"""
Application exception handlers for the neo-cache API.

Maps the ``NeoCacheError`` hierarchy to HTTP responses through
``HTTP_STATUS_MAP``.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ..core.exceptions import NeoCacheError, create_error_response, get_http_status_code

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI, is_production: bool = False) -> None:
    """Register exception handlers for the application.

    Args:
        app: FastAPI application instance
        is_production: Hide details of unexpected errors when True
    """
    @app.exception_handler(NeoCacheError)
    async def neo_cache_exception_handler(request: Request, exc: NeoCacheError):
        status_code = get_http_status_code(exc)
        if status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(status_code=status_code, content=create_error_response(exc))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
        message = "Internal server error" if is_production else str(exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": {"code": "InternalError", "message": message, "details": {}, "type": type(exc).__name__}}
        )

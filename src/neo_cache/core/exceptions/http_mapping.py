"""HTTP status code mapping for exceptions."""

from typing import Dict, Type

from .base import NeoCacheError
from .domain import ConfigurationError, ValidationError
from .database import StoreError, StoreUnavailableError, EntityNotFoundError
from .infrastructure import (
    CacheError,
    CacheConnectionError,
    CacheTimeoutError,
    CacheSerializationError,
    CacheDecodeError,
)


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    ValidationError: 400,
    
    # 404 Not Found
    EntityNotFoundError: 404,
    
    # 500 Internal Server Error
    ConfigurationError: 500,
    StoreError: 500,
    CacheError: 500,
    CacheConnectionError: 500,
    CacheTimeoutError: 500,
    CacheSerializationError: 500,
    CacheDecodeError: 500,
    
    # 503 Service Unavailable
    StoreUnavailableError: 503,
    
    # Default for NeoCacheError
    NeoCacheError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception, most specific class first."""
    for exc_type in type(exception).__mro__:
        if exc_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exc_type]
    return 500

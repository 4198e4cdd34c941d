"""Exceptions module for neo-cache.

This module provides the complete exception hierarchy for neo-cache,
organized by domain concerns and infrastructure concerns.
"""

from .base import (
    NeoCacheError,
    get_http_status_code,
    create_error_response,
)

from .domain import (
    ConfigurationError,
    ValidationError,
)

from .database import (
    StoreError,
    StoreUnavailableError,
    EntityNotFoundError,
)

from .infrastructure import (
    CacheError,
    CacheConnectionError,
    CacheTimeoutError,
    CacheSerializationError,
    CacheDecodeError,
)

from .http_mapping import HTTP_STATUS_MAP

__all__ = [
    # Base
    "NeoCacheError",
    "get_http_status_code",
    "create_error_response",
    "HTTP_STATUS_MAP",
    
    # Domain
    "ConfigurationError",
    "ValidationError",
    
    # Backing store
    "StoreError",
    "StoreUnavailableError",
    "EntityNotFoundError",
    
    # Cache tiers
    "CacheError",
    "CacheConnectionError",
    "CacheTimeoutError",
    "CacheSerializationError",
    "CacheDecodeError",
]

"""Cache tier exceptions for neo-cache.

Every error raised by a cache tier is recoverable: the orchestrator logs it
and continues with the next tier. None of these reach the caller of
``CacheOrchestrator.load``.
"""

from typing import Optional

from .base import NeoCacheError


class CacheError(NeoCacheError):
    """Base class for cache-related errors."""
    pass


class CacheConnectionError(CacheError):
    """Raised when the remote cache cannot be reached."""
    pass


class CacheTimeoutError(CacheError):
    """Raised when a remote cache operation times out."""
    pass


class CacheSerializationError(CacheError):
    """Raised when a value cannot be encoded for the remote cache."""
    pass


class CacheDecodeError(CacheError):
    """Raised when bytes from the remote cache hold no decodable payload."""
    
    def __init__(self, message: str, data: Optional[bytes] = None):
        details = {}
        if data is not None:
            details["data_size"] = len(data)
            details["data_preview"] = repr(data[:50])
        super().__init__(message, details=details)
        self.data = data

"""Base exception for neo-cache.

Every neo-cache error carries a machine-readable code and a details mapping
so the API layer can render it without inspecting the concrete class.
"""

from typing import Any, Dict, Optional


class NeoCacheError(Exception):
    """Root of the neo-cache exception hierarchy.

    ``error_code`` defaults to the class name.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or type(self).__name__
        self.details = details or {}


def get_http_status_code(exception: Exception) -> int:
    """HTTP status for an exception, 500 when unmapped."""
    from .http_mapping import get_http_status_code as status_for
    return status_for(exception)


def create_error_response(exception: NeoCacheError) -> Dict[str, Any]:
    """Render an exception as the API error body."""
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": type(exception).__name__,
        }
    }

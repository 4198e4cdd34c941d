"""Domain and request exceptions for neo-cache."""

from .base import NeoCacheError


class ConfigurationError(NeoCacheError):
    """Raised when the application is wired with invalid settings."""
    pass


class ValidationError(NeoCacheError):
    """Raised when caller-supplied arguments are invalid."""
    pass

"""Configuration for neo-cache."""

from .settings import AppSettings
from .logging_config import LoggingConfig, LogFormat, LogVerbosity

__all__ = [
    "AppSettings",
    "LoggingConfig",
    "LogFormat",
    "LogVerbosity",
]

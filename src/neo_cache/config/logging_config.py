"""Centralized logging configuration for neo-cache.

Environment-based control over verbosity and format; library loggers that
chatter at INFO are held back so tier outcomes stay readable.
"""

import logging
import logging.config
import os
from enum import Enum
from typing import Any, Dict, Optional

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogVerbosity(str, Enum):
    """Verbosity modes selected by LOG_VERBOSITY."""
    QUIET = "QUIET"      # errors only
    NORMAL = "NORMAL"    # LOG_LEVEL as given
    VERBOSE = "VERBOSE"  # at least INFO
    DEBUG = "DEBUG"


class LogFormat(str, Enum):
    """Formats selected by LOG_FORMAT."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}

_VERBOSITY_LEVELS = {
    LogVerbosity.QUIET: "ERROR",
    LogVerbosity.VERBOSE: "INFO",
    LogVerbosity.DEBUG: "DEBUG",
}


def resolve_log_level(log_level: str, verbosity: str) -> str:
    """Combine LOG_LEVEL and LOG_VERBOSITY into the effective level."""
    try:
        mode = LogVerbosity(verbosity.upper())
    except ValueError:
        mode = LogVerbosity.NORMAL
    return _VERBOSITY_LEVELS.get(mode, log_level.upper())


class LoggingConfig:
    """Builds and applies the process logging configuration."""

    # Held at WARNING unless the whole process runs at DEBUG
    QUIET_MODULES = [
        "asyncpg",
        "redis",
    ]

    ERROR_ONLY_MODULES = [
        "httpx",
        "httpcore",
        "asyncio",
    ]

    @staticmethod
    def _console_logger(level: str) -> Dict[str, Any]:
        return {"level": level, "handlers": ["console"], "propagate": False}

    @classmethod
    def build_config(cls, log_level: Optional[str] = None) -> Dict[str, Any]:
        """Build a ``dictConfig`` mapping from environment variables.

        Args:
            log_level: Overrides ``LOG_LEVEL`` when given
        """
        level = resolve_log_level(
            log_level or os.getenv("LOG_LEVEL", "INFO"),
            os.getenv("LOG_VERBOSITY", "NORMAL"),
        )

        try:
            log_format = LogFormat(os.getenv("LOG_FORMAT", "simple").lower())
        except ValueError:
            log_format = LogFormat.SIMPLE

        library_level = "DEBUG" if level == "DEBUG" else "WARNING"
        loggers = {name: cls._console_logger(library_level) for name in cls.QUIET_MODULES}
        loggers.update({name: cls._console_logger("ERROR") for name in cls.ERROR_ONLY_MODULES})

        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": FORMAT_STRINGS[log_format], "datefmt": DATE_FORMAT},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {"level": level, "handlers": ["console"]},
            "loggers": loggers,
        }

    @classmethod
    def configure(cls, log_level: Optional[str] = None) -> None:
        """Apply the logging configuration. Called once at application startup."""
        config = cls.build_config(log_level)
        logging.config.dictConfig(config)
        logging.getLogger(__name__).debug(f"Logging configured: level={config['root']['level']}")

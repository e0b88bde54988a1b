"""Utility modules for configuration and logging."""

from .logging_config import LogLevel, LogFormat, JSONFormatter, LoggingManager

__all__ = [
    "LogLevel",
    "LogFormat",
    "JSONFormatter",
    "LoggingManager",
]

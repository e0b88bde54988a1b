"""
Logging configuration and management.

This module installs the root handler used by the command-line tool:
a rich console handler for human-readable output, or a plain stream
handler with a JSON or detailed formatter for machine-readable logs.
Library modules never configure logging themselves; they only create
module-level loggers.
"""

import json
import logging
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from rich.console import Console
from rich.logging import RichHandler


class LogLevel(Enum):
    """Log level enumeration."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """Look up a level by name, case-insensitively."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(
                f"Unknown log level '{name}'. Valid options: {', '.join(cls.__members__)}"
            ) from None


class LogFormat(Enum):
    """Log format types."""
    STANDARD = "standard"
    JSON = "json"
    DETAILED = "detailed"


# LogRecord attributes that are never copied into JSON output as extras.
_STANDARD_ATTRS = frozenset({
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname',
    'filename', 'module', 'lineno', 'funcName', 'created',
    'msecs', 'relativeCreated', 'thread', 'threadName',
    'processName', 'process', 'exc_info', 'exc_text',
    'stack_info', 'message', 'taskName',
})


class JSONFormatter(logging.Formatter):
    """Formats each record as a single-line JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for attr_name, attr_value in record.__dict__.items():
            if not attr_name.startswith('_') and attr_name not in _STANDARD_ATTRS:
                log_data[attr_name] = attr_value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str, ensure_ascii=False, separators=(',', ':'))


class LoggingManager:
    """
    Installs the root logging handler.

    The STANDARD format goes through rich's ``RichHandler``; JSON and
    DETAILED use a plain stream handler so each record stays on one line.
    """

    def __init__(
        self,
        log_level: LogLevel = LogLevel.INFO,
        log_format: LogFormat = LogFormat.STANDARD,
        console: Optional[Console] = None,
    ):
        self.log_level = log_level
        self.log_format = log_format
        self.console = console or Console(stderr=True)
        self.handler = self._create_handler()
        self._setup_root_logger()

    def _setup_root_logger(self) -> None:
        """Replace the root logger's handlers with the configured one."""
        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.setLevel(self.log_level.value)
        root_logger.addHandler(self.handler)

    def _create_formatters(self) -> Dict[LogFormat, logging.Formatter]:
        return {
            LogFormat.STANDARD: logging.Formatter("%(message)s", datefmt="[%X]"),
            LogFormat.JSON: JSONFormatter(),
            LogFormat.DETAILED: logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s'
            ),
        }

    def _create_handler(self) -> logging.Handler:
        formatter = self._create_formatters()[self.log_format]

        if self.log_format is LogFormat.STANDARD:
            handler: logging.Handler = RichHandler(
                console=self.console,
                show_time=True,
                show_path=False,
                markup=False,
                rich_tracebacks=True,
            )
        else:
            handler = logging.StreamHandler(self.console.file)

        handler.setLevel(self.log_level.value)
        handler.setFormatter(formatter)
        return handler

    def get_logger(self, name: str) -> logging.Logger:
        """Get a logger under the configured root."""
        return logging.getLogger(name)

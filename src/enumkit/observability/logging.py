"""
Logging — Named loggers and opt-in handler setup for enumkit.

Library modules only create loggers. Applications that want enumkit's
diagnostics on a stream call `configure_logging()`.
"""

import logging
import json
import sys
from datetime import datetime, timezone
from typing import Any


ROOT_LOGGER = "enumkit"


class JSONFormatter(logging.Formatter):
    """
    Formats log records as JSON for structured logging.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add extra fields
        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class ReadableFormatter(logging.Formatter):
    """
    Human-readable formatter for development.
    """

    def format(self, record: logging.LogRecord) -> str:
        base = f"{record.levelname:<7} {record.name}: {record.getMessage()}"

        if record.exc_info:
            base += "\n" + self.formatException(record.exc_info)

        return base


def configure_logging(
    level: int = logging.INFO,
    json_format: bool = False,
    stream: Any = None,
) -> None:
    """
    Configure enumkit logging.

    Args:
        level: Logging level
        json_format: Use JSON format (for production)
        stream: Output stream (default: stderr)
    """
    handler = logging.StreamHandler(stream or sys.stderr)

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(ReadableFormatter())

    enum_logger = logging.getLogger(ROOT_LOGGER)
    enum_logger.setLevel(level)
    enum_logger.handlers.clear()
    enum_logger.addHandler(handler)
    enum_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger for an enumkit component."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")

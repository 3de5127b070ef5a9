"""
Log Formatters - Custom formatters for structured output.
"""

import json
import logging
from datetime import UTC, datetime

from rich.errors import MarkupError
from rich.text import Text


def plain_message(record: logging.LogRecord) -> str:
    """Render a record's message with Rich console markup stripped."""
    message = record.getMessage()
    try:
        return Text.from_markup(message).plain
    except MarkupError:
        return message


class JSONFormatter(logging.Formatter):
    """
    JSON log formatter for structured log output.

    Useful for keeping a machine-readable trace of wire traffic.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": plain_message(record),
        }

        # Set through `extra=` by BifrostLogger
        if hasattr(record, "session_id"):
            log_data["session_id"] = record.session_id
        if hasattr(record, "element_id"):
            log_data["element_id"] = record.element_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def create_file_handler(
    path: str,
    formatter: logging.Formatter | None = None,
    level: int = logging.DEBUG,
) -> logging.FileHandler:
    """
    Create a file handler with specified formatter.

    Args:
        path: Log file path
        formatter: Log formatter (defaults to JSONFormatter)
        level: Logging level
    """
    handler = logging.FileHandler(path)
    handler.setLevel(level)
    handler.setFormatter(formatter or JSONFormatter())
    return handler

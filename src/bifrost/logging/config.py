"""
Logging Configuration - Structured logging with Rich console.

Provides readable logging of the wire traffic between Bifrost and the remote end.
"""

import logging
from pathlib import Path
from typing import Literal

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.theme import Theme

from bifrost.logging.formatters import create_file_handler

# Custom theme for Bifrost logs
BIFROST_THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "debug": "dim",
        "session": "bold green",
        "wire": "dim cyan",
        "element": "bold magenta",
    }
)

# Shared console instance
console = Console(theme=BIFROST_THEME)


def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO",
    show_path: bool = False,
    log_file: str | Path | None = None,
) -> None:
    """
    Configure logging with Rich console handler.

    Args:
        level: Logging level
        show_path: Show file path in log messages
        log_file: Optional path of a JSON-lines log file
    """
    handler = RichHandler(
        console=console,
        show_time=True,
        show_level=True,
        show_path=show_path,
        rich_tracebacks=True,
        markup=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    handlers: list[logging.Handler] = [handler]
    if log_file:
        handlers.append(create_file_handler(str(log_file)))

    bifrost_logger = logging.getLogger("bifrost")
    bifrost_logger.setLevel(level)
    bifrost_logger.handlers = handlers
    bifrost_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with bifrost prefix.

    Args:
        name: Logger name (will be prefixed with 'bifrost.')
    """
    if name != "bifrost" and not name.startswith("bifrost."):
        name = f"bifrost.{name}"
    return logging.getLogger(name)


class BifrostLogger:
    """
    Structured logger for Bifrost operations.

    Provides semantic logging methods for the protocol round trips.
    """

    def __init__(self, name: str = "bifrost"):
        self._logger = get_logger(name)

    def request(self, method: str, path: str, payload: dict | None = None) -> None:
        """Log an outgoing command (debug level)."""
        param_str = escape(str(payload)[:60]) if payload else ""
        self._logger.debug(f"[wire]→[/wire] {method} {path} {param_str}".rstrip())

    def response(self, method: str, path: str, status: int) -> None:
        """Log the status of a completed command (debug level)."""
        self._logger.debug(f"[wire]←[/wire] {method} {path} {status}")

    def session(self, session_id: str, status: str = "opened") -> None:
        """Log session lifecycle."""
        self._logger.info(
            f"[session]Session {status}[/session]: {session_id}",
            extra={"session_id": session_id},
        )

    def element(self, action: str, element_id: str, details: str = "") -> None:
        """Log element interaction."""
        msg = f"[element]Element{escape(f'[{element_id[:8]}]')}[/element] {action}"
        if details:
            msg += f" - {escape(details)}"
        self._logger.debug(msg, extra={"element_id": element_id})


# Default logger instance
logger = BifrostLogger()

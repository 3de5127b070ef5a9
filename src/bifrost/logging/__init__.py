"""
Bifrost Logging Module.

Provides structured logging with Rich console output.
"""

from bifrost.logging.config import (
    BifrostLogger,
    console,
    get_logger,
    logger,
    setup_logging,
)
from bifrost.logging.formatters import JSONFormatter, create_file_handler

__all__ = [
    "setup_logging",
    "get_logger",
    "BifrostLogger",
    "logger",
    "console",
    "JSONFormatter",
    "create_file_handler",
]

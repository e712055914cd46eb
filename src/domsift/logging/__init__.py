"""
Domsift Logging Module.

Provides structured logging with Rich console output.
"""

from domsift.logging.config import (
    QueryLogger,
    console,
    get_logger,
    logger,
    setup_logging,
)
from domsift.logging.formatters import (
    CompactFormatter,
    JSONFormatter,
    create_file_handler,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "QueryLogger",
    "logger",
    "console",
    "JSONFormatter",
    "CompactFormatter",
    "create_file_handler",
]

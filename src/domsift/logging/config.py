"""
Logging Configuration - Structured logging with Rich console.

Provides readable logging for parsing and query runs.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from domsift.config import DEFAULT_LOG_LEVEL, LogLevel

DOMSIFT_THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "debug": "dim",
    }
)

# Diagnostics go to stderr so query results on stdout stay pipeable
console = Console(theme=DOMSIFT_THEME, stderr=True)


def setup_logging(
    level: LogLevel = DEFAULT_LOG_LEVEL,
    show_path: bool = False,
    handler: logging.Handler | None = None,
) -> None:
    """
    Configure the domsift logger.

    Args:
        level: Logging level
        show_path: Show file path in log messages
        handler: Use this handler instead of the Rich console handler
    """
    if handler is None:
        handler = RichHandler(
            console=console,
            show_time=True,
            show_level=True,
            show_path=show_path,
            rich_tracebacks=True,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))

    domsift_logger = logging.getLogger("domsift")
    domsift_logger.setLevel(level)
    domsift_logger.handlers = [handler]
    domsift_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with domsift prefix.

    Args:
        name: Logger name (will be prefixed with 'domsift.')

    Returns:
        Configured logger
    """
    if not name.startswith("domsift."):
        name = f"domsift.{name}"
    return logging.getLogger(name)


class QueryLogger:
    """
    Structured logger for parse and query operations.

    Provides semantic logging methods for the CLI.
    """

    def __init__(self, name: str = "domsift"):
        self._logger = get_logger(name)

    def parsed(self, source: str, size: int) -> None:
        """Log a parsed source."""
        self._logger.info(f"Parsed {source} ({size} bytes)")

    def query(self, kind: str, value: str, matches: int) -> None:
        """Log a query and its match count."""
        self._logger.info(
            f"Query {kind}={value!r} matched {matches} node(s)",
            extra={"query": f"{kind}={value}", "matches": matches},
        )

    def error(self, message: str, exc: Exception | None = None) -> None:
        self._logger.error(message, exc_info=exc)

    def debug(self, message: str) -> None:
        self._logger.debug(message)


# Default logger instance
logger = QueryLogger()

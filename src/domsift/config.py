"""
Domsift Configuration.

Centralizes default values and configuration settings.
"""

from typing import Literal, get_args

# Inner text extraction
LINE_BREAK_TAG = "br"
SKIPPED_TEXT_TAGS = frozenset({"script"})

# Class attribute tokenization (single space only, not all whitespace)
CLASS_SEPARATOR = " "

# Parsing
DEFAULT_FRAGMENT_CONTAINER = "div"

# Logging
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_ENV = "DOMSIFT_LOG_LEVEL"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LOG_LEVELS = get_args(LogLevel)

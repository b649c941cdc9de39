"""Logging helpers shared across the package."""

__version__ = "0.1.0"

from .log_utils import (
    VERBOSE,
    level_from_string,
    level_to_string,
    set_log_level,
    get_log_level,
    ColumnFormatter,
    ConsoleHandler,
)

__all__ = [
    "VERBOSE",
    "level_from_string",
    "level_to_string",
    "set_log_level",
    "get_log_level",
    "ColumnFormatter",
    "ConsoleHandler",
]

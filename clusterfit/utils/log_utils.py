"""
Severity-filtered console logging for the fit helpers.

Adds a VERBOSE level beneath DEBUG and a column layout of
    logger name | calling function | level | message
"""
import logging
import sys

VERBOSE = 5
logging.addLevelName(VERBOSE, "VERBOSE")

LEVELS = {
    "VERBOSE": VERBOSE,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

log = logging.getLogger(__name__)


def level_from_string(level_name: str) -> int:
    """Unknown names fall back to INFO"""
    level = LEVELS.get(str(level_name).upper())
    if level is None:
        log.warning(f"Unknown output level {level_name}, returning default (INFO)")
        return logging.INFO
    return level


def level_to_string(level: int) -> str:
    for name, val in LEVELS.items():
        if val == level:
            return name
    return "UNKNOWN"


def set_log_level(level, logger_name: str = "clusterfit"):
    """
    Sets the severity threshold of the package logger.
    Accepts either a level name ('DEBUG', 'verbose', ...) or an int.
    """
    if isinstance(level, str):
        level = level_from_string(level)
    logging.getLogger(logger_name).setLevel(level)
    return level


def get_log_level(logger_name: str = "clusterfit") -> str:
    return level_to_string(logging.getLogger(logger_name).getEffectiveLevel())


class ColumnFormatter(logging.Formatter):
    """Fixed width columns, truncated so rows line up"""

    def format(self, record):
        name = record.name.rsplit('.', 1)[-1]
        prefix = f"{name[:10]:<10}  {record.funcName[:30]:<30}  {record.levelname[:7]:<7}  "
        return prefix + record.getMessage()


class ConsoleHandler(logging.StreamHandler):
    def __init__(self, stream=None):
        super().__init__(stream if stream is not None else sys.stdout)
        self.setFormatter(ColumnFormatter())

"""Logging setup and debug-level handling for the SESAME framework."""

from __future__ import annotations

import logging
from enum import IntEnum

LOGGER_NAME = "SESAME"
TRACE = 5
_OFF = logging.CRITICAL + 10
_FORMAT = "%(asctime)s %(name)s: %(module)s:%(lineno)d [%(threadName)-5s] [%(levelname)s] : %(message)s"
_DATE_FORMAT = "%b %d %Y %H:%M:%S"

logging.addLevelName(TRACE, "TRACE")


class DebugLevel(IntEnum):
    """Verbosity levels understood by the logging setup."""

    LOG_NONE = 0
    LOG_WARNING = 1
    LOG_DEBUG = 2
    LOG_INFO = 3
    LOG_TRACE = 4


class SesameRuntimeError(RuntimeError):
    """Raised when a framework invariant is violated."""


_LEVEL_MAP = {
    DebugLevel.LOG_NONE: _OFF,
    DebugLevel.LOG_WARNING: logging.WARNING,
    DebugLevel.LOG_DEBUG: logging.DEBUG,
    DebugLevel.LOG_INFO: logging.INFO,
    DebugLevel.LOG_TRACE: TRACE,
}


def debug_level_name(level) -> str:
    """Return the symbolic name of a debug level, or "UNKNOWN"."""
    try:
        return DebugLevel(level).name
    except ValueError:
        return "UNKNOWN"


def parse_debug_level(name: str) -> DebugLevel:
    """Parse a symbolic debug level name."""
    try:
        return DebugLevel[name]
    except KeyError:
        raise SesameRuntimeError(f"Logger: Debug level unknown: {name}") from None


def get_logger() -> logging.Logger:
    """Return the framework logger."""
    return logging.getLogger(LOGGER_NAME)


def _python_level(level) -> int:
    try:
        return _LEVEL_MAP[DebugLevel(level)]
    except ValueError:
        get_logger().error("log level not supported %s", debug_level_name(level))
        raise SesameRuntimeError("Error while trying to change log level") from None


def setup_logging(log_file_name: str, level) -> logging.Logger:
    """Attach a file and a console handler to the framework logger and set its level."""
    print(f"LogFileName: {log_file_name}, and DebugLevel: {int(level)}")
    logger = get_logger()
    logger.setLevel(_python_level(level))
    formatter = logging.Formatter(_FORMAT, _DATE_FORMAT)
    file_handler = logging.FileHandler(log_file_name)
    file_handler.setFormatter(formatter)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    return logger


def set_log_level(level) -> None:
    """Change the level of the framework logger."""
    get_logger().setLevel(_python_level(level))


def sesame_assert(condition, text: str) -> None:
    """Log and raise SesameRuntimeError when the condition is false."""
    if not condition:
        get_logger().error(text)
        raise SesameRuntimeError(f"SESAME Runtime Error on condition: {text}")
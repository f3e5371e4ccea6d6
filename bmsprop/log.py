"""Coloured terminal logging by severity level."""

from __future__ import annotations

import enum
import sys

RESET_COLOR = "\033[0m"
RED = "\033[31m"
YELLOW = "\033[33m"
WHITE = "\033[37m"
GREEN = "\033[32m"


class LogLevel(enum.Enum):
    """Severity of a log message."""

    INFO = "INFO"
    DEBUG = "DEBUG"
    WARNING = "WARNING"
    ERROR = "ERROR"


_COLORS = {
    LogLevel.INFO: GREEN,
    LogLevel.DEBUG: WHITE,
    LogLevel.WARNING: YELLOW,
    LogLevel.ERROR: RED,
}


def log(level, message):
    """Write ``message`` to standard error, coloured by ``level``.

    A level that is not a :class:`LogLevel` produces an "Unknown log type"
    warning instead of the message.
    """
    color = _COLORS.get(level) if isinstance(level, LogLevel) else None
    if color is None:
        line = f"{YELLOW}Unknown log type{RESET_COLOR}"
    else:
        line = f"{color}{level.value}: {message}{RESET_COLOR}"
    stream = sys.stderr
    stream.write(line + "\n")
    stream.flush()
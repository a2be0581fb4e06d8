"""Terminal logging setup."""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LOGGER_NAME = "nearfacsimile"

_RESET = "\x1b[0m"
_LEVEL_COLORS = {
    logging.ERROR: "\x1b[31m",
    logging.WARNING: "\x1b[33m",
    logging.INFO: "\x1b[34m",
    logging.DEBUG: "\x1b[36m",
    TRACE: "\x1b[37m",
}


def _supports_color(stream: TextIO) -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class _TerminalFormatter(logging.Formatter):
    """Formats records as "HH:MM:SS [LEVEL] message"; trace records carry no time."""

    def __init__(self, color: bool) -> None:
        super().__init__(datefmt="%H:%M:%S")
        self._color = color

    def format(self, record: logging.LogRecord) -> str:
        level = record.levelname
        code = _LEVEL_COLORS.get(record.levelno)
        if self._color and code:
            level = f"{code}{level}{_RESET}"
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        if record.levelno >= logging.DEBUG:
            return f"{self.formatTime(record, self.datefmt)} [{level}] {message}"
        return f"[{level}] {message}"


class _TerminalHandler(logging.Handler):
    """Writes errors to standard error and everything else to standard output."""

    def __init__(self) -> None:
        super().__init__()
        self._formatters = {flag: _TerminalFormatter(flag) for flag in (False, True)}

    def emit(self, record: logging.LogRecord) -> None:
        try:
            stream = sys.stderr if record.levelno >= logging.ERROR else sys.stdout
            text = self._formatters[_supports_color(stream)].format(record)
            stream.write(text + "\n")
            stream.flush()
        except Exception:
            self.handleError(record)


def init_logging(verbose: int) -> logging.Logger:
    """Configure the package logger for the given verbosity and return it.

    0 shows informational messages, 1 adds debugging, 2 or more adds tracing.
    """
    if verbose < 0:
        raise ValueError(f"verbosity cannot be negative: {verbose}")
    if verbose == 0:
        level = logging.INFO
    elif verbose == 1:
        level = logging.DEBUG
    else:
        level = TRACE

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, _TerminalHandler):
            logger.removeHandler(handler)
    logger.addHandler(_TerminalHandler())
    logger.setLevel(level)
    logger.propagate = False
    return logger
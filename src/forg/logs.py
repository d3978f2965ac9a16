"""Console logging for the organizer.

Records below WARNING go to stdout, everything else goes to stderr. Both
streams are colored by level when they are attached to a terminal.
"""

import logging
import sys
from enum import StrEnum, unique
from types import MappingProxyType
from typing import Final, TextIO

__all__ = (
    "PACKAGE_LOGGER_NAME",
    "AnsiColor",
    "ColoredFormatter",
    "configure_logging",
    "paint",
)


PACKAGE_LOGGER_NAME: Final = __name__.rpartition(".")[0]


@unique
class AnsiColor(StrEnum):
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    RED = "\033[31m"
    BLUE = "\033[34m"
    BOLD = "\033[1m"
    RESET = "\033[0m"


def paint(text: str, color: str, enabled: bool = True) -> str:
    """Wrap `text` in `color` and a reset code if `enabled`."""

    if not (enabled and color):
        return text
    return f"{color}{text}{AnsiColor.RESET}"


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the whole message by its level."""

    COLORS: Final = MappingProxyType(
        {
            logging.DEBUG: AnsiColor.YELLOW,
            logging.WARNING: AnsiColor.YELLOW,
            logging.ERROR: AnsiColor.RED,
            logging.CRITICAL: AnsiColor.RED,
        }
    )

    def __init__(self, fmt: str | None = None, *, color: bool = True) -> None:
        super().__init__(fmt)
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        return paint(message, self.COLORS.get(record.levelno, ""), self.color)


class _BelowWarningFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def _is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach console handlers to the package logger.

    Calling this again replaces the handlers installed by an earlier call, so
    the handlers always point at the current `sys.stdout` and `sys.stderr`.

    Args:
        verbose: If `True`, also show DEBUG records.

    Returns:
        The package logger.
    """

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    out_handler = logging.StreamHandler(sys.stdout)
    out_handler.addFilter(_BelowWarningFilter())
    out_handler.setFormatter(ColoredFormatter(color=_is_tty(sys.stdout)))

    err_handler = logging.StreamHandler(sys.stderr)
    err_handler.setLevel(logging.WARNING)
    err_handler.setFormatter(ColoredFormatter(color=_is_tty(sys.stderr)))

    logger.addHandler(out_handler)
    logger.addHandler(err_handler)
    return logger

"""Colorized logging sink built on the standard ``logging`` module."""

from __future__ import annotations

import logging

from openextracts.domain.enums import LogColor

ANSI_CODES: dict[LogColor, str] = {
    LogColor.CYAN: "\033[36m",
    LogColor.GRAY: "\033[90m",
    LogColor.RED: "\033[31m",
    LogColor.YELLOW: "\033[33m",
}
ANSI_RESET = "\033[0m"

LEVELS: dict[LogColor, int] = {
    LogColor.GRAY: logging.DEBUG,
    LogColor.YELLOW: logging.WARNING,
    LogColor.RED: logging.ERROR,
}


class ConsoleLogger:
    """``ILogger`` implementation that forwards to a stdlib logger.

    The color picks the level (gray lines are debug traces, red lines are
    errors) and, when ``color`` is set, wraps the message in ANSI codes.
    """

    def __init__(self, name: str = "openextracts", *, color: bool = True) -> None:
        self._logger = logging.getLogger(name)
        self._color = color

    def log(self, message: str, color: LogColor) -> None:
        color = LogColor(color)
        level = LEVELS.get(color, logging.INFO)
        if self._color:
            message = f"{ANSI_CODES[color]}{message}{ANSI_RESET}"
        self._logger.log(level, message)


def configure_logging(level: int | str = logging.INFO) -> None:
    """Install a plain console handler for command line use."""

    logging.basicConfig(level=level, format="%(message)s")

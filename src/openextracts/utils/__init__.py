"""Utility helpers for OpenExtracts."""

from openextracts.utils.console import ConsoleLogger, configure_logging

__all__ = [
    "ConsoleLogger",
    "configure_logging",
]

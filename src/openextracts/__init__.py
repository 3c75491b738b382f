"""Configurable extract adjustments for location databases."""

__version__ = "1.0.0"

"""Utility modules for market layout."""

from .logging import setup_logging

__all__ = [
    "setup_logging",
]

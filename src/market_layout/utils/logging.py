"""Logging setup for the command line and host applications.

Library modules only call ``logging.getLogger(__name__)``; handlers are
attached here by whoever owns the process.

Usage:
    from market_layout.utils import setup_logging

    setup_logging(level="DEBUG")
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from ..config import get_settings

# Handlers attached by setup_logging, so a forced reconfigure can replace them
_handlers: List[logging.Handler] = []


class ColoredFormatter(logging.Formatter):
    """Formatter that adds colors for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        record.levelname_colored = f"{color}{record.levelname:8}{self.RESET}"
        return super().format(record)


def setup_logging(
    name: str = "market_layout",
    level: Optional[str] = None,
    log_to_file: Optional[bool] = None,
    log_dir: Optional[Path] = None,
    force: bool = False,
) -> logging.Logger:
    """Configure console logging and, optionally, a dated log file.

    Args:
        name: Logger name to return
        level: Console log level. Defaults to settings.
        log_to_file: Whether to write to file. Defaults to settings.
        log_dir: Directory for log files. Defaults to settings.
        force: Replace handlers from an earlier call instead of keeping them

    Returns:
        Logger for ``name``
    """
    settings = get_settings()

    level = level or settings.log_level
    log_to_file = log_to_file if log_to_file is not None else settings.log_to_file
    log_dir = log_dir or settings.logs_dir

    logger = logging.getLogger(name)
    package_logger = logging.getLogger("market_layout")

    if _handlers and not force:
        return logger

    while _handlers:
        handler = _handlers.pop()
        package_logger.removeHandler(handler)
        handler.close()

    package_logger.setLevel(logging.DEBUG)  # Filter at handler level

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, level.upper()))
    console_handler.setFormatter(ColoredFormatter(
        "%(asctime)s | %(levelname_colored)s | %(name)s | %(message)s",
        datefmt="%H:%M:%S"
    ))
    _handlers.append(console_handler)

    if log_to_file:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"market_layout_{datetime.now():%Y-%m-%d}.log"

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        _handlers.append(file_handler)

    for handler in _handlers:
        package_logger.addHandler(handler)

    return logger

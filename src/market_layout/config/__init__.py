"""Configuration module.

Usage:
    from market_layout.config import get_settings

    settings = get_settings()
    print(settings.long_label_length)
"""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]

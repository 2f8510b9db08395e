"""Centralized configuration using pydantic-settings.

All configuration values are loaded from environment variables prefixed with
``MARKET_LAYOUT_``. Values can also be placed in a ``.env`` file.

Usage:
    from market_layout.config import get_settings
    settings = get_settings()
    print(settings.log_level)
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MARKET_LAYOUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra env vars
    )

    # ==========================================================================
    # Row layout
    # ==========================================================================
    long_label_length: int = Field(
        default=40,
        description="Average label length above which outcomes get a row each"
    )
    medium_label_length: int = Field(
        default=25,
        description="Average label length above which outcomes are paired per row"
    )
    max_outcomes_per_row: int = Field(
        default=3,
        description="Outcomes per row when labels are short"
    )

    # ==========================================================================
    # Logging
    # ==========================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    log_to_file: bool = Field(
        default=False,
        description="Whether to write logs to file"
    )
    logs_dir: Path = Field(
        default_factory=lambda: _get_project_root() / "logs",
        description="Directory for log files"
    )

    # ==========================================================================
    # Validators
    # ==========================================================================
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper

    @field_validator("long_label_length", "max_outcomes_per_row")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("value must be at least 1")
        return v

    @field_validator("medium_label_length")
    @classmethod
    def validate_medium_below_long(cls, v: int, info: ValidationInfo) -> int:
        long_length = info.data.get("long_label_length")
        if v < 1:
            raise ValueError("medium_label_length must be at least 1")
        if long_length is not None and v >= long_length:
            raise ValueError("medium_label_length must be below long_label_length")
        return v

    def ensure_directories(self) -> None:
        """Create the log directory when file logging is enabled."""
        if self.log_to_file:
            self.logs_dir.mkdir(parents=True, exist_ok=True)


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded once and cached.
    Call get_settings.cache_clear() to reload.
    """
    settings = Settings()
    settings.ensure_directories()
    return settings

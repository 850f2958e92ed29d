#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from pathlib import Path
from typing import Optional, Tuple

from pydantic import field_validator
from pydantic_settings import BaseSettings

from .constants import (
    ZERO_SENTINEL, ERROR_SENTINEL,
    DEFAULT_WRAP_MODE, WRAP_MODES,
    LOG_LEVEL, LOG_FILE,
)


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Formatter settings, read from MATHFMT_* environment variables or .env"""

    # ========== Engine Sentinels ==========
    zero_sentinel: str = ZERO_SENTINEL
    error_sentinel: str = ERROR_SENTINEL  # Override if the engine localizes it

    # ========== Rendering ==========
    wrap_mode: str = DEFAULT_WRAP_MODE  # none | inline | display

    # ========== Logging ==========
    log_level: str = LOG_LEVEL
    log_file: Optional[str] = LOG_FILE

    class Config:
        env_prefix = "MATHFMT_"
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Allow extra fields from .env that aren't defined in model

    @field_validator("wrap_mode")
    @classmethod
    def _check_wrap_mode(cls, value: str) -> str:
        value = value.lower()
        if value not in WRAP_MODES:
            raise ValueError(f"wrap_mode must be one of {WRAP_MODES}, got {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unsupported log level: {value}")
        return value

    @property
    def sentinels(self) -> Tuple[str, str]:
        """Engine literals that bypass every rewrite rule"""
        return (self.zero_sentinel, self.error_sentinel)


# Global settings instance
settings = Settings()

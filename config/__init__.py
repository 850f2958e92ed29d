"""
Configuration module for the math display formatter.
"""
from .constants import *
from .logging_config import setup_logger, get_logger

__all__ = [
    # Logging
    'setup_logger',
    'get_logger',
    # Constants (all exported via *)
]

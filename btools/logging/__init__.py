"""
Logging configuration and utilities for btools.
"""
from .config import configure_library_defaults, configure_logging, get_logger

__all__ = ["configure_library_defaults", "configure_logging", "get_logger"]

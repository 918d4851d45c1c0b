"""
Logging configuration and utilities for the Stoic sanitizer.
"""
from .config import configure_logging, configure_logging_from, get_logger, get_diagnostics_logger

__all__ = ["configure_logging", "configure_logging_from", "get_logger", "get_diagnostics_logger"]

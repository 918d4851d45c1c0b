"""Sanitizer configuration: defaults, YAML loading and validation."""

from .defaults import DefaultConfig, LoggingParams, SanitizerParams, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "DefaultConfig",
    "LoggingParams",
    "SanitizerParams",
    "get_default_config",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationError",
]

"""
Error classification for the sanitization pipeline.

This module provides the exception hierarchy raised while classifying,
sanitizing and constructing immutable values. Circular references are not
errors: they are reported as ``CycleDetected`` events instead.
"""

from .construction import (
    StoicError,
    InvalidArgumentError,
    MutationError,
)
from .traversal import (
    UnsupportedTypeError,
    TraversalDepthError,
    ConfigurationError,
)

__all__ = [
    # Base
    "StoicError",
    # Construction Errors
    "InvalidArgumentError",
    "MutationError",
    # Traversal Errors
    "UnsupportedTypeError",
    "TraversalDepthError",
    "ConfigurationError",
]

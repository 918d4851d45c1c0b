"""
Traversal error classifications for the recursive sanitizer.

Every one of these is fatal to the ``create`` call that raised it: the
partially built result is discarded and never returned.
"""

from typing import Optional, Any, Tuple

from .construction import StoicError


class UnsupportedTypeError(StoicError, TypeError):
    """A value with no immutable representation was found in the input graph."""

    def __init__(self, message: str, type_name: Optional[str] = None,
                 reason: Optional[str] = None, path: Tuple[Any, ...] = (), **kwargs):
        super().__init__(message, **kwargs)
        self.type_name = type_name
        self.reason = reason
        self.path = tuple(path)


class TraversalDepthError(StoicError, RecursionError):
    """The input graph is nested deeper than the traversal can follow."""

    def __init__(self, message: str, path: Optional[Tuple[Any, ...]] = None,
                 limit: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = tuple(path) if path is not None else None
        self.limit = limit


class ConfigurationError(StoicError, ValueError):
    """Sanitizer configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []

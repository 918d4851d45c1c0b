"""
Construction error classifications for immutable containers.

These exceptions are raised when a container is handed a source of the
wrong shape, or when code tries to change a container after it was built.
Both subclass ``TypeError`` so callers can treat them like the errors
Python raises for tuples and frozen dataclasses.
"""

from typing import Optional, Dict, Any


class StoicError(Exception):
    """Base class for all sanitization and construction failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class InvalidArgumentError(StoicError, TypeError):
    """A direct constructor received a source of the wrong shape."""

    def __init__(self, message: str, expected: Optional[str] = None,
                 actual: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.expected = expected
        self.actual = actual


class MutationError(StoicError, TypeError):
    """An assignment or deletion was attempted on an immutable container."""

    def __init__(self, message: str, target: Optional[str] = None,
                 operation: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.target = target
        self.operation = operation

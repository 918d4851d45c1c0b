"""
Immutable failure: a sanitized, inert description of an exception.
"""

from typing import Any

from ..errors import InvalidArgumentError
from .base import StoicValue


class StoicFailure(StoicValue):
    """
    Frozen name/message/trace/cause record of an exception.

    The original exception object is not retained. ``name`` carries a prefix
    (``"Stoic"`` by default) so a consumer can tell a sanitized failure from
    a live exception class name. ``cause`` is None when the source had none.
    """

    __slots__ = ("_name", "_message", "_trace", "_cause", "_hash")

    def __new__(cls, source: Any) -> "StoicFailure":
        if isinstance(source, StoicFailure):
            return source

        if not isinstance(source, BaseException):
            raise InvalidArgumentError(
                f"StoicFailure expects an exception, got {type(source).__name__}",
                expected="failure",
                actual=type(source).__name__,
            )

        from ..core.sanitizer import create

        return create(source)

    @classmethod
    def _from_parts(cls, name: str, message: str, trace: str, cause: Any) -> "StoicFailure":
        instance = object.__new__(cls)
        object.__setattr__(instance, "_name", name)
        object.__setattr__(instance, "_message", message)
        object.__setattr__(instance, "_trace", trace)
        object.__setattr__(instance, "_cause", cause)
        return instance

    @property
    def name(self) -> str:
        return self._name

    @property
    def message(self) -> str:
        return self._message

    @property
    def trace(self) -> str:
        return self._trace

    @property
    def cause(self) -> Any:
        return self._cause

    @property
    def has_cause(self) -> bool:
        return self._cause is not None

    def _key(self) -> tuple:
        return (self._name, self._message, self._trace, self._cause)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StoicFailure):
            return self._key() == other._key()
        return NotImplemented

    def __hash__(self) -> int:
        return self._cached_hash(lambda: hash(self._key()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, message={self._message!r})"

    def __str__(self) -> str:
        return f"{self._name}: {self._message}" if self._message else self._name

"""
Immutable record: an ordered, read-only mapping of sanitized values.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Iterable, Iterator

from ..errors import InvalidArgumentError
from .base import StoicValue


class StoicRecord(StoicValue, Mapping):
    """
    Read-only mapping produced from a dict, mapping, dataclass or namespace.

    Keys keep their source order. String keys are also readable as
    attributes, so ``record.user.name`` and ``record["user"]["name"]`` are
    equivalent; keys that collide with Mapping methods (``keys``, ``get``,
    ...) are only reachable by item access.
    """

    __slots__ = ("_fields", "_hash")

    def __new__(cls, source: Any) -> "StoicRecord":
        if isinstance(source, StoicRecord):
            return source

        from ..core.classifier import Kind, classify
        from ..core.sanitizer import create

        kind = classify(source)
        if kind is not Kind.RECORD:
            raise InvalidArgumentError(
                f"StoicRecord expects a record-like value, got {type(source).__name__}",
                expected=Kind.RECORD.value,
                actual=kind.value,
            )
        return create(source)

    @classmethod
    def _from_sanitized(cls, items: Iterable[tuple[Any, Any]]) -> "StoicRecord":
        instance = object.__new__(cls)
        object.__setattr__(instance, "_fields", MappingProxyType(dict(items)))
        return instance

    def __getitem__(self, key: Any) -> Any:
        return self._fields[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, key: object) -> bool:
        return key in self._fields

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._fields[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__} has no field {name!r}"
            ) from None

    def __dir__(self) -> list[str]:
        names = set(super().__dir__())
        names.update(key for key in self._fields if isinstance(key, str))
        return sorted(names)

    def __hash__(self) -> int:
        return self._cached_hash(lambda: hash(frozenset(self._fields.items())))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping):
            return dict(self._fields) == dict(other.items())
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._fields)!r})"

    def has_own(self, key: Any) -> bool:
        """True if ``key`` is one of this record's own fields."""
        return key in self._fields

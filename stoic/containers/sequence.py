"""
Immutable sequence: a fixed-length, indexable, restartable view of sanitized
elements with a whitelisted set of non-mutating operations.
"""

from collections.abc import Sequence
from typing import Any, Callable, Iterable, Iterator, Optional

from ..errors import InvalidArgumentError
from .base import StoicValue
from .views import _MISSING, delegate


class StoicSequence(StoicValue, Sequence):
    """
    Read-only ordered collection produced from a list, tuple or other sequence.

    Supports ``len``, integer and slice indexing, ``in``, ``index``/``count``
    and repeated iteration. Operations that produce an ordered collection
    (``map``, ``filter``, ``slice``, ``to_sorted``, ...) return a new
    StoicSequence and leave the receiver untouched.

    Example:
        >>> seq = StoicSequence([1, 2, 3])
        >>> seq.map(lambda x: x * 2)
        StoicSequence([2, 4, 6])
        >>> seq
        StoicSequence([1, 2, 3])

    Derived sequences are built by a fresh ``create`` call with default
    parameters and no cycle callback: a mutable object that a callback
    inserts twice is kept once and replaced by OMITTED afterwards, and
    inserted exceptions get the default failure name prefix.
    """

    __slots__ = ("_items", "_hash")

    def __new__(cls, source: Any) -> "StoicSequence":
        if isinstance(source, StoicSequence):
            return source

        from ..core.classifier import Kind, classify
        from ..core.sanitizer import create

        kind = classify(source)
        if kind is not Kind.SEQUENCE:
            raise InvalidArgumentError(
                f"StoicSequence expects a sequence-like value, got {type(source).__name__}",
                expected=Kind.SEQUENCE.value,
                actual=kind.value,
            )
        return create(source)

    @classmethod
    def _from_sanitized(cls, items: Iterable[Any]) -> "StoicSequence":
        instance = object.__new__(cls)
        object.__setattr__(instance, "_items", tuple(items))
        return instance

    @property
    def length(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return delegate(self, "slice", index.start, index.stop, index.step)
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        for index in range(len(self._items)):
            yield self._items[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StoicSequence):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return self._cached_hash(lambda: hash(self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

    # Lookup and search

    def at(self, index: int) -> Any:
        """
        Element at ``index`` (negative counts from the end), or None.

        ``index`` must be an integer, as for list indexing; floats raise TypeError.
        """
        return delegate(self, "at", index)

    def includes(self, value: Any, from_index: int = 0) -> bool:
        """True if ``value`` occurs at or after ``from_index``; NaN matches NaN."""
        return delegate(self, "includes", value, from_index)

    def index_of(self, value: Any, from_index: int = 0) -> int:
        """First index of ``value`` at or after ``from_index``, or -1."""
        return delegate(self, "index_of", value, from_index)

    def last_index_of(self, value: Any, from_index: Optional[int] = None) -> int:
        """Last index of ``value`` at or before ``from_index``, or -1."""
        return delegate(self, "last_index_of", value, from_index)

    def find(self, callback: Callable[..., Any]) -> Any:
        return delegate(self, "find", callback)

    def find_index(self, callback: Callable[..., Any]) -> int:
        return delegate(self, "find_index", callback)

    def find_last(self, callback: Callable[..., Any]) -> Any:
        return delegate(self, "find_last", callback)

    def find_last_index(self, callback: Callable[..., Any]) -> int:
        return delegate(self, "find_last_index", callback)

    # Predicates, iteration and folds

    def every(self, callback: Callable[..., Any]) -> bool:
        return delegate(self, "every", callback)

    def some(self, callback: Callable[..., Any]) -> bool:
        return delegate(self, "some", callback)

    def for_each(self, callback: Callable[..., Any]) -> None:
        """Call ``callback(element, index, sequence)`` for each element in order."""
        delegate(self, "for_each", callback)

    def reduce(self, callback: Callable[..., Any], initial: Any = _MISSING) -> Any:
        """
        Fold left to right with ``callback(accumulator, element, index, sequence)``.

        Without ``initial`` the first element seeds the accumulator, and an
        empty sequence raises TypeError.
        """
        return delegate(self, "reduce", callback, initial)

    def reduce_right(self, callback: Callable[..., Any], initial: Any = _MISSING) -> Any:
        """Fold right to left; otherwise identical to ``reduce``."""
        return delegate(self, "reduce_right", callback, initial)

    def values(self) -> Iterator[Any]:
        return delegate(self, "values")

    # String rendering

    def join(self, separator: str = ",") -> str:
        """Elements rendered with ``str`` and joined; None renders as an empty string."""
        return delegate(self, "join", separator)

    def to_string(self) -> str:
        return delegate(self, "to_string")

    # Derived sequences

    def map(self, callback: Callable[..., Any]) -> "StoicSequence":
        return delegate(self, "map", callback)

    def filter(self, callback: Callable[..., Any]) -> "StoicSequence":
        return delegate(self, "filter", callback)

    def slice(self, start: Optional[int] = None, end: Optional[int] = None) -> "StoicSequence":
        return delegate(self, "slice", start, end)

    def concat(self, *items: Any) -> "StoicSequence":
        """New sequence with ``items`` appended; sequence arguments are flattened one level."""
        return delegate(self, "concat", *items)

    def to_reversed(self) -> "StoicSequence":
        return delegate(self, "to_reversed")

    def to_sorted(self, key: Optional[Callable[[Any], Any]] = None,
                  reverse: bool = False) -> "StoicSequence":
        """Sorted copy, with the same ``key``/``reverse`` semantics as ``sorted``."""
        return delegate(self, "to_sorted", key=key, reverse=reverse)

    def to_spliced(self, start: int, delete_count: Optional[int] = None,
                   *items: Any) -> "StoicSequence":
        """Copy with ``delete_count`` elements removed at ``start`` and ``items`` inserted."""
        return delegate(self, "to_spliced", start, delete_count, *items)

    def with_item(self, index: int, value: Any) -> "StoicSequence":
        """Copy with the element at ``index`` replaced by ``value``."""
        return delegate(self, "with_item", index, value)

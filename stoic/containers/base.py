"""
Shared immutability enforcement for the container variants.

Every container stores its state in ``__slots__`` written once from
``__new__`` through ``object.__setattr__``. After that, attribute and item
assignment or deletion raise ``MutationError``.
"""

from typing import Any, NoReturn

from ..errors import MutationError


class StoicValue:
    """Base class for immutable containers. Raises on any attempt to modify."""

    __slots__ = ()

    def _refuse(self, operation: str, name: Any) -> NoReturn:
        raise MutationError(
            f"{type(self).__name__} is immutable: cannot {operation} {name!r}",
            target=type(self).__name__,
            operation=operation,
            context={"name": name}
        )

    def __setattr__(self, name: str, value: Any) -> None:
        self._refuse("set attribute", name)

    def __delattr__(self, name: str) -> None:
        self._refuse("delete attribute", name)

    def __setitem__(self, key: Any, value: Any) -> None:
        self._refuse("set item", key)

    def __delitem__(self, key: Any) -> None:
        self._refuse("delete item", key)

    def __copy__(self) -> "StoicValue":
        return self

    def __deepcopy__(self, memo: dict) -> "StoicValue":
        return self

    def _cached_hash(self, compute) -> int:
        # Lazily computed; the slot is internal state, not a visible mutation.
        try:
            return self._hash
        except AttributeError:
            value = compute()
            object.__setattr__(self, "_hash", value)
            return value


class _Omitted:
    """Marker placed where a circular or already-visited reference was found."""

    __slots__ = ()
    _instance = None

    def __new__(cls) -> "_Omitted":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<omitted>"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "OMITTED"

    def __copy__(self) -> "_Omitted":
        return self

    def __deepcopy__(self, memo: dict) -> "_Omitted":
        return self

    def __setattr__(self, name: str, value: Any) -> None:
        raise MutationError("OMITTED is immutable", target="OMITTED", operation="set attribute")


OMITTED = _Omitted()

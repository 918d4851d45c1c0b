"""
View-operation delegation for immutable sequences.

``VIEW_OPERATIONS`` is the fixed whitelist of non-mutating operations a
``StoicSequence`` exposes. Each entry pairs a host operation, which runs over
a plain ``list`` copy of the sequence's elements, with a strategy that says
whether the host result is returned as-is or re-wrapped into a new
``StoicSequence``. Operations that look mutating (``to_sorted``,
``to_spliced``, ``with_item``) build a new list and never touch the
receiver.

Callbacks are called with ``(element, index, sequence)`` trimmed to the
number of positional parameters they accept, so ``lambda x: x * 2`` and
``lambda x, i, seq: ...`` both work. Fold callbacks receive the accumulator
first. Calls are strictly sequential, once per element.
"""

import inspect
import math
import operator
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Iterator, Mapping, Optional

from .base import OMITTED, StoicValue


class ViewStrategy(str, Enum):
    """What happens to a host operation's result."""
    VERBATIM = "verbatim"    # Primitive or element result, returned unchanged
    REWRAP = "rewrap"        # Ordered collection result, wrapped in a new sequence


@dataclass(frozen=True)
class ViewOperation:
    """A whitelisted read-only operation."""
    name: str
    strategy: ViewStrategy
    host: Callable[..., Any]


_MISSING = object()


def _positional_arity(callback: Callable[..., Any]) -> Optional[int]:
    """Number of positional arguments ``callback`` accepts; None means unbounded."""
    if isinstance(callback, type):
        return 1

    try:
        signature = inspect.signature(callback)
    except (TypeError, ValueError):
        # Builtins without introspectable signatures get the element only
        return 1

    count = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if parameter.kind in (inspect.Parameter.POSITIONAL_ONLY,
                              inspect.Parameter.POSITIONAL_OR_KEYWORD):
            count += 1
    return count


def _adapt(callback: Callable[..., Any]) -> Callable[..., Any]:
    if not callable(callback):
        raise TypeError(f"{type(callback).__name__} object is not callable")

    arity = _positional_arity(callback)
    if arity is None:
        return callback
    return lambda *args: callback(*args[:arity])


def _start_index(from_index: int, length: int) -> int:
    from_index = operator.index(from_index)
    if from_index < 0:
        return max(length + from_index, 0)
    return min(from_index, length)


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _render(value: Any) -> str:
    if value is None or value is OMITTED:
        return ""
    if isinstance(value, StoicValue) and isinstance(value, Sequence):
        return _join(list(value), value)
    return str(value)


# Host operations: (elements, view, *args) -> result

def _at(elements: list, view: Any, index: int) -> Any:
    index = operator.index(index)
    if -len(elements) <= index < len(elements):
        return elements[index]
    return None


def _includes(elements: list, view: Any, value: Any, from_index: int = 0) -> bool:
    for element in elements[_start_index(from_index, len(elements)):]:
        if element is value or element == value or (_is_nan(element) and _is_nan(value)):
            return True
    return False


def _index_of(elements: list, view: Any, value: Any, from_index: int = 0) -> int:
    for index in range(_start_index(from_index, len(elements)), len(elements)):
        if elements[index] == value:
            return index
    return -1


def _last_index_of(elements: list, view: Any, value: Any,
                   from_index: Optional[int] = None) -> int:
    length = len(elements)
    if from_index is None:
        start = length - 1
    else:
        from_index = operator.index(from_index)
        start = min(from_index, length - 1) if from_index >= 0 else length + from_index
    for index in range(start, -1, -1):
        if elements[index] == value:
            return index
    return -1


def _find(elements: list, view: Any, callback: Callable[..., Any]) -> Any:
    call = _adapt(callback)
    for index, element in enumerate(elements):
        if call(element, index, view):
            return element
    return None


def _find_index(elements: list, view: Any, callback: Callable[..., Any]) -> int:
    call = _adapt(callback)
    for index, element in enumerate(elements):
        if call(element, index, view):
            return index
    return -1


def _find_last(elements: list, view: Any, callback: Callable[..., Any]) -> Any:
    call = _adapt(callback)
    for index in range(len(elements) - 1, -1, -1):
        if call(elements[index], index, view):
            return elements[index]
    return None


def _find_last_index(elements: list, view: Any, callback: Callable[..., Any]) -> int:
    call = _adapt(callback)
    for index in range(len(elements) - 1, -1, -1):
        if call(elements[index], index, view):
            return index
    return -1


def _every(elements: list, view: Any, callback: Callable[..., Any]) -> bool:
    call = _adapt(callback)
    return all(call(element, index, view) for index, element in enumerate(elements))


def _some(elements: list, view: Any, callback: Callable[..., Any]) -> bool:
    call = _adapt(callback)
    return any(call(element, index, view) for index, element in enumerate(elements))


def _for_each(elements: list, view: Any, callback: Callable[..., Any]) -> None:
    call = _adapt(callback)
    for index, element in enumerate(elements):
        call(element, index, view)


def _map(elements: list, view: Any, callback: Callable[..., Any]) -> list:
    call = _adapt(callback)
    return [call(element, index, view) for index, element in enumerate(elements)]


def _filter(elements: list, view: Any, callback: Callable[..., Any]) -> list:
    call = _adapt(callback)
    return [element for index, element in enumerate(elements) if call(element, index, view)]


def _fold(elements: list, view: Any, callback: Callable[..., Any],
          initial: Any, indices: range) -> Any:
    call = _adapt(callback)
    indices = iter(indices)
    if initial is _MISSING:
        first = next(indices, None)
        if first is None:
            raise TypeError("reduce of empty sequence with no initial value")
        accumulator = elements[first]
    else:
        accumulator = initial
    for index in indices:
        accumulator = call(accumulator, elements[index], index, view)
    return accumulator


def _reduce(elements: list, view: Any, callback: Callable[..., Any],
            initial: Any = _MISSING) -> Any:
    return _fold(elements, view, callback, initial, range(len(elements)))


def _reduce_right(elements: list, view: Any, callback: Callable[..., Any],
                  initial: Any = _MISSING) -> Any:
    return _fold(elements, view, callback, initial, range(len(elements) - 1, -1, -1))


def _join(elements: list, view: Any, separator: str = ",") -> str:
    return separator.join(_render(element) for element in elements)


def _to_string(elements: list, view: Any) -> str:
    return _join(elements, view)


def _values(elements: list, view: Any) -> Iterator[Any]:
    return iter(elements)


def _slice(elements: list, view: Any, start: Optional[int] = None,
           end: Optional[int] = None, step: Optional[int] = None) -> list:
    return elements[start:end:step]


def _concat(elements: list, view: Any, *items: Any) -> list:
    result = list(elements)
    for item in items:
        if isinstance(item, Sequence) and not isinstance(item, (str, bytes)):
            result.extend(item)
        else:
            result.append(item)
    return result


def _to_reversed(elements: list, view: Any) -> list:
    return elements[::-1]


def _to_sorted(elements: list, view: Any, key: Optional[Callable[[Any], Any]] = None,
               reverse: bool = False) -> list:
    return sorted(elements, key=key, reverse=reverse)


def _to_spliced(elements: list, view: Any, start: int,
                delete_count: Optional[int] = None, *items: Any) -> list:
    length = len(elements)
    start = _start_index(start, length)
    if delete_count is None:
        delete_count = length - start
    else:
        delete_count = min(max(operator.index(delete_count), 0), length - start)
    return elements[:start] + list(items) + elements[start + delete_count:]


def _with_item(elements: list, view: Any, index: int, value: Any) -> list:
    length = len(elements)
    position = operator.index(index)
    if position < 0:
        position += length
    if not 0 <= position < length:
        raise IndexError(f"index {index} out of range for sequence of length {length}")
    result = list(elements)
    result[position] = value
    return result


def _operation(name: str, strategy: ViewStrategy, host: Callable[..., Any]) -> tuple:
    return name, ViewOperation(name=name, strategy=strategy, host=host)


VIEW_OPERATIONS: Mapping[str, ViewOperation] = MappingProxyType(dict([
    # Lookup and search
    _operation("at", ViewStrategy.VERBATIM, _at),
    _operation("includes", ViewStrategy.VERBATIM, _includes),
    _operation("index_of", ViewStrategy.VERBATIM, _index_of),
    _operation("last_index_of", ViewStrategy.VERBATIM, _last_index_of),
    _operation("find", ViewStrategy.VERBATIM, _find),
    _operation("find_index", ViewStrategy.VERBATIM, _find_index),
    _operation("find_last", ViewStrategy.VERBATIM, _find_last),
    _operation("find_last_index", ViewStrategy.VERBATIM, _find_last_index),
    # Predicates, iteration and folds
    _operation("every", ViewStrategy.VERBATIM, _every),
    _operation("some", ViewStrategy.VERBATIM, _some),
    _operation("for_each", ViewStrategy.VERBATIM, _for_each),
    _operation("reduce", ViewStrategy.VERBATIM, _reduce),
    _operation("reduce_right", ViewStrategy.VERBATIM, _reduce_right),
    _operation("values", ViewStrategy.VERBATIM, _values),
    # String rendering
    _operation("join", ViewStrategy.VERBATIM, _join),
    _operation("to_string", ViewStrategy.VERBATIM, _to_string),
    # Derived sequences
    _operation("map", ViewStrategy.REWRAP, _map),
    _operation("filter", ViewStrategy.REWRAP, _filter),
    _operation("slice", ViewStrategy.REWRAP, _slice),
    _operation("concat", ViewStrategy.REWRAP, _concat),
    _operation("to_reversed", ViewStrategy.REWRAP, _to_reversed),
    _operation("to_sorted", ViewStrategy.REWRAP, _to_sorted),
    _operation("to_spliced", ViewStrategy.REWRAP, _to_spliced),
    _operation("with_item", ViewStrategy.REWRAP, _with_item),
]))


def delegate(view: Any, name: str, *args: Any, **kwargs: Any) -> Any:
    """
    Run a whitelisted operation against a list copy of ``view``'s elements.

    Raises:
        KeyError: ``name`` is not a whitelisted view operation
    """
    operation = VIEW_OPERATIONS[name]
    result = operation.host(list(view), view, *args, **kwargs)

    if operation.strategy is ViewStrategy.REWRAP:
        return type(view)(result)
    return result

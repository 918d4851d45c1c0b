"""
Value classification for the sanitizer.

``classify`` decides, without side effects, how a value is turned into its
immutable mirror. The rules are checked in a fixed order; the first match
wins. All lookup tables here are built once at import time and never change.
"""

import array
import asyncio
import concurrent.futures
import dataclasses
import inspect
import re
import weakref
from collections.abc import Iterator, Mapping, Sequence
from datetime import date, time, timedelta
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from pathlib import PurePath
from types import SimpleNamespace
from typing import Any, Optional
from uuid import UUID

from ..containers.base import OMITTED, StoicValue
from ..utils.time import to_epoch_millis


class Kind(str, Enum):
    """How a value is handled by the sanitizer."""
    NULLISH = "nullish"
    PRIMITIVE = "primitive"
    ALREADY_IMMUTABLE = "already_immutable"
    CONVERTIBLE = "convertible"
    SEQUENCE = "sequence"
    FAILURE = "failure"
    RECORD = "record"
    UNSUPPORTED = "unsupported"


# Kinds returned as-is, without recursion or cycle tracking.
PASSTHROUGH_KINDS = frozenset({Kind.NULLISH, Kind.PRIMITIVE, Kind.ALREADY_IMMUTABLE})

PRIMITIVE_TYPES = (
    str,
    bytes,
    int,          # includes bool
    float,
    complex,
    Decimal,
    Fraction,
    Enum,
    UUID,
    time,
    timedelta,
)

CONVERTIBLE_TYPES = (date, re.Pattern, bytearray, memoryview, PurePath)

_WEAK_CONTAINERS = (weakref.WeakKeyDictionary, weakref.WeakValueDictionary, weakref.WeakSet)
_FUTURES = (asyncio.Future, concurrent.futures.Future)


def classify(value: Any) -> Kind:
    """Determine the kind of ``value``."""
    if value is None or value is OMITTED:
        return Kind.NULLISH

    if isinstance(value, PRIMITIVE_TYPES):
        return Kind.PRIMITIVE

    if isinstance(value, StoicValue):
        return Kind.ALREADY_IMMUTABLE

    if isinstance(value, CONVERTIBLE_TYPES):
        return Kind.CONVERTIBLE

    if describe_unsupported(value) is not None:
        return Kind.UNSUPPORTED

    if isinstance(value, (Sequence, array.array)):
        return Kind.SEQUENCE

    if isinstance(value, BaseException):
        return Kind.FAILURE

    if is_record_like(value):
        return Kind.RECORD

    return Kind.UNSUPPORTED


def describe_unsupported(value: Any) -> Optional[str]:
    """
    Explain why a composite value is disallowed.

    Returns:
        A short reason for callables, pending computations, lazy iterators and
        weak-reference containers; None for anything else.
    """
    if isinstance(value, _WEAK_CONTAINERS):
        return "weak-reference container"
    if isinstance(value, _FUTURES) or inspect.isawaitable(value):
        return "pending computation"
    if callable(value):
        return "callable"
    if isinstance(value, Iterator):
        return "lazy iterator"
    return None


def is_record_like(value: Any) -> bool:
    """True for mappings and plain data objects (dataclass instances, namespaces)."""
    if isinstance(value, Mapping):
        return True
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    return isinstance(value, SimpleNamespace)


def record_items(value: Any) -> list[tuple[Any, Any]]:
    """Own data fields of a record-like value, in source order."""
    if isinstance(value, Mapping):
        return list(value.items())
    if isinstance(value, SimpleNamespace):
        return list(vars(value).items())
    return [(field.name, getattr(value, field.name)) for field in dataclasses.fields(value)]


def to_primitive(value: Any) -> Any:
    """Convert a CONVERTIBLE value to its canonical primitive form."""
    if isinstance(value, date):
        return to_epoch_millis(value)
    if isinstance(value, re.Pattern):
        return value.pattern
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, PurePath):
        return str(value)
    raise TypeError(f"{type(value).__name__} has no primitive conversion")


def unsupported_reason(value: Any) -> str:
    """Reason string for any value classified as UNSUPPORTED."""
    return describe_unsupported(value) or "no immutable representation"

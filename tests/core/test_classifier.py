"""Tests for value classification."""

import array
import asyncio
import re
import weakref
from collections import OrderedDict, deque, namedtuple
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from pathlib import PurePosixPath
from types import MappingProxyType, SimpleNamespace
from uuid import UUID

import pytest

from stoic import OMITTED, StoicFailure, StoicRecord, StoicSequence
from stoic.core.classifier import (
    Kind,
    classify,
    describe_unsupported,
    is_record_like,
    record_items,
    to_primitive,
    unsupported_reason,
)


class Color(Enum):
    RED = "red"


class Behaviour:
    """Arbitrary object with methods and no record semantics."""

    def run(self) -> None:
        pass


Point = namedtuple("Point", "x y")


class TestNullishAndPrimitive:
    """Rules 1 and 2: absent values and immutable scalars."""

    def test_none_and_omitted_are_nullish(self):
        assert classify(None) is Kind.NULLISH
        assert classify(OMITTED) is Kind.NULLISH

    @pytest.mark.parametrize("value", [
        "text", b"raw", 0, -3, 2.5, 1 + 2j, True, False,
        Decimal("1.10"), Fraction(1, 3), Color.RED,
        UUID("12345678-1234-5678-1234-567812345678"),
        time(12, 30), timedelta(seconds=5),
    ])
    def test_scalars_are_primitive(self, value):
        assert classify(value) is Kind.PRIMITIVE


class TestAlreadyImmutable:
    """Rule 3: identity passthrough for existing containers."""

    def test_containers_are_already_immutable(self):
        assert classify(StoicRecord({"a": 1})) is Kind.ALREADY_IMMUTABLE
        assert classify(StoicSequence([1])) is Kind.ALREADY_IMMUTABLE
        assert classify(StoicFailure(ValueError("x"))) is Kind.ALREADY_IMMUTABLE


class TestConvertible:
    """Rule 4: built-ins with a canonical primitive form."""

    def test_datetime_converts_to_epoch_millis(self):
        value = datetime(2023, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert classify(value) is Kind.CONVERTIBLE
        assert to_primitive(value) == 1672574400000

    def test_date_converts_at_midnight_utc(self):
        assert to_primitive(date(1970, 1, 2)) == 86_400_000

    def test_pattern_converts_to_source(self):
        pattern = re.compile(r"^a+\d$")
        assert classify(pattern) is Kind.CONVERTIBLE
        assert to_primitive(pattern) == r"^a+\d$"

    def test_mutable_bytes_convert_to_bytes(self):
        assert to_primitive(bytearray(b"ab")) == b"ab"
        assert to_primitive(memoryview(b"cd")) == b"cd"
        assert type(to_primitive(bytearray(b"ab"))) is bytes

    def test_path_converts_to_string(self):
        assert to_primitive(PurePosixPath("/tmp/x")) == "/tmp/x"

    def test_to_primitive_rejects_other_values(self):
        with pytest.raises(TypeError):
            to_primitive([1, 2])


class TestSequence:
    """Rule 6: ordered, indexable, length-bearing composites."""

    @pytest.mark.parametrize("value", [
        [], [1, 2], (1, 2), Point(1, 2), deque([1]), range(3), array.array("i", [1, 2]),
    ])
    def test_sequences(self, value):
        assert classify(value) is Kind.SEQUENCE

    def test_strings_are_not_sequences(self):
        assert classify("abc") is Kind.PRIMITIVE


class TestFailure:
    """Rule 7: exceptions."""

    def test_exception_instances(self):
        assert classify(ValueError("bad")) is Kind.FAILURE
        assert classify(KeyboardInterrupt()) is Kind.FAILURE

    def test_exception_classes_are_callables(self):
        assert classify(ValueError) is Kind.UNSUPPORTED


class TestRecord:
    """Rule 8: mappings and plain data objects."""

    def test_mappings(self):
        assert classify({}) is Kind.RECORD
        assert classify(OrderedDict(a=1)) is Kind.RECORD
        assert classify(MappingProxyType({"a": 1})) is Kind.RECORD

    def test_dataclass_instance(self, sample_account):
        assert classify(sample_account) is Kind.RECORD
        assert is_record_like(sample_account)

    def test_dataclass_type_is_not_a_record(self, sample_account):
        assert classify(type(sample_account)) is Kind.UNSUPPORTED

    def test_namespace(self):
        assert classify(SimpleNamespace(a=1)) is Kind.RECORD

    def test_record_items_preserve_order(self, sample_account):
        assert [key for key, _ in record_items({"b": 1, "a": 2})] == ["b", "a"]
        assert [key for key, _ in record_items(sample_account)] == ["owner", "address", "tags"]
        assert record_items(SimpleNamespace(x=1, y=2)) == [("x", 1), ("y", 2)]


class TestUnsupported:
    """Rule 5 and the fallthrough: values with no immutable mirror."""

    def test_callables(self):
        assert classify(lambda: None) is Kind.UNSUPPORTED
        assert classify(print) is Kind.UNSUPPORTED
        assert describe_unsupported(len) == "callable"

    def test_pending_computations(self):
        async def job():
            return 1

        coroutine = job()
        try:
            assert classify(coroutine) is Kind.UNSUPPORTED
            assert describe_unsupported(coroutine) == "pending computation"
        finally:
            coroutine.close()

        loop = asyncio.new_event_loop()
        try:
            future = loop.create_future()
            assert describe_unsupported(future) == "pending computation"
        finally:
            loop.close()

    def test_weak_containers(self):
        assert classify(weakref.WeakValueDictionary()) is Kind.UNSUPPORTED
        assert classify(weakref.WeakKeyDictionary()) is Kind.UNSUPPORTED
        assert describe_unsupported(weakref.WeakSet()) == "weak-reference container"

    def test_iterators(self):
        generator = (x for x in [1])
        assert classify(generator) is Kind.UNSUPPORTED
        assert describe_unsupported(iter([1])) == "lazy iterator"

    def test_behavioural_objects_and_sets(self):
        assert classify(Behaviour()) is Kind.UNSUPPORTED
        assert classify({1, 2}) is Kind.UNSUPPORTED
        assert classify(frozenset()) is Kind.UNSUPPORTED
        assert unsupported_reason(Behaviour()) == "no immutable representation"

    def test_classification_has_no_side_effects(self, sample_profile):
        before = repr(sample_profile)
        classify(sample_profile)
        assert repr(sample_profile) == before

"""Pytest configuration and shared fixtures."""

import pytest
from dataclasses import dataclass, field
from typing import Any, Dict, List
from unittest.mock import Mock

from stoic.core.sanitizer import Sanitizer


@dataclass
class Address:
    """Plain data object used as record-like input."""
    street: str
    city: str


@dataclass
class Account:
    """Nested plain data object with a mutable list field."""
    owner: str
    address: Address
    tags: List[str] = field(default_factory=list)


@pytest.fixture
def sample_profile() -> Dict[str, Any]:
    """Nested mutable profile for sanitization tests."""
    return {
        "user": {"name": "Alice", "age": 30},
        "tags": ["admin", "ops"],
        "settings": {
            "theme": "dark",
            "shortcuts": [{"key": "k", "action": "search"}],
        },
        "active": True,
        "score": 9.5,
        "nickname": None,
    }


@pytest.fixture
def sample_account() -> Account:
    """Dataclass-based account for record-like tests."""
    return Account(
        owner="Bob",
        address=Address(street="1 Main St", city="Springfield"),
        tags=["billing"],
    )


@pytest.fixture
def chained_error() -> ValueError:
    """Exception raised from another exception, with a traceback."""
    try:
        try:
            raise KeyError("missing")
        except KeyError as inner:
            raise ValueError("bad") from inner
    except ValueError as outer:
        return outer


@pytest.fixture
def cycle_events() -> list:
    """Collects CycleDetected events passed to on_cycle."""
    return []


@pytest.fixture
def quiet_sanitizer(cycle_events: list) -> Sanitizer:
    """Sanitizer with captured cycle events and a mocked diagnostics logger."""
    sanitizer = Sanitizer(on_cycle=cycle_events.append)
    sanitizer.diagnostics_logger = Mock()
    return sanitizer

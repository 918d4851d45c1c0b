"""
Time conversion utilities for date-like values.

Dates and datetimes are sanitized into integer epoch milliseconds. Naive
values are interpreted as UTC; a bare date is taken at midnight UTC.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Union

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)


def ensure_utc(value: Union[date, datetime]) -> datetime:
    """
    Normalize a date or datetime to an aware UTC datetime.

    Args:
        value: Date or datetime, naive or aware

    Returns:
        Aware datetime in UTC
    """
    if not isinstance(value, datetime):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)

    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        return value.replace(tzinfo=timezone.utc)

    return value.astimezone(timezone.utc)


def to_epoch_millis(value: Union[date, datetime]) -> int:
    """
    Convert a date or datetime to whole milliseconds since the Unix epoch.

    Sub-millisecond precision is floored, so values before the epoch round
    towards negative infinity.

    Args:
        value: Date or datetime to convert

    Returns:
        Milliseconds since 1970-01-01T00:00:00Z
    """
    return (ensure_utc(value) - EPOCH) // _ONE_MILLISECOND

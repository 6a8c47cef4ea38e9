"""Conversions between resolutions and to/from the ``datetime`` module.

Nanosecond to microsecond conversion truncates; the reverse is exact.
Datetime conversions treat values as seconds since the Unix epoch in UTC.
"""

from datetime import datetime, timedelta, timezone
from typing import TypeVar

from splittime.util import US_IN_SECOND
from splittime.value import TimeSpec, TimeVal, TimeValue

TV = TypeVar("TV", bound=TimeValue)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def timespec_to_timeval(ts: TimeSpec) -> TimeVal:
    return ts.to_timeval()


def timeval_to_timespec(tv: TimeVal) -> TimeSpec:
    return tv.to_timespec()


def _microseconds(value: TimeValue) -> int:
    if isinstance(value, TimeSpec):
        value = value.to_timeval()
    return value.whole * US_IN_SECOND + value.frac


def to_timedelta(value: TimeValue) -> timedelta:
    """Duration as a ``timedelta``; nanoseconds are truncated."""
    return timedelta(microseconds=_microseconds(value))


def from_timedelta(delta: timedelta, cls: type[TV] = TimeVal) -> TV:
    us = delta // timedelta(microseconds=1)
    value = TimeVal(0, us)
    if issubclass(cls, TimeSpec):
        return cls.from_timeval(value)
    return cls(value.whole, value.frac)


def to_datetime(value: TimeValue) -> datetime:
    """Timestamp as a UTC ``datetime``; nanoseconds are truncated."""
    return _EPOCH + to_timedelta(value)


def from_datetime(dt: datetime, cls: type[TV] = TimeVal) -> TV:
    """Convert a timezone-aware ``datetime`` into a Unix timestamp value.

    Raises:
        TypeError: If ``dt`` is naive
    """
    if dt.tzinfo is None:
        raise TypeError(
            f"Expected a timezone-aware datetime.\n"
            f"Got naive datetime: {dt!r}\n"
            f"Hint: Add timezone info:\n"
            f"  dt = datetime(..., tzinfo=timezone.utc)"
        )
    return from_timedelta(dt - _EPOCH, cls)

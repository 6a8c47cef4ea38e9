from .arith import compare, normalize, normalize_stepwise
from .clock import ClockKind, ClockReadError, ClockSource, SystemClock, read_clock
from .convert import (
    from_datetime,
    from_timedelta,
    timespec_to_timeval,
    timeval_to_timespec,
    to_datetime,
    to_timedelta,
)
from .util import MS_IN_SECOND, NS_IN_SECOND, US_IN_SECOND
from .value import TimeSpec, TimeVal, TimeValue

__all__ = [
    "TimeValue",
    "TimeSpec",
    "TimeVal",
    "normalize",
    "normalize_stepwise",
    "compare",
    "timespec_to_timeval",
    "timeval_to_timespec",
    "to_timedelta",
    "from_timedelta",
    "to_datetime",
    "from_datetime",
    "ClockKind",
    "ClockSource",
    "ClockReadError",
    "SystemClock",
    "read_clock",
    "NS_IN_SECOND",
    "US_IN_SECOND",
    "MS_IN_SECOND",
]

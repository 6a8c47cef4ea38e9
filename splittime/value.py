from dataclasses import dataclass
from typing import Any, ClassVar

from typing_extensions import Self, override

from splittime import arith
from splittime.clock import ClockKind, ClockSource, read_clock
from splittime.util import NS_IN_SECOND, NS_IN_US, US_IN_SECOND


@dataclass(frozen=True, eq=False)
class TimeValue:
    """Seconds plus a sub-second fraction at a fixed resolution.

    Subclasses pin the resolution through ``scale`` (sub-units per second).
    Constructing an instance normalizes it so that ``0 <= frac < scale``;
    use :meth:`raw` to hold fields exactly as given.
    """

    whole: int = 0
    frac: int = 0

    scale: ClassVar[int]
    unit: ClassVar[str]

    @classmethod
    def _check_resolution(cls) -> None:
        if not hasattr(cls, "scale"):
            raise TypeError(
                f"{cls.__name__} has no resolution and cannot be built directly.\n"
                f"Hint: Use TimeSpec (nanoseconds) or TimeVal (microseconds)"
            )

    def __post_init__(self) -> None:
        self._check_resolution()
        whole, frac = arith.normalize(self.whole, self.frac, self.scale)
        object.__setattr__(self, "whole", whole)
        object.__setattr__(self, "frac", frac)

    @classmethod
    def raw(cls, whole: int, frac: int) -> Self:
        """Build a value from fields as given, without normalizing."""
        cls._check_resolution()
        value = object.__new__(cls)
        object.__setattr__(value, "whole", whole)
        object.__setattr__(value, "frac", frac)
        return value

    @classmethod
    def from_ms(cls, ms: int) -> Self:
        return cls(*arith.from_ms(ms, cls.scale))

    @classmethod
    def _from_clock(cls, kind: ClockKind, clock: ClockSource | None) -> Self:
        raise NotImplementedError

    @classmethod
    def now(cls, clock: ClockSource | None = None) -> Self:
        """Current wall-clock time."""
        return cls._from_clock("realtime", clock)

    @classmethod
    def now_monotonic(cls, clock: ClockSource | None = None) -> Self:
        """Current monotonic time; only differences are meaningful."""
        return cls._from_clock("monotonic", clock)

    @classmethod
    def now_monotonic_raw(cls, clock: ClockSource | None = None) -> Self:
        """Current monotonic time without NTP slewing."""
        return cls._from_clock("monotonic_raw", clock)

    @property
    def sec(self) -> int:
        return self.whole

    @property
    def is_normalized(self) -> bool:
        return arith.is_normalized(self.frac, self.scale)

    def normalized(self) -> Self:
        """Return the equivalent value with ``0 <= frac < scale``."""
        return type(self)(self.whole, self.frac)

    def as_tuple(self) -> tuple[int, int]:
        return self.whole, self.frac

    def _same_kind(self, other: Any, symbol: str) -> bool:
        if not isinstance(other, TimeValue):
            return False
        if other.scale != self.scale:
            raise TypeError(
                f"Cannot combine {type(self).__name__} {symbol} "
                f"{type(other).__name__}: resolutions differ.\n"
                f"Hint: Convert one side first, e.g. ts.to_timeval() "
                f"or tv.to_timespec()"
            )
        return True

    def __add__(self, other: Self) -> Self:
        if not self._same_kind(other, "+"):
            return NotImplemented
        return type(self)(*arith.add(self.as_tuple(), other.as_tuple(), self.scale))

    def __sub__(self, other: Self) -> Self:
        if not self._same_kind(other, "-"):
            return NotImplemented
        return type(self)(
            *arith.subtract(self.as_tuple(), other.as_tuple(), self.scale)
        )

    def compare(self, other: Self) -> int:
        """Return -1, 0 or 1 as this value is less than, equal to or greater."""
        if not self._same_kind(other, "with"):
            raise TypeError(
                f"Cannot compare {type(self).__name__} with "
                f"{type(other).__name__!r}"
            )
        return arith.compare(self.as_tuple(), other.as_tuple())

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeValue):
            return NotImplemented
        if other.scale != self.scale:
            return False
        return arith.compare(self.as_tuple(), other.as_tuple()) == 0

    def __lt__(self, other: Self) -> bool:
        if not self._same_kind(other, "<"):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Self) -> bool:
        if not self._same_kind(other, "<="):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Self) -> bool:
        if not self._same_kind(other, ">"):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Self) -> bool:
        if not self._same_kind(other, ">="):
            return NotImplemented
        return self.compare(other) >= 0

    @override
    def __hash__(self) -> int:
        return hash((self.scale, self.whole, self.frac))

    @override
    def __str__(self) -> str:
        """Human-friendly ``(S sec, F unit)`` rendering."""
        return f"({self.whole} sec, {self.frac} {self.unit})"


@dataclass(frozen=True, eq=False)
class TimeSpec(TimeValue):
    """Nanosecond-resolution time value."""

    scale: ClassVar[int] = NS_IN_SECOND
    unit: ClassVar[str] = "nsec"

    @property
    def nsec(self) -> int:
        return self.frac

    @classmethod
    @override
    def _from_clock(cls, kind: ClockKind, clock: ClockSource | None) -> Self:
        return cls(*read_clock(kind, clock))

    @classmethod
    def from_timeval(cls, tv: "TimeVal") -> Self:
        # exact: frac < 10**6 scales to frac < 10**9
        return cls.raw(tv.whole, tv.frac * NS_IN_US)

    def to_timeval(self) -> "TimeVal":
        """Truncate to microsecond resolution."""
        return TimeVal.from_timespec(self)


@dataclass(frozen=True, eq=False)
class TimeVal(TimeValue):
    """Microsecond-resolution time value."""

    scale: ClassVar[int] = US_IN_SECOND
    unit: ClassVar[str] = "usec"

    @property
    def usec(self) -> int:
        return self.frac

    @classmethod
    @override
    def _from_clock(cls, kind: ClockKind, clock: ClockSource | None) -> Self:
        # clocks report nanoseconds; normalize before truncating
        return cls.from_timespec(TimeSpec(*read_clock(kind, clock)))

    @classmethod
    def from_timespec(cls, ts: TimeSpec) -> Self:
        # sub-microsecond remainder is dropped
        return cls.raw(ts.whole, ts.frac // NS_IN_US)

    def to_timespec(self) -> TimeSpec:
        """Widen to nanosecond resolution; lossless."""
        return TimeSpec.from_timeval(self)

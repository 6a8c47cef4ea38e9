"""Clock sources for the "now" constructors.

A clock source returns a raw ``(seconds, nanoseconds)`` pair for one of three
clocks. The pair is treated as untrusted: value types always re-normalize it.
Clocks are passed in rather than looked up globally, so tests can supply a
deterministic fake.
"""

import logging
import time
from typing import Literal, Protocol, get_args, runtime_checkable

from splittime.util import NS_IN_SECOND

logger = logging.getLogger(__name__)

ClockKind = Literal["realtime", "monotonic", "monotonic_raw"]

CLOCK_KINDS: tuple[str, ...] = get_args(ClockKind)


def _check_kind(kind: str) -> None:
    if kind not in CLOCK_KINDS:
        raise ValueError(
            f"Unknown clock kind {kind!r}.\n"
            f"Expected one of: {', '.join(CLOCK_KINDS)}"
        )


class ClockReadError(OSError):
    """A clock read failed; carries the errno of the underlying failure."""

    def __init__(self, kind: str, errno: int | None, reason: str):
        message = f"Could not read {kind} clock: {reason}"
        if errno is None:
            super().__init__(message)
        else:
            super().__init__(errno, message)
        self.kind: str = kind
        self.reason: str = reason

    def __reduce__(
        self,
    ) -> tuple[type["ClockReadError"], tuple[str, int | None, str]]:
        return type(self), (self.kind, self.errno, self.reason)


@runtime_checkable
class ClockSource(Protocol):
    """Anything that can read a raw two-field time from a named clock.

    Implementations raise :class:`OSError` when the read fails.
    """

    def read(self, kind: ClockKind) -> tuple[int, int]: ...


# POSIX clock ids, looked up lazily since not every platform has all three
_CLOCK_IDS = {
    "realtime": "CLOCK_REALTIME",
    "monotonic": "CLOCK_MONOTONIC",
    "monotonic_raw": "CLOCK_MONOTONIC_RAW",
}

_FALLBACKS = {
    "realtime": time.time_ns,
    "monotonic": time.monotonic_ns,
}


class SystemClock:
    """Clock source backed by the operating system.

    Uses ``clock_gettime`` where the platform provides it. Elsewhere the
    realtime and monotonic clocks fall back to ``time.time_ns`` and
    ``time.monotonic_ns``; ``monotonic_raw`` has no fallback and fails.
    """

    def read(self, kind: ClockKind) -> tuple[int, int]:
        """Raises ValueError for an unknown kind, OSError if the clock fails."""
        _check_kind(kind)
        clock_id = getattr(time, _CLOCK_IDS[kind], None)
        if clock_id is not None and hasattr(time, "clock_gettime_ns"):
            ns = time.clock_gettime_ns(clock_id)
        elif kind in _FALLBACKS:
            logger.debug("clock_gettime unavailable, using fallback for %s", kind)
            ns = _FALLBACKS[kind]()
        else:
            raise OSError(f"{kind} clock is not available on this platform")
        return divmod(ns, NS_IN_SECOND)


def read_clock(kind: ClockKind, clock: ClockSource | None = None) -> tuple[int, int]:
    """Read one raw ``(seconds, nanoseconds)`` pair from ``clock``.

    Raises:
        ValueError: If ``kind`` is not a known clock
        ClockReadError: If the clock source fails; no value is produced
    """
    _check_kind(kind)
    source = clock if clock is not None else SystemClock()
    try:
        sec, nsec = source.read(kind)
    except OSError as err:
        logger.warning("Failed to read %s clock: %s", kind, err)
        raise ClockReadError(kind, err.errno, err.strerror or str(err)) from err
    return sec, nsec

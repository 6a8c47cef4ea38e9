"""Two-field time arithmetic shared by every resolution.

Values are ``(whole, frac)`` pairs where ``frac`` counts sub-units of
``scale`` per whole unit. A pair is normalized when ``0 <= frac < scale``.
The value types in :mod:`splittime.value` delegate here, so the carry and
borrow rules exist exactly once.
"""

from typing import TypeAlias

from splittime.util import MS_IN_SECOND

Parts: TypeAlias = tuple[int, int]


def is_normalized(frac: int, scale: int) -> bool:
    return 0 <= frac < scale


def normalize(whole: int, frac: int, scale: int) -> Parts:
    """Fold any out-of-range fraction into the whole field.

    Handles fractions of arbitrary magnitude in either direction in one
    step. Floor division keeps the fraction non-negative, so
    ``(10, -2147483647)`` at nanosecond scale becomes ``(7, 852516353)``.
    """
    carry, frac = divmod(frac, scale)
    return whole + carry, frac


def normalize_stepwise(whole: int, frac: int, scale: int) -> Parts:
    """Normalize by repeated single-unit carries and borrows.

    Produces the same result as :func:`normalize` but runs in time
    proportional to ``abs(frac) // scale``. Prefer :func:`normalize`
    unless the input is known to be at most a unit or two out of range.
    """
    while frac >= scale:
        whole += 1
        frac -= scale
    while frac < 0:
        whole -= 1
        frac += scale
    return whole, frac


def add(a: Parts, b: Parts, scale: int) -> Parts:
    """Sum two normalized pairs.

    Both operands must already be normalized: the raw fractional sum is
    then below ``2 * scale`` and a single carry is enough. Operands are
    not re-validated.
    """
    whole = a[0] + b[0]
    frac = a[1] + b[1]
    if frac >= scale:
        whole += 1
        frac -= scale
    return whole, frac


def subtract(minuend: Parts, subtrahend: Parts, scale: int) -> Parts:
    """Difference of two normalized pairs.

    Same precondition as :func:`add`; at most one borrow is applied. The
    whole field of the result is negative when ``minuend < subtrahend``.
    """
    whole = minuend[0] - subtrahend[0]
    frac = minuend[1] - subtrahend[1]
    if frac < 0:
        whole -= 1
        frac += scale
    return whole, frac


def compare(a: Parts, b: Parts) -> int:
    """Three-way comparison of normalized pairs, like ``strcmp``.

    Returns -1 if ``a < b``, 0 if equal and 1 if ``a > b``.
    """
    if a[0] != b[0]:
        return 1 if a[0] > b[0] else -1
    if a[1] != b[1]:
        return 1 if a[1] > b[1] else -1
    return 0


def from_ms(ms: int, scale: int) -> Parts:
    """Split a millisecond count into a normalized pair at ``scale``."""
    # floor semantics keep negative counts normalized as well
    return ms // MS_IN_SECOND, (ms % MS_IN_SECOND) * (scale // MS_IN_SECOND)

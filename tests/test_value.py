"""Tests for the TimeSpec and TimeVal value types."""

import pytest

from splittime import TimeSpec, TimeVal, TimeValue
from splittime.util import NS_IN_SECOND, US_IN_SECOND


def test_default_is_zero():
    """Test that the no-argument constructor gives zero."""
    assert TimeSpec().as_tuple() == (0, 0)
    assert TimeVal().as_tuple() == (0, 0)


def test_construction_normalizes():
    """Test that constructing from raw fields normalizes them."""
    assert TimeSpec(10, 2147483647).as_tuple() == (12, 147483647)
    assert TimeSpec(10, -2147483647).as_tuple() == (7, 852516353)
    assert TimeVal(1, -1).as_tuple() == (0, 999_999)


def test_construction_in_range_is_unchanged():
    """Test that in-range fields are stored as given."""
    assert TimeSpec(5, 123).as_tuple() == (5, 123)
    assert TimeVal(5, 999_999).as_tuple() == (5, 999_999)


def test_raw_skips_normalization():
    """Test that raw keeps fields as given until normalized."""
    value = TimeSpec.raw(1, 3 * NS_IN_SECOND)
    assert value.as_tuple() == (1, 3 * NS_IN_SECOND)
    assert not value.is_normalized
    assert value.normalized() == TimeSpec(4, 0)
    assert value.normalized().is_normalized


def test_values_are_immutable():
    """Test that fields cannot be reassigned."""
    value = TimeSpec(1, 2)
    with pytest.raises(AttributeError):
        value.whole = 5  # type: ignore[misc]


def test_from_ms():
    """Test the millisecond constructor at both resolutions."""
    assert TimeSpec.from_ms(1000) == TimeSpec(1, 0)
    assert TimeSpec.from_ms(1) == TimeSpec(0, NS_IN_SECOND // 1000)
    assert TimeSpec.from_ms(99999) == TimeSpec(99, 999 * (NS_IN_SECOND // 1000))
    assert TimeVal.from_ms(1) == TimeVal(0, US_IN_SECOND // 1000)
    assert TimeVal.from_ms(99999) == TimeVal(99, 999_000)


def test_aliases():
    """Test the sec, nsec and usec field aliases."""
    ts = TimeSpec(3, 4)
    tv = TimeVal(5, 6)
    assert (ts.sec, ts.nsec) == (3, 4)
    assert (tv.sec, tv.usec) == (5, 6)


def test_add_operator():
    """Test the + operator including carries."""
    assert TimeSpec(1, 10) + TimeSpec(2, 20) == TimeSpec(3, 30)
    assert TimeSpec(1, 999_999_999) + TimeSpec(1, 2) == TimeSpec(3, 1)
    assert TimeSpec(1, 999_999_999) + TimeSpec(1, 999_999_999) == TimeSpec(
        3, 999_999_998
    )
    assert TimeVal(1, 999_999) + TimeVal(1, 2) == TimeVal(3, 1)


def test_subtract_operator():
    """Test the - operator including borrows."""
    assert TimeSpec(10, 100) - TimeSpec(2, 20) == TimeSpec(8, 80)
    assert TimeSpec(100, 1) - TimeSpec(1, 20) == TimeSpec(98, 999_999_981)
    assert TimeVal(100, 1) - TimeVal(1, 20) == TimeVal(98, 999_981)


def test_negative_difference():
    """Test that subtracting a later time gives a negative duration."""
    diff = TimeSpec(1, 0) - TimeSpec(2, 500)
    assert diff.as_tuple() == (-2, 999_999_500)
    assert diff < TimeSpec()


def test_augmented_assignment_rebinds():
    """Test that += and -= rebind without mutating the original."""
    original = TimeSpec(1, 999_999_999)
    value = original
    value += TimeSpec(0, 1)
    assert value == TimeSpec(2, 0)
    assert original == TimeSpec(1, 999_999_999)
    value -= TimeSpec(0, 1)
    assert value == original


def test_arithmetic_result_is_normalized_even_for_raw_operands():
    """Test that operator results are normalized even from raw operands."""
    total = TimeSpec.raw(0, 3 * NS_IN_SECOND) + TimeSpec(1, 0)
    assert total.as_tuple() == (4, 0)


def test_round_trip_and_commutativity():
    """Test commutativity of + and that - undoes +."""
    values = [TimeSpec(0, 0), TimeSpec(1, 999_999_999), TimeSpec(42, 17)]
    for a in values:
        for b in values:
            assert a + b == b + a
            assert (a + b) - b == a


def test_relational_operators():
    """Test all relational operators against the three-way compare."""
    a, b = TimeSpec(2, 5), TimeSpec(1, 10)
    assert a > b
    assert a != b
    assert a >= b
    assert not a < b

    a, b = TimeSpec(1, 10), TimeSpec(2, 5)
    assert a < b
    assert a != b
    assert a <= b

    a, b = TimeSpec(1, 10), TimeSpec(1, 5)
    assert a > b
    assert a >= b

    a, b = TimeSpec(1, 5), TimeSpec(1, 5)
    assert a == b
    assert a <= b
    assert a >= b
    assert not a != b


def test_compare_method():
    """Test the compare method's -1, 0 and 1 results."""
    assert TimeVal(1, 5).compare(TimeVal(1, 6)) == -1
    assert TimeVal(1, 6).compare(TimeVal(1, 6)) == 0
    assert TimeVal(2, 0).compare(TimeVal(1, 999_999)) == 1


def test_sorting_uses_true_value():
    """Test that sorting orders values by represented time."""
    values = [TimeSpec(2, 1), TimeSpec(1, 999), TimeSpec(-1, 5), TimeSpec(1, 2)]
    assert sorted(values) == [
        TimeSpec(-1, 5),
        TimeSpec(1, 2),
        TimeSpec(1, 999),
        TimeSpec(2, 1),
    ]


def test_hash_matches_equality():
    """Test that equal values hash equally."""
    assert hash(TimeSpec(1, 2)) == hash(TimeSpec(0, NS_IN_SECOND + 2))
    assert len({TimeSpec(1, 2), TimeSpec(1, 2), TimeSpec(1, 3)}) == 2


def test_mixed_resolutions_are_rejected():
    """Test that mixing nanosecond and microsecond values raises TypeError."""
    with pytest.raises(TypeError, match="resolutions differ"):
        TimeSpec(1, 0) + TimeVal(1, 0)  # type: ignore[operator]
    with pytest.raises(TypeError, match="resolutions differ"):
        TimeSpec(1, 0) < TimeVal(1, 0)  # type: ignore[operator]
    assert TimeSpec(1, 0) != TimeVal(1, 0)


def test_non_time_operands():
    """Test that non-time operands are rejected."""
    with pytest.raises(TypeError):
        TimeSpec(1, 0) + 1  # type: ignore[operator]
    with pytest.raises(TypeError):
        TimeSpec(1, 0) < 1  # type: ignore[operator]
    with pytest.raises(TypeError, match="Cannot compare"):
        TimeSpec(1, 0).compare(1)  # type: ignore[arg-type]
    assert TimeSpec(1, 0) != (1, 0)


def test_str():
    """Test the human-readable rendering."""
    assert str(TimeSpec(1, 2)) == "(1 sec, 2 nsec)"
    assert str(TimeVal(1, 2)) == "(1 sec, 2 usec)"


def test_base_type_cannot_be_built_directly():
    """Test that the resolution-less base type refuses construction."""
    with pytest.raises(TypeError, match="Use TimeSpec"):
        TimeValue(1, 2)
    with pytest.raises(TypeError, match="Use TimeSpec"):
        TimeValue.raw(1, 2)

import pytest

from tapnverify.intervals import (
    INFINITY,
    TimeInterval,
    TimeInvariant,
    parse_interval,
    parse_invariant,
)


@pytest.mark.parametrize("text", ["[0,inf)", "(2,5]", "[3,7)", "(1,inf)"])
def test_interval_round_trip(text):
    assert str(parse_interval(text)) == text


def test_interval_fields_follow_input():
    interval = parse_interval("(2,5]")
    assert interval.left_strict is True
    assert interval.right_strict is False
    assert interval.lower_bound == 2
    assert interval.upper_bound == 5


def test_interval_inf_is_case_insensitive():
    interval = parse_interval("[0, INF)")
    assert interval.upper_bound == INFINITY
    assert interval.is_zero_infinity()


def test_interval_with_spaces_and_replacements():
    interval = parse_interval("[ low , high ]", {"low": 4, "high": 9})
    assert (interval.lower_bound, interval.upper_bound) == (4, 9)


def test_interval_bad_bound_raises():
    with pytest.raises(ValueError):
        parse_interval("[a,3]")


def test_interval_without_comma_raises():
    with pytest.raises(ValueError):
        parse_interval("[3]")


def test_default_interval_is_zero_infinity():
    assert TimeInterval().is_zero_infinity()
    assert str(TimeInterval()) == "[0,inf)"


def test_strict_lower_is_not_zero_infinity():
    assert not parse_interval("(0,inf)").is_zero_infinity()


def test_divide_bounds_keeps_infinity():
    interval = parse_interval("[0,inf)")
    interval.divide_bounds_by(3)
    assert interval.lower_bound == 0
    assert interval.upper_bound == INFINITY


def test_divide_bounds_finite():
    interval = parse_interval("[6,9]")
    interval.divide_bounds_by(3)
    assert str(interval) == "[2,3]"


@pytest.mark.parametrize("text", ["<= 5", "< 12"])
def test_invariant_round_trip(text):
    assert str(parse_invariant(text)) == text


def test_invariant_inf_is_ls_inf():
    assert parse_invariant("< inf") == TimeInvariant.LS_INF
    assert str(TimeInvariant.LS_INF) == "< inf"


def test_non_strict_infinite_invariant_becomes_ls_inf():
    result = parse_invariant("<= inf")
    assert result is TimeInvariant.LS_INF
    assert result.strict is True


def test_invariant_replacement():
    invariant = parse_invariant("<= k", {"k": 7})
    assert invariant.bound == 7
    assert invariant.strict is False


def test_invariant_bad_number_raises():
    with pytest.raises(ValueError):
        parse_invariant("<= x")
# tests/test_value_range.py

import pytest

from eracal.core.errors import RangeError
from eracal.core.types import Field, ValueRange


def test_two_argument_form_is_fixed():
    r = ValueRange.of(1, 12)
    assert (r.minimum, r.smallest_maximum, r.largest_maximum, r.maximum) == (1, 12, 12, 12)
    assert r.is_fixed()
    assert str(r) == "1 - 12"


def test_three_argument_form_has_variable_maximum():
    r = ValueRange.of(1, 28, 31)
    assert r.maximum == 31
    assert r.smallest_maximum == 28
    assert not r.is_fixed()
    assert str(r) == "1 - 28/31"


def test_four_argument_form():
    r = ValueRange.of(0, 5, 10, 20)
    assert r.largest_maximum == 10
    assert r.maximum == 20


@pytest.mark.parametrize("args", [(5, 4), (1, 31, 28), (1, 5, 10, 9)])
def test_ordering_invariant_enforced(args):
    with pytest.raises(ValueError):
        ValueRange.of(*args)


def test_contains_is_closed_on_both_ends():
    r = ValueRange.of(-3, 3)
    assert r.contains(-3) and r.contains(3)
    assert not r.contains(4)
    assert -4 not in r


def test_checked_returns_value_or_raises():
    r = Field.MONTH_OF_YEAR.range()
    assert r.checked(12, Field.MONTH_OF_YEAR) == 12

    with pytest.raises(RangeError) as exc:
        r.checked(13, Field.MONTH_OF_YEAR)
    err = exc.value
    assert err.field is Field.MONTH_OF_YEAR
    assert err.value == 13
    assert err.range == r
    assert "MonthOfYear" in str(err)
    # Callers may catch the builtin too.
    assert isinstance(err, ValueError)


def test_checked_accepts_plain_field_names():
    with pytest.raises(RangeError, match="JulianDay"):
        ValueRange.of(0, 1).checked(2, "JulianDay")


def test_iso_field_ranges():
    assert Field.YEAR.range() == ValueRange.of(-999_999_999, 999_999_999)
    assert Field.YEAR_OF_ERA.range() == ValueRange.of(1, 999_999_999, 1_000_000_000)
    assert Field.DAY_OF_MONTH.range() == ValueRange.of(1, 28, 31)
    assert Field.DAY_OF_YEAR.range() == ValueRange.of(1, 365, 366)
    assert Field.ERA.range() == ValueRange.of(0, 1)

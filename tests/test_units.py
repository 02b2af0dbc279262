"""Numeric literal helper tests."""

from decimal import Decimal
from fractions import Fraction

import pytest

from pytimespan import (
    ZERO,
    TimeSpan,
    days,
    hours,
    microseconds,
    milliseconds,
    minutes,
    nanoseconds,
    seconds,
    weeks,
)

HELPER_CASES = [
    (nanoseconds, TimeSpan.from_nanoseconds),
    (microseconds, TimeSpan.from_microseconds),
    (milliseconds, TimeSpan.from_milliseconds),
    (seconds, TimeSpan.from_seconds),
    (minutes, TimeSpan.from_minutes),
    (hours, TimeSpan.from_hours),
    (days, TimeSpan.from_days),
    (weeks, TimeSpan.from_weeks),
]


class TestUnitHelpers:
    @pytest.mark.parametrize("helper,factory", HELPER_CASES)
    def test_matches_factory(self, helper, factory):
        assert helper(7) == factory(7.0)

    @pytest.mark.parametrize("helper", [helper for helper, _ in HELPER_CASES])
    def test_zero_is_shared(self, helper):
        assert helper(0) is ZERO

    def test_seconds(self):
        assert seconds(5).milliseconds == 5000.0

    def test_minutes(self):
        assert minutes(3).seconds == 180.0

    def test_weeks(self):
        assert weeks(2).days == 14.0

    def test_nanoseconds(self):
        assert nanoseconds(1500).microseconds == pytest.approx(1.5)

    def test_negative(self):
        assert hours(-1).minutes == -60.0


class TestNumericInputs:
    @pytest.mark.parametrize("value", [2, 2.0, Decimal("2"), Fraction(4, 2)])
    def test_any_numeric_type(self, value):
        assert seconds(value).milliseconds == 2000.0

    def test_fractional(self):
        assert minutes(Fraction(1, 2)).seconds == 30.0

    def test_bool_is_numeric(self):
        assert seconds(True).milliseconds == 1000.0

    def test_non_numeric_rejected(self):
        with pytest.raises(TypeError):
            seconds(None)

    def test_composition(self):
        total = hours(1) + minutes(1) + seconds(1)
        assert total.to_time_string() == "01:01:01"

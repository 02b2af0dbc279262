"""CEL duration interop tests."""

from datetime import timedelta

import pytest
from celpy import celtypes

from pytimespan import (
    NULL,
    TimeSpan,
    TimeSpanConversionError,
    from_cel_duration,
    hours,
    to_cel_duration,
)


class TestToCelDuration:
    def test_whole_hours(self):
        result = to_cel_duration(hours(1))
        assert isinstance(result, celtypes.DurationType)
        assert result == timedelta(hours=1)

    def test_fractional_milliseconds_keep_microseconds(self):
        result = to_cel_duration(TimeSpan(1.5))
        assert result == timedelta(microseconds=1500)

    def test_negative(self):
        assert to_cel_duration(TimeSpan(-2000.0)) == timedelta(seconds=-2)

    def test_null_rejected(self):
        with pytest.raises(TimeSpanConversionError):
            to_cel_duration(NULL)

    def test_beyond_cel_range(self):
        # inside timedelta's range, outside CEL's 10,000 year limit
        with pytest.raises(TimeSpanConversionError) as exc_info:
            to_cel_duration(TimeSpan.from_days(4_000_000))
        assert isinstance(exc_info.value.wrapped, ValueError)


class TestFromCelDuration:
    def test_from_duration(self):
        value = celtypes.DurationType(timedelta(minutes=90))
        assert from_cel_duration(value) == TimeSpan.from_minutes(90)

    def test_zero(self):
        assert from_cel_duration(celtypes.DurationType(timedelta())) is TimeSpan.ZERO

    def test_round_trip_preserves_formatting(self):
        span = TimeSpan.from_milliseconds(3661500.0)
        assert from_cel_duration(to_cel_duration(span)).to_time_string(3, True) == "01:01:01.500"

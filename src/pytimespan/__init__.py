"""pytimespan - Millisecond-precision duration values and clock formatting."""

from __future__ import annotations

try:
    from pytimespan._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from pytimespan._errors import (
    TimeSpanConversionError,
    TimeSpanError,
    UnsupportedComponentsError,
)
from pytimespan._format import to_time_string
from pytimespan.cel import from_cel_duration, to_cel_duration
from pytimespan.spans import DateTimeSpan, MonthSpan
from pytimespan.timespan import NULL, ZERO, TimeSpan
from pytimespan.units import (
    days,
    hours,
    microseconds,
    milliseconds,
    minutes,
    nanoseconds,
    seconds,
    weeks,
)

__all__ = [
    "TimeSpan",
    "MonthSpan",
    "DateTimeSpan",
    "ZERO",
    "NULL",
    "to_time_string",
    "to_cel_duration",
    "from_cel_duration",
    "nanoseconds",
    "microseconds",
    "milliseconds",
    "seconds",
    "minutes",
    "hours",
    "days",
    "weeks",
    "TimeSpanError",
    "TimeSpanConversionError",
    "UnsupportedComponentsError",
]

"""Unit helpers that read like numeric literals.

``seconds(5)`` is shorthand for ``TimeSpan.from_seconds(5.0)``. Any value
``float()`` accepts as a number works: ints, floats, ``Decimal``,
``Fraction`` and numpy scalars.
"""

from __future__ import annotations

from typing import SupportsFloat

from pytimespan.timespan import TimeSpan


def nanoseconds(value: SupportsFloat) -> TimeSpan:
    return TimeSpan.from_nanoseconds(float(value))


def microseconds(value: SupportsFloat) -> TimeSpan:
    return TimeSpan.from_microseconds(float(value))


def milliseconds(value: SupportsFloat) -> TimeSpan:
    return TimeSpan.from_milliseconds(float(value))


def seconds(value: SupportsFloat) -> TimeSpan:
    return TimeSpan.from_seconds(float(value))


def minutes(value: SupportsFloat) -> TimeSpan:
    return TimeSpan.from_minutes(float(value))


def hours(value: SupportsFloat) -> TimeSpan:
    return TimeSpan.from_hours(float(value))


def days(value: SupportsFloat) -> TimeSpan:
    return TimeSpan.from_days(float(value))


def weeks(value: SupportsFloat) -> TimeSpan:
    return TimeSpan.from_weeks(float(value))

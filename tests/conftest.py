"""Shared test fixtures."""

import pytest

from pytimespan import MonthSpan, TimeSpan


@pytest.fixture
def one_hour():
    return TimeSpan.from_hours(1)


@pytest.fixture
def ninety_seconds():
    return TimeSpan.from_seconds(90)


@pytest.fixture
def fourteen_months():
    return MonthSpan(14)

"""Calendar span types that combine with TimeSpan."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pytimespan._constants import MONTHS_PER_YEAR
from pytimespan._utils import truncate_int
from pytimespan.timespan import TimeSpan


@dataclass(frozen=True)
class MonthSpan:
    """A span measured in whole calendar months."""

    total_months: int

    @classmethod
    def from_years(cls, years: int) -> MonthSpan:
        return cls(years * MONTHS_PER_YEAR)

    @property
    def years(self) -> int:
        return truncate_int(self.total_months, MONTHS_PER_YEAR)[0]

    @property
    def months(self) -> int:
        """Months left over after whole years; carries the sign of the span."""
        return truncate_int(self.total_months, MONTHS_PER_YEAR)[1]

    def __neg__(self) -> MonthSpan:
        return MonthSpan(-self.total_months)

    def __pos__(self) -> MonthSpan:
        return self

    def __add__(self, other: Any) -> MonthSpan | DateTimeSpan:
        if isinstance(other, MonthSpan):
            return MonthSpan(self.total_months + other.total_months)
        if isinstance(other, TimeSpan):
            return DateTimeSpan(self, other)
        if isinstance(other, DateTimeSpan):
            return DateTimeSpan(self + other.month_span, other.time_span)
        return NotImplemented

    def __sub__(self, other: Any) -> MonthSpan | DateTimeSpan:
        if isinstance(other, (MonthSpan, TimeSpan, DateTimeSpan)):
            return self + (-other)
        return NotImplemented

    def __mul__(self, times: Any) -> MonthSpan:
        if not isinstance(times, int):
            return NotImplemented
        return MonthSpan(self.total_months * times)

    __rmul__ = __mul__


@dataclass(frozen=True)
class DateTimeSpan:
    """A calendar month component paired with an exact time component.

    The time component is carried as-is, so a NULL TimeSpan stays NULL.
    """

    month_span: MonthSpan
    time_span: TimeSpan

    def __neg__(self) -> DateTimeSpan:
        return DateTimeSpan(-self.month_span, -self.time_span)

    def __pos__(self) -> DateTimeSpan:
        return self

    def __add__(self, other: Any) -> DateTimeSpan:
        if isinstance(other, DateTimeSpan):
            return DateTimeSpan(
                self.month_span + other.month_span,
                self.time_span + other.time_span,
            )
        if isinstance(other, MonthSpan):
            return DateTimeSpan(self.month_span + other, self.time_span)
        if isinstance(other, TimeSpan):
            return DateTimeSpan(self.month_span, self.time_span + other)
        return NotImplemented

    def __sub__(self, other: Any) -> DateTimeSpan:
        if isinstance(other, (DateTimeSpan, MonthSpan, TimeSpan)):
            return self + (-other)
        return NotImplemented

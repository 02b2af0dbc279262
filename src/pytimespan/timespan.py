"""The TimeSpan value type."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import timedelta
from numbers import Real
from typing import TYPE_CHECKING, Any, ClassVar

from pytimespan._constants import (
    DEFAULT_TIME_STRING_COMPONENTS,
    MICROSECONDS_PER_MILLISECOND,
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MICROSECOND,
    MILLIS_PER_MINUTE,
    MILLIS_PER_NANOSECOND,
    MILLIS_PER_SECOND,
    MILLIS_PER_WEEK,
    NANOSECONDS_PER_MILLISECOND,
)
from pytimespan._errors import (
    ERR_MSG_NOT_REPRESENTABLE,
    ERR_MSG_OUT_OF_RANGE,
    TimeSpanConversionError,
)
from pytimespan._format import to_time_string
from pytimespan._utils import to_int32, to_int64

if TYPE_CHECKING:
    from pytimespan.spans import DateTimeSpan


@dataclass(frozen=True, eq=False)
class TimeSpan:
    """A span of time with sub-millisecond precision.

    The span is stored as a float number of milliseconds. It may be
    fractional, negative or NaN; every other unit is derived from it.

    ``TimeSpan.NULL`` (NaN) stands in for "no duration". It is not an error:
    arithmetic on it yields NULL again and every comparison involving it is
    false, including ``NULL == NULL``. Use ``is_null`` to detect it.
    """

    milliseconds: float

    ZERO: ClassVar[TimeSpan]
    NULL: ClassVar[TimeSpan]

    def __post_init__(self) -> None:
        object.__setattr__(self, "milliseconds", float(self.milliseconds))

    # --- Construction ---

    @classmethod
    def from_milliseconds(cls, ms: float) -> TimeSpan:
        ms = float(ms)
        if ms == 0.0:
            return cls.ZERO
        return cls(ms)

    @classmethod
    def from_nanoseconds(cls, value: float) -> TimeSpan:
        return cls.from_milliseconds(value * MILLIS_PER_NANOSECOND)

    @classmethod
    def from_microseconds(cls, value: float) -> TimeSpan:
        return cls.from_milliseconds(value * MILLIS_PER_MICROSECOND)

    @classmethod
    def from_seconds(cls, value: float) -> TimeSpan:
        return cls.from_milliseconds(value * MILLIS_PER_SECOND)

    @classmethod
    def from_minutes(cls, value: float) -> TimeSpan:
        return cls.from_milliseconds(value * MILLIS_PER_MINUTE)

    @classmethod
    def from_hours(cls, value: float) -> TimeSpan:
        return cls.from_milliseconds(value * MILLIS_PER_HOUR)

    @classmethod
    def from_days(cls, value: float) -> TimeSpan:
        return cls.from_milliseconds(value * MILLIS_PER_DAY)

    @classmethod
    def from_weeks(cls, value: float) -> TimeSpan:
        return cls.from_milliseconds(value * MILLIS_PER_WEEK)

    @classmethod
    def from_timedelta(cls, value: timedelta) -> TimeSpan:
        micros = (value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds
        return cls.from_milliseconds(micros / MICROSECONDS_PER_MILLISECOND)

    # --- Derived views ---

    @property
    def nanoseconds(self) -> float:
        return self.milliseconds * NANOSECONDS_PER_MILLISECOND

    @property
    def microseconds(self) -> float:
        return self.milliseconds * MICROSECONDS_PER_MILLISECOND

    @property
    def milliseconds_int(self) -> int:
        """Milliseconds truncated toward zero into the signed 32-bit range."""
        return to_int32(self.milliseconds)

    @property
    def milliseconds_long(self) -> int:
        """Milliseconds truncated toward zero into the signed 64-bit range."""
        return to_int64(self.milliseconds)

    @property
    def seconds(self) -> float:
        return self.milliseconds / MILLIS_PER_SECOND

    @property
    def minutes(self) -> float:
        return self.milliseconds / MILLIS_PER_MINUTE

    @property
    def hours(self) -> float:
        return self.milliseconds / MILLIS_PER_HOUR

    @property
    def days(self) -> float:
        return self.milliseconds / MILLIS_PER_DAY

    @property
    def is_null(self) -> bool:
        return math.isnan(self.milliseconds)

    # --- Comparison ---

    def compare_to(self, other: TimeSpan) -> float:
        """Three-way compare on milliseconds.

        Returns -1, 0 or 1, or NaN when either side is NULL so that the
        result is neither below, equal to, nor above zero.
        """
        a, b = self.milliseconds, other.milliseconds
        if math.isnan(a) or math.isnan(b):
            return math.nan
        return (a > b) - (a < b)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.milliseconds == other.milliseconds

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.milliseconds != other.milliseconds

    def __lt__(self, other: TimeSpan) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.milliseconds < other.milliseconds

    def __le__(self, other: TimeSpan) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.milliseconds <= other.milliseconds

    def __gt__(self, other: TimeSpan) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.milliseconds > other.milliseconds

    def __ge__(self, other: TimeSpan) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.milliseconds >= other.milliseconds

    def __hash__(self) -> int:
        return hash(self.milliseconds)

    # --- Arithmetic ---

    def __neg__(self) -> TimeSpan:
        return TimeSpan(-self.milliseconds)

    def __pos__(self) -> TimeSpan:
        return TimeSpan(+self.milliseconds)

    def __add__(self, other: Any) -> TimeSpan | DateTimeSpan:
        from pytimespan.spans import DateTimeSpan, MonthSpan

        if isinstance(other, TimeSpan):
            return TimeSpan(self.milliseconds + other.milliseconds)
        if isinstance(other, MonthSpan):
            return DateTimeSpan(other, self)
        if isinstance(other, DateTimeSpan):
            return DateTimeSpan(other.month_span, other.time_span + self)
        return NotImplemented

    def __sub__(self, other: Any) -> TimeSpan | DateTimeSpan:
        from pytimespan.spans import DateTimeSpan, MonthSpan

        if isinstance(other, (TimeSpan, MonthSpan, DateTimeSpan)):
            return self + (-other)
        return NotImplemented

    def __mul__(self, scale: Any) -> TimeSpan:
        if not isinstance(scale, Real):
            return NotImplemented
        return TimeSpan(self.milliseconds * float(scale))

    __rmul__ = __mul__

    # --- Formatting and interop ---

    def to_time_string(
        self,
        components: int = DEFAULT_TIME_STRING_COMPONENTS,
        add_milliseconds: bool = False,
    ) -> str:
        """Format as a fixed-width clock string, e.g. ``"01:02:03"``.

        See ``pytimespan.to_time_string`` for the field layout.
        """
        return to_time_string(self.milliseconds, components, add_milliseconds)

    def to_timedelta(self) -> timedelta:
        """Convert to a ``datetime.timedelta`` (microsecond resolution).

        Raises:
            TimeSpanConversionError: If the span is NULL, infinite, or outside
                the range ``timedelta`` supports.
        """
        if not math.isfinite(self.milliseconds):
            raise TimeSpanConversionError(
                ERR_MSG_NOT_REPRESENTABLE,
                f"cannot convert {self.milliseconds} ms to timedelta",
            )
        try:
            return timedelta(milliseconds=self.milliseconds)
        except OverflowError as exc:
            raise TimeSpanConversionError(
                ERR_MSG_OUT_OF_RANGE,
                f"{self.milliseconds} ms exceeds the timedelta range",
                wrapped=exc,
            ) from exc


TimeSpan.ZERO = TimeSpan(0.0)
TimeSpan.NULL = TimeSpan(math.nan)

ZERO = TimeSpan.ZERO
NULL = TimeSpan.NULL

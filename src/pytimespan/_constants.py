"""Conversion factors and formatter limits for time spans."""

MILLIS_PER_SECOND = 1000.0
MILLIS_PER_MINUTE = MILLIS_PER_SECOND * 60
MILLIS_PER_HOUR = MILLIS_PER_MINUTE * 60
MILLIS_PER_DAY = MILLIS_PER_HOUR * 24
MILLIS_PER_WEEK = MILLIS_PER_DAY * 7

MILLIS_PER_MICROSECOND = 1.0 / 1000.0
MILLIS_PER_NANOSECOND = MILLIS_PER_MICROSECOND / 1000.0

NANOSECONDS_PER_MILLISECOND = 1_000_000.0
MICROSECONDS_PER_MILLISECOND = 1_000.0

MONTHS_PER_YEAR = 12

TIME_STEPS: tuple[int, ...] = (60, 60, 24)
"""Clock ladder used by the formatter: seconds->minutes, minutes->hours, hours->days."""

DEFAULT_TIME_STRING_COMPONENTS = 3
"""Default number of clock fields (hours:minutes:seconds)."""

MAX_TIME_STRING_COMPONENTS = len(TIME_STEPS) + 1
"""Seconds, minutes, hours and days."""

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

"""Float to fixed-width integer helpers."""

from __future__ import annotations

import math

from pytimespan._constants import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN


def truncate_to_range(value: float, lower: int, upper: int) -> int:
    """Truncate a float toward zero into ``[lower, upper]``.

    NaN becomes 0; infinities and out-of-range values clamp to the bounds.
    """
    if math.isnan(value):
        return 0
    if value <= lower:
        return lower
    if value >= upper:
        return upper
    return int(value)


def to_int32(value: float) -> int:
    return truncate_to_range(value, INT32_MIN, INT32_MAX)


def to_int64(value: float) -> int:
    return truncate_to_range(value, INT64_MIN, INT64_MAX)


def floor_to_int32(value: float) -> int:
    """Floor toward negative infinity, then narrow to a signed 32-bit integer."""
    if math.isfinite(value):
        value = math.floor(value)
    return to_int32(value)


def truncate_int(value: int, divisor: int) -> tuple[int, int]:
    """Integer division truncating toward zero, returning (quotient, remainder)."""
    quotient = abs(value) // divisor
    if value < 0:
        quotient = -quotient
    return quotient, value - quotient * divisor

"""Fixed-width clock string formatting for millisecond totals."""

from __future__ import annotations

import math

from pytimespan._constants import (
    DEFAULT_TIME_STRING_COMPONENTS,
    MAX_TIME_STRING_COMPONENTS,
    MILLIS_PER_SECOND,
    TIME_STEPS,
)
from pytimespan._errors import ERR_MSG_UNSUPPORTED_COMPONENTS, UnsupportedComponentsError
from pytimespan._utils import floor_to_int32, to_int32, truncate_int


def _clock_fields(total_milliseconds: float, components: int) -> list[str]:
    """Split a total into padded clock fields, least significant first."""
    time_unit = floor_to_int32(total_milliseconds / MILLIS_PER_SECOND)
    fields: list[str] = []

    for n in range(components):
        if n == components - 1:
            fields.append(f"{time_unit:02d}")
            break
        if n >= len(TIME_STEPS):
            raise UnsupportedComponentsError(
                ERR_MSG_UNSUPPORTED_COMPONENTS,
                f"requested {components} components, "
                f"at most {MAX_TIME_STRING_COMPONENTS} are supported",
            )
        time_unit, field = truncate_int(time_unit, TIME_STEPS[n])
        fields.append(f"{field:02d}")

    return fields


def to_time_string(
    total_milliseconds: float,
    components: int = DEFAULT_TIME_STRING_COMPONENTS,
    add_milliseconds: bool = False,
) -> str:
    """Format a millisecond total as a colon separated clock string.

    Only the total seconds are floored. The fields below it, and the
    millisecond suffix, are remainders truncated toward zero, so
    ``-500`` ms renders as ``"00:00:-1.-500"``.

    Args:
        total_milliseconds: The duration in milliseconds. May be negative.
        components: Number of fields to emit, from seconds upwards
            (1 = seconds, 2 = minutes:seconds, 3 = hours:minutes:seconds,
            4 = days:hours:minutes:seconds). The most significant field is
            never wrapped, so ``"120:00:00"`` is a valid result.
        add_milliseconds: Append ``.<ms>`` with the sub-second remainder.

    Returns:
        The formatted string, e.g. ``"01:01:01"`` or ``"01:01:01.500"``.

    Raises:
        UnsupportedComponentsError: If more than four components are requested.
    """
    total_milliseconds = float(total_milliseconds)
    out = ":".join(reversed(_clock_fields(total_milliseconds, components)))
    if not add_milliseconds:
        return out
    remainder = 0.0
    if math.isfinite(total_milliseconds):
        remainder = math.fmod(total_milliseconds, MILLIS_PER_SECOND)
    milliseconds = to_int32(remainder)
    return f"{out}.{milliseconds}"

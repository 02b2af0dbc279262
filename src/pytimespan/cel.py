"""Conversion between TimeSpan and CEL runtime durations."""

from __future__ import annotations

from celpy import celtypes

from pytimespan._errors import ERR_MSG_OUT_OF_RANGE, TimeSpanConversionError
from pytimespan.timespan import TimeSpan


def to_cel_duration(span: TimeSpan) -> celtypes.DurationType:
    """Convert a TimeSpan to a CEL ``google.protobuf.Duration`` value.

    Precision is reduced to microseconds, the resolution of ``timedelta``.

    Raises:
        TimeSpanConversionError: If the span is NULL, infinite, or outside
            CEL's duration range of +/-315,576,000,000 seconds.
    """
    delta = span.to_timedelta()
    try:
        return celtypes.DurationType(delta)
    except ValueError as exc:
        raise TimeSpanConversionError(
            ERR_MSG_OUT_OF_RANGE,
            f"{span.seconds} s exceeds the CEL duration range",
            wrapped=exc,
        ) from exc


def from_cel_duration(value: celtypes.DurationType) -> TimeSpan:
    """Convert a CEL duration to a TimeSpan."""
    return TimeSpan.from_timedelta(value)

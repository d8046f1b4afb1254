"""Conversions between float seconds and canonical durations.

Functions:
    seconds_to_duration: Turn a float number of seconds into a Duration.
    duration_to_seconds: Read any span back as float seconds.

Both are pure. A round trip through either pair agrees with the input
to within one nanosecond (or 1e-9 seconds going the other way).

Examples:
    >>> from timespan.convert import seconds_to_duration, duration_to_seconds

    >>> seconds_to_duration(0.1)
    Duration(nanoseconds=100000000)

    >>> duration_to_seconds(seconds_to_duration(60.0))
    60.0
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from timespan.core.duration import Duration

if TYPE_CHECKING:
    from timespan.core.protocol import SupportsDuration


def seconds_to_duration(seconds: float) -> Duration:
    """Convert a floating point number of seconds to a Duration.

    The value is multiplied by 1e9 and truncated toward zero.

    Args:
        seconds: Number of seconds (can be negative or fractional).

    Returns:
        The corresponding Duration.

    Raises:
        TypeError: If seconds is not a real number.
        NonFiniteDurationError: If seconds is NaN or infinite.

    Examples:
        >>> seconds_to_duration(1.5)
        Duration(nanoseconds=1500000000)
    """
    return Duration.from_seconds(seconds)


def duration_to_seconds(duration: "SupportsDuration") -> float:
    """Return a span's length as a floating point number of seconds.

    Args:
        duration: A Duration or any other span type.

    Returns:
        The span in seconds.

    Examples:
        >>> duration_to_seconds(Duration(200_000_000))
        0.2
    """
    return duration.seconds()


__all__ = [
    "seconds_to_duration",
    "duration_to_seconds",
]

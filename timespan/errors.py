"""Timespan exception hierarchy.

All Timespan-specific exceptions inherit from TimespanError.
"""

from __future__ import annotations


class TimespanError(Exception):
    """Base exception for all Timespan errors."""

    pass


class NonFiniteDurationError(TimespanError, ValueError):
    """A value cannot be expressed as whole nanoseconds.

    Raised when a float-backed span has to be normalized to a canonical
    Duration but the scaled value is NaN or infinite.

    Examples:
        - Second(float("nan")).to_duration()
        - Hour(float("inf")).minutes()
        - Hour(1e300).nanoseconds() (the scaled value overflows to inf)
    """

    pass


__all__ = [
    "TimespanError",
    "NonFiniteDurationError",
]

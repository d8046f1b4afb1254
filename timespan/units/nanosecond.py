"""Nanosecond: a span measured in whole nanoseconds."""

from __future__ import annotations

from timespan._internal.validation import validate_integral
from timespan.core.duration import Duration
from timespan.core.protocol import SupportsDuration


class Nanosecond:
    """A span of time expressed as an integer number of nanoseconds.

    Unlike the float-backed spans, nothing here passes through floating
    point on the way to a Duration, so the conversion is lossless.

    Examples:
        >>> ns = Nanosecond(86_400_000_000_000)
        >>> ns.hours()
        24.0
        >>> str(ns)
        '24h0m0s'
    """

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        validate_integral(value, "nanoseconds")
        self._value = int(value)

    @classmethod
    def from_duration(cls, duration: SupportsDuration) -> Nanosecond:
        """Build a Nanosecond from anything that reports its length."""
        return cls(duration.nanoseconds())

    def to_duration(self) -> Duration:
        """Return the span as a canonical Duration."""
        return Duration(self._value)

    def hours(self) -> float:
        """Return the span as a floating point number of hours."""
        return self.to_duration().hours()

    def minutes(self) -> float:
        """Return the span as a floating point number of minutes."""
        return self.to_duration().minutes()

    def seconds(self) -> float:
        """Return the span as a floating point number of seconds."""
        return self.to_duration().seconds()

    def nanoseconds(self) -> int:
        """Return the stored nanosecond count unchanged."""
        return self._value

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Nanosecond):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(("Nanosecond", self._value))

    def __repr__(self) -> str:
        return f"Nanosecond({self._value})"

    def __str__(self) -> str:
        """Return the compact rendering, e.g. "1.5µs" or "0"."""
        return str(self.to_duration())


__all__ = ["Nanosecond"]

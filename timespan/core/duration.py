"""Duration class representing a span of time.

This module provides the canonical Duration: an exact whole number of
nanoseconds that every other span type normalizes through.
"""

from __future__ import annotations

from datetime import timedelta

from timespan._internal.constants import (
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from timespan._internal.validation import (
    to_float,
    to_whole_nanoseconds,
    validate_integral,
    validate_real,
)
from timespan.core.timeunit import TimeUnit
from timespan.format.duration_string import format_duration


def _truncated_divmod(nanos: int, unit: int) -> tuple[int, int]:
    """Split nanos into whole units and a remainder, rounding toward zero.

    Both parts carry the sign of nanos, unlike the builtin divmod.
    """
    whole, remainder = divmod(abs(nanos), unit)
    if nanos < 0:
        return -whole, -remainder
    return whole, remainder


class Duration:
    """A span of time with nanosecond precision.

    Duration stores a single signed integer count of nanoseconds. Python
    integers do not overflow, so any span can be represented exactly.

    The float readers (hours, minutes, seconds) split the count into
    whole units plus a remainder before converting, so large spans keep
    as much precision as a float allows.

    Examples:
        >>> d = Duration.from_hours(24)
        >>> d.nanoseconds()
        86400000000000
        >>> d.hours()
        24.0
        >>> str(d)
        '24h0m0s'

        >>> Duration.from_seconds(0.2) == Duration.from_milliseconds(200)
        True
    """

    __slots__ = ("_nanos",)

    def __init__(self, nanoseconds: int = 0) -> None:
        """Create a Duration from a nanosecond count.

        Args:
            nanoseconds: Length of the span in nanoseconds (can be negative).

        Raises:
            TypeError: If nanoseconds is not an integer.
        """
        validate_integral(nanoseconds, "nanoseconds")
        self._nanos = int(nanoseconds)

    @classmethod
    def zero(cls) -> Duration:
        """Create a zero-length duration.

        Examples:
            >>> Duration.zero()
            Duration(nanoseconds=0)
        """
        return cls()

    @classmethod
    def from_unit(cls, value: float, unit: TimeUnit) -> Duration:
        """Create a Duration from an amount of some unit.

        The value is scaled to nanoseconds and any fractional nanosecond
        is truncated toward zero.

        Args:
            value: Amount of time (int or float, can be negative).
            unit: The unit value is expressed in.

        Returns:
            The corresponding Duration.

        Raises:
            TypeError: If value is not a real number.
            NonFiniteDurationError: If value is NaN or infinite, or
                overflows to infinity once scaled.

        Examples:
            >>> Duration.from_unit(1.5, TimeUnit.MINUTE)
            Duration(nanoseconds=90000000000)
        """
        validate_real(value, "value")
        return cls(to_whole_nanoseconds(value, unit.to_nanoseconds()))

    @classmethod
    def from_hours(cls, hours: float) -> Duration:
        """Create a Duration from a number of hours.

        Examples:
            >>> Duration.from_hours(1.5).minutes()
            90.0
        """
        return cls.from_unit(hours, TimeUnit.HOUR)

    @classmethod
    def from_minutes(cls, minutes: float) -> Duration:
        """Create a Duration from a number of minutes."""
        return cls.from_unit(minutes, TimeUnit.MINUTE)

    @classmethod
    def from_seconds(cls, seconds: float) -> Duration:
        """Create a Duration from a number of seconds.

        Examples:
            >>> Duration.from_seconds(3661)
            Duration(nanoseconds=3661000000000)
        """
        return cls.from_unit(seconds, TimeUnit.SECOND)

    @classmethod
    def from_milliseconds(cls, milliseconds: float) -> Duration:
        """Create a Duration from a number of milliseconds."""
        return cls.from_unit(milliseconds, TimeUnit.MILLISECOND)

    @classmethod
    def from_microseconds(cls, microseconds: float) -> Duration:
        """Create a Duration from a number of microseconds."""
        return cls.from_unit(microseconds, TimeUnit.MICROSECOND)

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> Duration:
        """Create a Duration from a number of nanoseconds."""
        return cls(nanoseconds)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Duration:
        """Create a Duration from a datetime.timedelta.

        The conversion is exact; timedelta resolution is one microsecond.

        Examples:
            >>> Duration.from_timedelta(timedelta(minutes=2))
            Duration(nanoseconds=120000000000)
        """
        if not isinstance(delta, timedelta):
            raise TypeError(f"expected timedelta, got {type(delta).__name__}")
        micros = delta // timedelta(microseconds=1)
        return cls(micros * NANOS_PER_MICROSECOND)

    def to_timedelta(self) -> timedelta:
        """Return this duration as a datetime.timedelta.

        Sub-microsecond precision is truncated toward zero.

        Raises:
            OverflowError: If the span exceeds timedelta's range.

        Examples:
            >>> Duration(1_500).to_timedelta()
            datetime.timedelta(microseconds=1)
        """
        return timedelta(microseconds=self.microseconds())

    def hours(self) -> float:
        """Return the duration as a floating point number of hours."""
        whole, remainder = _truncated_divmod(self._nanos, NANOS_PER_HOUR)
        return to_float(whole) + remainder / NANOS_PER_HOUR

    def minutes(self) -> float:
        """Return the duration as a floating point number of minutes."""
        whole, remainder = _truncated_divmod(self._nanos, NANOS_PER_MINUTE)
        return to_float(whole) + remainder / NANOS_PER_MINUTE

    def seconds(self) -> float:
        """Return the duration as a floating point number of seconds.

        Examples:
            >>> Duration(1_500_000_000).seconds()
            1.5
        """
        whole, remainder = _truncated_divmod(self._nanos, NANOS_PER_SECOND)
        return to_float(whole) + remainder / NANOS_PER_SECOND

    def milliseconds(self) -> int:
        """Return the duration as an integer millisecond count."""
        return _truncated_divmod(self._nanos, NANOS_PER_MILLISECOND)[0]

    def microseconds(self) -> int:
        """Return the duration as an integer microsecond count."""
        return _truncated_divmod(self._nanos, NANOS_PER_MICROSECOND)[0]

    def nanoseconds(self) -> int:
        """Return the duration as an integer nanosecond count (exact)."""
        return self._nanos

    def __add__(self, other: object) -> Duration:
        """Add two durations.

        Examples:
            >>> Duration.from_seconds(30) + Duration.from_seconds(45)
            Duration(nanoseconds=75000000000)
        """
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self._nanos + other._nanos)

    def __radd__(self, other: object) -> Duration:
        """Support sum() by handling 0 + Duration."""
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Duration:
        """Subtract one duration from another."""
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self._nanos - other._nanos)

    def __mul__(self, other: object) -> Duration:
        """Multiply a duration by an integer scalar.

        Examples:
            >>> Duration.from_seconds(30) * 3
            Duration(nanoseconds=90000000000)
        """
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return Duration(self._nanos * other)

    def __rmul__(self, other: object) -> Duration:
        """Support scalar * Duration."""
        return self.__mul__(other)

    def __floordiv__(self, other: object) -> Duration:
        """Divide a duration by an integer scalar (floor division).

        Raises:
            ZeroDivisionError: If other is zero.
        """
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("integer division or modulo by zero")
        return Duration(self._nanos // other)

    def __neg__(self) -> Duration:
        return Duration(-self._nanos)

    def __pos__(self) -> Duration:
        return Duration(self._nanos)

    def __abs__(self) -> Duration:
        return Duration(abs(self._nanos))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos == other._nanos

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos >= other._nanos

    def __hash__(self) -> int:
        return hash(self._nanos)

    def __bool__(self) -> bool:
        """Return True if this is a non-zero duration."""
        return self._nanos != 0

    def __repr__(self) -> str:
        return f"Duration(nanoseconds={self._nanos})"

    def __str__(self) -> str:
        """Return the compact rendering, e.g. "72h3m0.5s" or "0"."""
        return format_duration(self._nanos)


# One nanosecond: the finest step between two durations, handy as a
# comparison tolerance.
ONE_NANOSECOND: Duration = Duration(1)


__all__ = ["Duration", "ONE_NANOSECOND"]

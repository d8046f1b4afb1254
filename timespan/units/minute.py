"""Minute: a span measured in floating point minutes."""

from __future__ import annotations

from timespan.core.timeunit import TimeUnit
from timespan.units._float_span import FloatSpan


class Minute(FloatSpan):
    """A span of time expressed as a float number of minutes.

    Examples:
        >>> m = Minute(60)
        >>> m.hours()
        1.0
        >>> m.seconds()
        3600.0
        >>> m.nanoseconds()
        3600000000000
    """

    __slots__ = ()

    _unit = TimeUnit.MINUTE

    def minutes(self) -> float:
        """Return the stored number of minutes unchanged."""
        return self._value


__all__ = ["Minute"]

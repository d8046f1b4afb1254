"""Hour: a span measured in floating point hours."""

from __future__ import annotations

from timespan.core.timeunit import TimeUnit
from timespan.units._float_span import FloatSpan


class Hour(FloatSpan):
    """A span of time expressed as a float number of hours.

    Examples:
        >>> h = Hour(24)
        >>> h.hours()
        24.0
        >>> h.minutes()
        1440.0
        >>> str(h)
        '24h0m0s'
    """

    __slots__ = ()

    _unit = TimeUnit.HOUR

    def hours(self) -> float:
        """Return the stored number of hours unchanged."""
        return self._value


__all__ = ["Hour"]

"""Second: a span measured in floating point seconds."""

from __future__ import annotations

from timespan.core.timeunit import TimeUnit
from timespan.units._float_span import FloatSpan


class Second(FloatSpan):
    """A span of time expressed as a float number of seconds.

    ``Second(x).seconds()`` always gives back ``x`` exactly; the other
    readers see the value truncated to whole nanoseconds.

    Examples:
        >>> Second(0.2).seconds()
        0.2
        >>> Second(90).minutes()
        1.5
        >>> str(Second(0.0015))
        '1.5ms'
    """

    __slots__ = ()

    _unit = TimeUnit.SECOND

    def seconds(self) -> float:
        """Return the stored number of seconds unchanged."""
        return self._value


__all__ = ["Second"]

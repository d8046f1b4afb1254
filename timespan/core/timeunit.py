"""TimeUnit enumeration for fixed-length time units.

This module provides the TimeUnit enum representing the units a span
can be measured in, from nanoseconds up to hours.
"""

from __future__ import annotations

from enum import Enum

from timespan._internal.constants import (
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)


class TimeUnit(Enum):
    """Fixed-length time units.

    Every unit has an exact whole number of nanoseconds, which is the
    factor used to normalize a value into a canonical Duration.

    Examples:
        >>> TimeUnit.HOUR.to_nanoseconds()
        3600000000000
    """

    NANOSECOND = "nanosecond"
    MICROSECOND = "microsecond"
    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"

    def to_nanoseconds(self) -> int:
        """Return the number of nanoseconds in one of this unit.

        Examples:
            >>> TimeUnit.SECOND.to_nanoseconds()
            1000000000
        """
        return _NANOS[self]


_NANOS: dict[TimeUnit, int] = {
    TimeUnit.NANOSECOND: 1,
    TimeUnit.MICROSECOND: NANOS_PER_MICROSECOND,
    TimeUnit.MILLISECOND: NANOS_PER_MILLISECOND,
    TimeUnit.SECOND: NANOS_PER_SECOND,
    TimeUnit.MINUTE: NANOS_PER_MINUTE,
    TimeUnit.HOUR: NANOS_PER_HOUR,
}


__all__ = ["TimeUnit"]

"""Internal constants for Timespan.

These constants define the unit factors and formatting limits used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE  # 3_600_000_000_000

SECONDS_PER_MINUTE: int = 60
MINUTES_PER_HOUR: int = 60

# Fractional digits shown for each rendering unit
SECOND_FRACTION_DIGITS: int = 9
MILLISECOND_FRACTION_DIGITS: int = 6
MICROSECOND_FRACTION_DIGITS: int = 3

# Unit suffixes used when rendering durations
HOUR_SYMBOL: str = "h"
MINUTE_SYMBOL: str = "m"
SECOND_SYMBOL: str = "s"
MILLISECOND_SYMBOL: str = "ms"
MICROSECOND_SYMBOL: str = "µs"  # micro sign, not Greek mu
NANOSECOND_SYMBOL: str = "ns"

# Rendering of the zero-length duration
ZERO_DURATION_TEXT: str = "0"


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "SECONDS_PER_MINUTE",
    "MINUTES_PER_HOUR",
    "SECOND_FRACTION_DIGITS",
    "MILLISECOND_FRACTION_DIGITS",
    "MICROSECOND_FRACTION_DIGITS",
    "HOUR_SYMBOL",
    "MINUTE_SYMBOL",
    "SECOND_SYMBOL",
    "MILLISECOND_SYMBOL",
    "MICROSECOND_SYMBOL",
    "NANOSECOND_SYMBOL",
    "ZERO_DURATION_TEXT",
]

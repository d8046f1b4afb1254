"""Timespan: unit-typed time spans with nanosecond precision.

Timespan lets a number carry its time unit. Wrap a raw value in the unit
it was measured in, then read it back in any other unit or as a compact
string. Everything normalizes through a canonical integer-nanosecond
Duration.

Core Types:
    Duration: Canonical span with nanosecond precision
    SupportsDuration: Protocol implemented by every span type
    TimeUnit: Fixed-length units (HOUR, MINUTE, SECOND, ...)

Units:
    Hour, Minute, Second: Float-backed spans
    Nanosecond: Integer-backed span

Functions:
    seconds_to_duration: Convert float seconds to a Duration
    duration_to_seconds: Convert any span to float seconds
    format_duration: Render a nanosecond count as "72h3m0.5s"

Constants:
    ONE_NANOSECOND: The smallest non-zero Duration, for tolerances

Exceptions:
    TimespanError: Base exception
    NonFiniteDurationError: NaN or infinite value needed as nanoseconds

Example:
    >>> from timespan import Hour, Minute, seconds_to_duration
    >>> str(Hour(24))
    '24h0m0s'
    >>> Minute(90).hours()
    1.5
    >>> seconds_to_duration(0.25)
    Duration(nanoseconds=250000000)
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from timespan.core.duration import ONE_NANOSECOND, Duration
from timespan.core.protocol import SupportsDuration
from timespan.core.timeunit import TimeUnit

# Units
from timespan.units.hour import Hour
from timespan.units.minute import Minute
from timespan.units.nanosecond import Nanosecond
from timespan.units.second import Second

# Exceptions
from timespan.errors import NonFiniteDurationError, TimespanError

# Functions
from timespan.convert import duration_to_seconds, seconds_to_duration
from timespan.format import format_duration

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Duration",
    "SupportsDuration",
    "TimeUnit",
    # Units
    "Hour",
    "Minute",
    "Nanosecond",
    "Second",
    # Constants
    "ONE_NANOSECOND",
    # Exceptions
    "TimespanError",
    "NonFiniteDurationError",
    # Functions
    "seconds_to_duration",
    "duration_to_seconds",
    "format_duration",
]

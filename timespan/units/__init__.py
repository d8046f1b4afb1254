"""Unit-specific span types.

This module provides one value type per unit, each satisfying the
SupportsDuration protocol:
    - Hour: Float number of hours
    - Minute: Float number of minutes
    - Second: Float number of seconds
    - Nanosecond: Integer number of nanoseconds
"""

from __future__ import annotations

from timespan.units.hour import Hour
from timespan.units.minute import Minute
from timespan.units.nanosecond import Nanosecond
from timespan.units.second import Second

__all__: list[str] = [
    "Hour",
    "Minute",
    "Nanosecond",
    "Second",
]

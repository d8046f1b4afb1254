"""Core duration types.

This module provides:
    - Duration: Canonical span with nanosecond precision
    - ONE_NANOSECOND: The smallest non-zero Duration
    - SupportsDuration: Protocol shared by every span type
    - TimeUnit: Fixed-length units from nanoseconds to hours
"""

from __future__ import annotations

from timespan.core.duration import ONE_NANOSECOND, Duration
from timespan.core.protocol import SupportsDuration
from timespan.core.timeunit import TimeUnit

__all__: list[str] = [
    "Duration",
    "ONE_NANOSECOND",
    "SupportsDuration",
    "TimeUnit",
]

"""Duration conversion utilities.

This module provides functions for converting between plain float
seconds and the canonical Duration:
    - seconds_to_duration: float seconds -> Duration
    - duration_to_seconds: Duration (or any span) -> float seconds
"""

from __future__ import annotations

from timespan.convert.seconds import duration_to_seconds, seconds_to_duration

__all__ = [
    "seconds_to_duration",
    "duration_to_seconds",
]

"""Internal utilities for Timespan.

This module contains private implementation details:
    - Unit factors and formatting constants
    - Input validation and nanosecond truncation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from timespan._internal.validation import (
    to_float,
    to_whole_nanoseconds,
    validate_integral,
    validate_real,
)

__all__: list[str] = [
    "to_float",
    "to_whole_nanoseconds",
    "validate_integral",
    "validate_real",
]

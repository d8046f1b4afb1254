"""Duration formatting.

Functions:
    format_duration: Render a nanosecond count as a compact string
        such as "24h0m0s", "1.5ms" or "0".

Examples:
    >>> from timespan.format import format_duration
    >>> format_duration(3_723_000_000_000)
    '1h2m3s'
"""

from __future__ import annotations

from timespan.format.duration_string import format_duration

__all__: list[str] = [
    "format_duration",
]

"""Compact duration strings.

This module renders a nanosecond count in the compact form "72h3m0.5s".

Format Rules:
    - Zero renders as "0", with no unit.
    - Negative spans carry a leading "-".
    - At or above one second the layout is [H"h"][M"m"]S[".FFF"]"s".
      Hours appear only when non-zero; minutes appear whenever hours or
      minutes are non-zero, so one day renders as "24h0m0s".
    - Below one second the largest of "ms", "µs", "ns" is used that keeps
      the leading digit non-zero.
    - Fractional digits drop trailing zeros, and the dot goes with them
      when nothing is left.
"""

from __future__ import annotations

from timespan._internal.constants import (
    HOUR_SYMBOL,
    MICROSECOND_FRACTION_DIGITS,
    MICROSECOND_SYMBOL,
    MILLISECOND_FRACTION_DIGITS,
    MILLISECOND_SYMBOL,
    MINUTE_SYMBOL,
    MINUTES_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
    NANOSECOND_SYMBOL,
    SECOND_FRACTION_DIGITS,
    SECOND_SYMBOL,
    SECONDS_PER_MINUTE,
    ZERO_DURATION_TEXT,
)


def format_duration(nanoseconds: int) -> str:
    """Format a nanosecond count as a compact duration string.

    Args:
        nanoseconds: Length of the span in nanoseconds (can be negative).

    Returns:
        The rendered duration.

    Examples:
        >>> format_duration(0)
        '0'
        >>> format_duration(86_400_000_000_000)
        '24h0m0s'
        >>> format_duration(90_500_000_000)
        '1m30.5s'
        >>> format_duration(1_500_000)
        '1.5ms'
        >>> format_duration(-42)
        '-42ns'
    """
    if nanoseconds == 0:
        return ZERO_DURATION_TEXT

    sign = "-" if nanoseconds < 0 else ""
    magnitude = abs(nanoseconds)

    if magnitude < NANOS_PER_SECOND:
        return sign + _format_subsecond(magnitude)

    whole_seconds, fraction = _split_fraction(magnitude, SECOND_FRACTION_DIGITS)
    minutes, seconds = divmod(whole_seconds, SECONDS_PER_MINUTE)
    text = f"{seconds}{fraction}{SECOND_SYMBOL}"
    if minutes > 0:
        hours, minutes = divmod(minutes, MINUTES_PER_HOUR)
        text = f"{minutes}{MINUTE_SYMBOL}{text}"
        if hours > 0:
            text = f"{hours}{HOUR_SYMBOL}{text}"
    return sign + text


def _format_subsecond(magnitude: int) -> str:
    """Format a positive span shorter than one second."""
    if magnitude < NANOS_PER_MICROSECOND:
        return f"{magnitude}{NANOSECOND_SYMBOL}"
    if magnitude < NANOS_PER_MILLISECOND:
        digits, symbol = MICROSECOND_FRACTION_DIGITS, MICROSECOND_SYMBOL
    else:
        digits, symbol = MILLISECOND_FRACTION_DIGITS, MILLISECOND_SYMBOL
    whole, fraction = _split_fraction(magnitude, digits)
    return f"{whole}{fraction}{symbol}"


def _split_fraction(value: int, digits: int) -> tuple[int, str]:
    """Split value / 10**digits into its integer part and a ".fff" suffix.

    The suffix has trailing zeros removed and is empty when the
    fractional part is zero.

    Examples:
        >>> _split_fraction(1_500_000_000, 9)
        (1, '.5')
        >>> _split_fraction(3_000, 3)
        (3, '')
    """
    whole, remainder = divmod(value, 10**digits)
    fraction = f"{remainder:0{digits}d}".rstrip("0")
    if fraction:
        return whole, f".{fraction}"
    return whole, ""


__all__ = ["format_duration"]

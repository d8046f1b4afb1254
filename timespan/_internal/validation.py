"""Validation utilities for Timespan.

This module provides the input checks and the float-to-nanosecond
normalization shared by every span type.

This module is not part of the public API.
"""

from __future__ import annotations

import logging
import math
import numbers

from timespan.errors import NonFiniteDurationError

logger = logging.getLogger(__name__)


def validate_real(value: object, name: str) -> None:
    """Validate that a value is a real number.

    Booleans are rejected even though ``bool`` is an ``int`` subclass.

    Args:
        value: The value to validate.
        name: Parameter name used in the error message.

    Raises:
        TypeError: If value is not a real number.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(
            f"{name} must be a real number, got {type(value).__name__}"
        )


def validate_integral(value: object, name: str) -> None:
    """Validate that a value is an integer.

    Args:
        value: The value to validate.
        name: Parameter name used in the error message.

    Raises:
        TypeError: If value is not an integer (or is a bool).
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")


def to_float(value: float) -> float:
    """Convert a real number to float, saturating at signed infinity.

    Integers too large for a float become ``inf`` or ``-inf`` instead of
    raising, so readers and constructors stay total.

    Examples:
        >>> to_float(3)
        3.0
        >>> to_float(-(10**400))
        -inf
    """
    try:
        return float(value)
    except OverflowError:
        logger.debug("saturating out-of-range value to infinity")
        return math.inf if value > 0 else -math.inf


def to_whole_nanoseconds(value: float, nanos_per_unit: int) -> int:
    """Scale a value to nanoseconds and truncate toward zero.

    Args:
        value: Amount of time in some unit.
        nanos_per_unit: Nanoseconds in one of that unit.

    Returns:
        The whole number of nanoseconds, fraction discarded.

    Raises:
        NonFiniteDurationError: If the scaled value is NaN or infinite.

    Examples:
        >>> to_whole_nanoseconds(1.5, 1_000_000_000)
        1500000000
        >>> to_whole_nanoseconds(-1e-10, 1_000_000_000)
        0
    """
    scaled = value * nanos_per_unit
    if isinstance(scaled, int):
        return scaled
    if not math.isfinite(scaled):
        logger.debug(
            "refusing to truncate %r * %d to nanoseconds", value, nanos_per_unit
        )
        raise NonFiniteDurationError(
            f"cannot express {value!r} as whole nanoseconds"
        )
    return int(scaled)


__all__ = [
    "validate_real",
    "validate_integral",
    "to_float",
    "to_whole_nanoseconds",
]

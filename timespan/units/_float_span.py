"""Shared behaviour of the float-backed span types.

This module is not part of the public API.
"""

from __future__ import annotations

from typing import ClassVar, TypeVar

from timespan._internal.validation import to_float, validate_real
from timespan.core.duration import Duration
from timespan.core.protocol import SupportsDuration
from timespan.core.timeunit import TimeUnit

_S = TypeVar("_S", bound="FloatSpan")


class FloatSpan:
    """A span stored as a float amount of a single unit.

    Subclasses set ``_unit`` and override the reader for that unit so it
    returns the stored value untouched. Every other reader normalizes
    through a canonical Duration first, which truncates to whole
    nanoseconds.
    """

    __slots__ = ("_value",)

    _unit: ClassVar[TimeUnit]

    def __init__(self, value: float) -> None:
        validate_real(value, self._unit.value + "s")
        self._value = to_float(value)

    @classmethod
    def from_duration(cls: type[_S], duration: SupportsDuration) -> _S:
        """Build a span from anything that reports its length.

        Args:
            duration: A Duration or any other span type.

        Returns:
            A new span holding duration's length in this type's unit.
        """
        reader = getattr(duration, cls._unit.value + "s")
        return cls(reader())

    def to_duration(self) -> Duration:
        """Return the span as a canonical Duration.

        Raises:
            NonFiniteDurationError: If the value is NaN or infinite.
        """
        return Duration.from_unit(self._value, self._unit)

    def hours(self) -> float:
        """Return the span as a floating point number of hours."""
        return self.to_duration().hours()

    def minutes(self) -> float:
        """Return the span as a floating point number of minutes."""
        return self.to_duration().minutes()

    def seconds(self) -> float:
        """Return the span as a floating point number of seconds."""
        return self.to_duration().seconds()

    def nanoseconds(self) -> int:
        """Return the span as an integer nanosecond count (truncated)."""
        return self.to_duration().nanoseconds()

    def __float__(self) -> float:
        return self._value

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __str__(self) -> str:
        """Return the compact rendering, e.g. "72h3m0.5s" or "0"."""
        return str(self.to_duration())


__all__ = ["FloatSpan"]

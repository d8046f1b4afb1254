"""The duration capability shared by every span type."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SupportsDuration(Protocol):
    """Anything that can report its length in the standard units.

    Duration, Hour, Minute, Second and Nanosecond all satisfy this
    protocol without inheriting from it. ``str()`` of a conforming
    object is expected to give the compact "24h0m0s" rendering.
    """

    def hours(self) -> float: ...
    def minutes(self) -> float: ...
    def seconds(self) -> float: ...
    def nanoseconds(self) -> int: ...
    def __str__(self) -> str: ...


__all__ = ["SupportsDuration"]

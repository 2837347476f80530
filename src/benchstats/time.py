"""Time unit conversion helpers."""

from __future__ import annotations

MICROSECONDS_PER_SECOND = 1_000_000


def microseconds_to_seconds(value: int | float) -> float:
    """Convert a duration in microseconds to seconds."""
    return value / MICROSECONDS_PER_SECOND

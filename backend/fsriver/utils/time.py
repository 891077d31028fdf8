"""Time helpers."""

from __future__ import annotations

MS_PER_SECOND = 1000


def seconds_to_millis(seconds: int | None) -> int | None:
    """Convert an update interval in seconds to milliseconds."""
    if seconds is None:
        return None
    return seconds * MS_PER_SECOND


def millis_to_seconds(millis: int | None) -> int | None:
    """Convert milliseconds to whole seconds, truncating (1500 -> 1)."""
    if millis is None:
        return None
    return millis // MS_PER_SECOND

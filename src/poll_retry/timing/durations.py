"""Duration helpers shared by engines and clocks."""

import math
from datetime import timedelta

Duration = float | int | timedelta


def to_seconds(value: Duration, name: str = "duration") -> float:
    """
    Normalize a duration to float seconds.

    Args:
        value: Seconds as int/float, or a timedelta
        name: Argument name used in error messages

    Raises:
        TypeError: value is not a number or timedelta (bools are rejected)
        ValueError: value is negative, NaN or infinite
    """
    if isinstance(value, timedelta):
        seconds = value.total_seconds()
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        seconds = float(value)
    else:
        raise TypeError(f"{name} must be seconds or a timedelta, got {type(value).__name__}")

    if not math.isfinite(seconds):
        raise ValueError(f"{name} must be a finite number of seconds, got {seconds}")
    if seconds < 0:
        raise ValueError(f"{name} must be >= 0, got {seconds}")
    return seconds


def format_duration(seconds: float) -> str:
    """
    Render a duration as HH:MM:SS.mmm.

    Hours are not wrapped at 24, so a two-day bound renders as 48:00:00.000.

    >>> format_duration(3600.004)
    '01:00:00.004'
    """
    total_ms = int(round(seconds * 1000))
    hours, rest = divmod(total_ms, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    secs, millis = divmod(rest, 1000)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}.{millis:03d}"

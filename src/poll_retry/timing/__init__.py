"""
Time sources and sleepers consumed by the retry engines.

Both collaborators are injected into engines so that tests can replace
real waiting with a deterministic ManualClock.
"""

from poll_retry.timing.clock import Clock, SystemClock
from poll_retry.timing.durations import format_duration, to_seconds
from poll_retry.timing.exceptions import SleepInterrupted
from poll_retry.timing.manual import ManualClock
from poll_retry.timing.sleeper import Sleeper, SystemSleeper

__all__ = [
    "Clock",
    "ManualClock",
    "SleepInterrupted",
    "Sleeper",
    "SystemClock",
    "SystemSleeper",
    "format_duration",
    "to_seconds",
]

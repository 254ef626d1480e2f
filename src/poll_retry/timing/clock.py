"""
Clock protocol and the wall-clock implementation.

Instants are float seconds on an arbitrary monotonic timeline; only
differences between instants are meaningful.
"""

import time
from typing import Protocol


class Clock(Protocol):
    """Source of "now" for deadline-based engines."""

    def now(self) -> float:
        """Return the current instant."""
        ...

    def later_by(self, seconds: float) -> float:
        """Return the instant `seconds` after now."""
        ...

    def is_past(self, instant: float) -> bool:
        """Return True once now has reached `instant`."""
        ...


class SystemClock:
    """Clock backed by time.monotonic(). Stateless, safe to share across threads."""

    def now(self) -> float:
        return time.monotonic()

    def later_by(self, seconds: float) -> float:
        return self.now() + seconds

    def is_past(self, instant: float) -> bool:
        return self.now() >= instant

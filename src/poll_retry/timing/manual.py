"""
Deterministic clock for tests.

ManualClock implements both Clock and Sleeper: time only moves when sleep()
(or advance()) is called, so time-bounded loops can be tested without
waiting and with exact attempt counts.
"""

from poll_retry.timing.exceptions import SleepInterrupted


class ManualClock:
    """
    Logical clock that advances only on sleep. Not thread-safe: use one
    instance per retry invocation.

    Attributes:
        sleeps: Every duration passed to sleep(), in call order
        interrupt_after: If set, the sleep call with this 1-based index raises
            SleepInterrupted instead of advancing time
    """

    def __init__(self, start: float = 0.0, interrupt_after: int | None = None) -> None:
        self._now = float(start)
        self.sleeps: list[float] = []
        self.interrupt_after = interrupt_after

    def now(self) -> float:
        return self._now

    def later_by(self, seconds: float) -> float:
        return self._now + seconds

    def is_past(self, instant: float) -> bool:
        return self._now >= instant

    def sleep(self, seconds: float) -> None:
        if self.interrupt_after is not None and len(self.sleeps) + 1 == self.interrupt_after:
            raise SleepInterrupted(seconds)
        self.sleeps.append(seconds)
        self._now += seconds

    def advance(self, seconds: float) -> None:
        """Move time forward without recording a sleep."""
        self._now += seconds

    @property
    def sleep_count(self) -> int:
        return len(self.sleeps)

"""
Sleeper protocol and the blocking implementation.

SystemSleeper waits on a threading.Event instead of time.sleep() so that
another thread can cut the wait short with interrupt().
"""

import threading
from typing import Protocol

from poll_retry.logging_config import get_logger
from poll_retry.timing.exceptions import SleepInterrupted

logger = get_logger(__name__)


class Sleeper(Protocol):
    """Suspends the calling thread between attempts."""

    def sleep(self, seconds: float) -> None:
        """
        Block for `seconds`.

        Raises:
            SleepInterrupted: The wait was interrupted
        """
        ...


class SystemSleeper:
    """
    Blocking, interruptible sleeper.

    An interrupt() issued while nobody is sleeping is remembered and fails
    the next sleep() immediately. Not thread-safe to share between
    concurrently running retry invocations: an interrupt wakes whichever
    invocation happens to be waiting.
    """

    def __init__(self) -> None:
        self._interrupted = threading.Event()

    def sleep(self, seconds: float) -> None:
        if self._interrupted.wait(seconds):
            self._interrupted.clear()
            logger.debug("Sleep interrupted", requested_seconds=seconds)
            raise SleepInterrupted(seconds)

    def interrupt(self) -> None:
        """Wake the current (or next) sleep() with SleepInterrupted."""
        self._interrupted.set()

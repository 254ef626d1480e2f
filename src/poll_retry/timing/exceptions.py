"""
Timing exceptions.

SleepInterrupted is raised by a sleeper when a wait between attempts is cut
short. It is deliberately not a RetryError: an interrupted wait aborts the
retry loop and is never treated as a tolerated or fatal operation failure.
"""


class SleepInterrupted(Exception):
    """
    Raised when a sleeper is interrupted while waiting.

    Attributes:
        requested_seconds: Length of the wait that was requested
    """

    def __init__(self, requested_seconds: float) -> None:
        self.requested_seconds = requested_seconds
        super().__init__(f"Interrupted while waiting {requested_seconds:.3f}s between attempts")

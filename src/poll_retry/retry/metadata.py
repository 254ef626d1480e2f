"""
Retry metadata tracking.

RetryMetadata captures the history of one invocation sequence. It is
attached to LimitExceeded so callers can see how the bound was spent.
"""

from dataclasses import dataclass, field

from poll_retry.models.enums import AttemptOutcome, EngineKind


@dataclass(frozen=True)
class RetryMetadata:
    """
    History of a single invocation sequence.

    Attributes:
        engine: Kind of bound that governed the sequence
        operation: Description of the retried operation
        attempts: Number of times the operation was invoked
        sleeps: Number of pauses between attempts
        elapsed_seconds: Clock time from first attempt to the end of the sequence
        outcomes: Classification of each attempt, in order
    """

    engine: EngineKind
    operation: str
    attempts: int
    sleeps: int
    elapsed_seconds: float
    outcomes: tuple[AttemptOutcome, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate metadata invariants."""
        if self.attempts < 1:
            raise ValueError("attempts must be >= 1")

        if not 0 <= self.sleeps < self.attempts:
            raise ValueError(
                f"sleeps must be between 0 and attempts - 1, got {self.sleeps} for {self.attempts} attempts"
            )

        if len(self.outcomes) != self.attempts:
            raise ValueError("outcomes must hold exactly one entry per attempt")

        if self.elapsed_seconds < 0:
            raise ValueError("elapsed_seconds must be >= 0")

    @property
    def tolerated_failures(self) -> int:
        return self.outcomes.count(AttemptOutcome.TOLERATED_FAILURE)

    @property
    def rejected_results(self) -> int:
        return self.outcomes.count(AttemptOutcome.REJECTED_RESULT)

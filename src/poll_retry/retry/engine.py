"""
Retry engines bounded by attempt count or by elapsed time.

Both engines share one polling loop:

1. Invoke the operation
2. Classify the outcome with the engine's RetryPolicy
   - acceptable result: return it
   - exception not tolerated: re-raise it unchanged
   - tolerated exception / rejected result: remember it
3. Ask the bound whether it is used up; if so raise LimitExceeded
4. Sleep the constant interval and go back to 1

The bound is checked after the attempt, never before, so a zero time bound
still allows one attempt.

Usage:
    >>> engine = CounterBasedRetryEngine(5, interval=0.2).ignoring(ConnectionError)
    >>> payload = engine.get(fetch_payload)
"""

import functools
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, TypeVar

from poll_retry.config import settings
from poll_retry.logging_config import get_logger
from poll_retry.models.enums import AttemptOutcome, EngineKind
from poll_retry.monitoring.metrics import record_attempt, record_invocation
from poll_retry.retry.exceptions import LimitExceeded
from poll_retry.retry.metadata import RetryMetadata
from poll_retry.retry.policy import RetryPolicy, is_exception_class
from poll_retry.timing.clock import Clock, SystemClock
from poll_retry.timing.durations import Duration, format_duration, to_seconds
from poll_retry.timing.sleeper import Sleeper, SystemSleeper

logger = get_logger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def describe_operation(operation: Callable[..., Any]) -> str:
    """Human-readable name of a callable for log events and error messages."""
    while isinstance(operation, functools.partial):
        operation = operation.func
    name = getattr(operation, "__name__", None)
    if isinstance(name, str):
        return name
    return repr(operation)


class RetryEngine(ABC):
    """
    Base retry engine: policy configuration and the shared polling loop.

    Subclasses supply the bound through _start_bound() and the message for
    LimitExceeded through _limit_message().

    The policy is an immutable RetryPolicy; ignoring() and until() swap in a
    new one and return the engine for chaining. Each slot can be configured
    once; a second call raises RetryConfigurationError.

    Attributes:
        kind: Which bound governs the engine
        clock: Time source (SystemClock by default)
        sleeper: Waits between attempts (SystemSleeper by default)
        interval: Seconds to wait between attempts
        policy: Tolerated exceptions and result predicate
    """

    kind: EngineKind

    def __init__(
        self,
        interval: Duration | None = None,
        clock: Clock | None = None,
        sleeper: Sleeper | None = None,
        policy: RetryPolicy | None = None,
    ):
        if interval is None:
            interval = settings.DEFAULT_INTERVAL_SECONDS
        self.interval = to_seconds(interval, "interval")
        self.clock = clock if clock is not None else SystemClock()
        self.sleeper = sleeper if sleeper is not None else SystemSleeper()
        self.policy = policy if policy is not None else RetryPolicy()

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def ignoring(self, *kinds_or_predicate: Any) -> "RetryEngine":
        """
        Tolerate exception kinds, or reject results matching a predicate.

        ``ignoring(ValueError, KeyError)`` tolerates those exceptions and their
        subclasses; ``ignoring()`` with no arguments tolerates nothing.
        ``ignoring(predicate)`` retries while ``predicate(result)`` is true.

        Raises:
            RetryConfigurationError: The targeted slot is already configured
        """
        if len(kinds_or_predicate) == 1:
            candidate = kinds_or_predicate[0]
            if callable(candidate) and not is_exception_class(candidate):
                self.policy = self.policy.ignoring_results(candidate)
                return self
        self.policy = self.policy.ignoring_exceptions(*kinds_or_predicate)
        return self

    def until(self, predicate: Callable[[Any], bool]) -> "RetryEngine":
        """
        Retry until ``predicate(result)`` is true.

        Shares the result slot with ``ignoring(predicate)``.

        Raises:
            RetryConfigurationError: A result predicate is already configured
        """
        self.policy = self.policy.until(predicate)
        return self

    # ------------------------------------------------------------------
    # Invocation shapes
    # ------------------------------------------------------------------

    def run(self, action: Callable[[], Any]) -> None:
        """Invoke a no-argument action until it returns without raising."""
        self._execute(action, action, check_result=False)

    def run_with(self, action: Callable[[T], Any], argument: T) -> None:
        """Invoke ``action(argument)`` until it returns without raising."""
        self._execute(action, lambda: action(argument), check_result=False)

    def get(self, supplier: Callable[[], R]) -> R:
        """Invoke a no-argument supplier until it returns an acceptable result."""
        return self._execute(supplier, supplier, check_result=True)

    def apply(self, function: Callable[[T], R], argument: T) -> R:
        """Invoke ``function(argument)`` until it returns an acceptable result."""
        return self._execute(function, lambda: function(argument), check_result=True)

    # ------------------------------------------------------------------
    # Bound hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def _start_bound(self) -> Callable[[int], bool]:
        """Begin a sequence; return a check telling whether `attempts` used up the bound."""

    @abstractmethod
    def _limit_message(self, description: str, attempts: int) -> str:
        """Message for the LimitExceeded raised after `attempts`."""

    # ------------------------------------------------------------------
    # Polling loop
    # ------------------------------------------------------------------

    def _execute(self, operation: Callable[..., Any], invoke: Callable[[], Any], check_result: bool) -> Any:
        description = describe_operation(operation)
        started_at = self.clock.now()
        is_exhausted = self._start_bound()

        outcomes: list[AttemptOutcome] = []
        attempt = 0
        sleeps = 0
        exhausted = False
        last_cause: BaseException | None = None
        last_result: Any = None

        log = logger.bind(engine=self.kind.value, operation=description)

        try:
            while True:
                attempt += 1
                try:
                    result = invoke()
                except BaseException as e:
                    if not self.policy.is_exception_ignored(e):
                        self._classify(outcomes, AttemptOutcome.FATAL_FAILURE)
                        log.info("Operation failed with a non-tolerated exception", attempt=attempt, error_type=type(e).__name__)
                        raise
                    outcome = AttemptOutcome.TOLERATED_FAILURE
                    last_cause = e
                    log.debug("Tolerated exception", attempt=attempt, error_type=type(e).__name__)
                else:
                    if not check_result or not self.policy.is_result_ignored(result):
                        self._classify(outcomes, AttemptOutcome.SUCCESS)
                        if attempt > 1:
                            log.debug("Operation succeeded after retries", attempts=attempt, sleeps=sleeps)
                        return result
                    outcome = AttemptOutcome.REJECTED_RESULT
                    last_result = result
                    log.debug("Rejected result", attempt=attempt, result_type=type(result).__name__)

                self._classify(outcomes, outcome)

                if is_exhausted(attempt):
                    exhausted = True
                    metadata = RetryMetadata(
                        engine=self.kind,
                        operation=description,
                        attempts=attempt,
                        sleeps=sleeps,
                        elapsed_seconds=max(0.0, self.clock.now() - started_at),
                        outcomes=tuple(outcomes),
                    )
                    log.warning(
                        "Retry limit exceeded",
                        attempts=attempt,
                        sleeps=sleeps,
                        elapsed_seconds=metadata.elapsed_seconds,
                        last_error_type=type(last_cause).__name__ if last_cause is not None else None,
                    )
                    raise LimitExceeded(
                        self._limit_message(description, attempt),
                        last_cause=last_cause,
                        last_result=last_result,
                        metadata=metadata,
                    ) from last_cause

                self.sleeper.sleep(self.interval)
                sleeps += 1
        finally:
            # Also covers predicates that raise and interrupted sleeps
            record_invocation(self.kind, attempt, exhausted=exhausted)

    def _classify(self, outcomes: list[AttemptOutcome], outcome: AttemptOutcome) -> None:
        outcomes.append(outcome)
        record_attempt(self.kind, outcome)


class CounterBasedRetryEngine(RetryEngine):
    """
    Engine bounded by a number of attempts.

    Makes at most `max_attempts` invocations and sleeps between them, never
    after the last one.
    """

    kind = EngineKind.COUNTER

    def __init__(
        self,
        max_attempts: int,
        interval: Duration | None = None,
        clock: Clock | None = None,
        sleeper: Sleeper | None = None,
        policy: RetryPolicy | None = None,
    ):
        if isinstance(max_attempts, bool) or not isinstance(max_attempts, int) or max_attempts < 1:
            raise ValueError(f"max_attempts must be a positive integer, got {max_attempts!r}")
        super().__init__(interval=interval, clock=clock, sleeper=sleeper, policy=policy)
        self.max_attempts = max_attempts

    @classmethod
    def times(cls, max_attempts: int | None = None) -> "CounterBasedRetryEngine":
        """Engine with default interval; attempts default to settings.DEFAULT_MAX_ATTEMPTS."""
        if max_attempts is None:
            max_attempts = settings.DEFAULT_MAX_ATTEMPTS
        return cls(max_attempts)

    def _start_bound(self) -> Callable[[int], bool]:
        return lambda attempts: attempts >= self.max_attempts

    def _limit_message(self, description: str, attempts: int) -> str:
        return f"Gave up after {attempts} attempts trying to perform action {description}"


class TimeBasedRetryEngine(RetryEngine):
    """
    Engine bounded by elapsed clock time.

    The deadline is fixed once per invocation as now + duration. After every
    unsuccessful attempt the engine raises LimitExceeded if the deadline has
    passed, otherwise sleeps and tries again. Under a clock that only moves
    while sleeping, an operation that keeps failing is attempted
    floor(duration / interval) + 1 times when the duration is a multiple of
    the interval, and once more than that otherwise.
    """

    kind = EngineKind.TIME

    def __init__(
        self,
        duration: Duration,
        interval: Duration | None = None,
        clock: Clock | None = None,
        sleeper: Sleeper | None = None,
        policy: RetryPolicy | None = None,
    ):
        self.duration = to_seconds(duration, "duration")
        super().__init__(interval=interval, clock=clock, sleeper=sleeper, policy=policy)

    @classmethod
    def during(cls, duration: Duration | None = None) -> "TimeBasedRetryEngine":
        """Engine with default interval; duration defaults to settings.DEFAULT_TIMEOUT_SECONDS."""
        if duration is None:
            duration = settings.DEFAULT_TIMEOUT_SECONDS
        return cls(duration)

    def _start_bound(self) -> Callable[[int], bool]:
        end = self.clock.later_by(self.duration)
        return lambda attempts: self.clock.is_past(end)

    def _limit_message(self, description: str, attempts: int) -> str:
        return f"Timed out after {format_duration(self.duration)} trying to perform action {description}"

"""
Poll Retry: bounded retry/poll executor.

Repeatedly invokes an operation until it succeeds, returns an acceptable
result, or the configured bound (attempt count or elapsed time) runs out:

- CounterBasedRetryEngine: at most N attempts
- TimeBasedRetryEngine: attempts until a deadline passes
- Tolerated exceptions and result predicates configured per engine
- Injectable clock and sleeper for deterministic tests
"""

from poll_retry.retry import (
    CounterBasedRetryEngine,
    LimitExceeded,
    RetryConfigurationError,
    RetryEngine,
    RetryError,
    RetryMetadata,
    RetryPolicy,
    TimeBasedRetryEngine,
)
from poll_retry.timing import ManualClock, SleepInterrupted, SystemClock, SystemSleeper

__version__ = "0.1.0"

__all__ = [
    "CounterBasedRetryEngine",
    "LimitExceeded",
    "ManualClock",
    "RetryConfigurationError",
    "RetryEngine",
    "RetryError",
    "RetryMetadata",
    "RetryPolicy",
    "SleepInterrupted",
    "SystemClock",
    "SystemSleeper",
    "TimeBasedRetryEngine",
]

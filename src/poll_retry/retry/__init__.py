"""
Bounded retry/poll engines.

Main Components:
    - CounterBasedRetryEngine: at most N attempts, constant interval
    - TimeBasedRetryEngine: attempts until a deadline passes
    - RetryPolicy: tolerated exceptions and result predicate (immutable)
    - RetryMetadata: attempt history attached to LimitExceeded
    - LimitExceeded: raised when the bound is used up

Usage:
    >>> from poll_retry.retry import TimeBasedRetryEngine
    >>> engine = TimeBasedRetryEngine(10, interval=0.5).until(lambda job: job.done)
    >>> job = engine.apply(client.fetch_job, job_id)
"""

from poll_retry.retry.engine import (
    CounterBasedRetryEngine,
    RetryEngine,
    TimeBasedRetryEngine,
    describe_operation,
)
from poll_retry.retry.exceptions import LimitExceeded, RetryConfigurationError, RetryError
from poll_retry.retry.metadata import RetryMetadata
from poll_retry.retry.policy import RetryPolicy, is_empty_result

__all__ = [
    "CounterBasedRetryEngine",
    "LimitExceeded",
    "RetryConfigurationError",
    "RetryEngine",
    "RetryError",
    "RetryMetadata",
    "RetryPolicy",
    "TimeBasedRetryEngine",
    "describe_operation",
    "is_empty_result",
]

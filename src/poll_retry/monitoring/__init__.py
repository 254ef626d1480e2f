"""Monitoring and metrics instrumentation for Poll Retry.

Exports Prometheus metrics describing retry behaviour.
"""

from poll_retry.monitoring.metrics import (
    attempts_total,
    invocation_attempts,
    limit_exceeded_total,
    record_attempt,
    record_invocation,
)

__all__ = [
    "attempts_total",
    "limit_exceeded_total",
    "invocation_attempts",
    "record_attempt",
    "record_invocation",
]

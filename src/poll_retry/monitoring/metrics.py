"""Prometheus metrics for Poll Retry.

Metrics are registered in the default prometheus_client registry; expose
them with the host application's existing /metrics endpoint. Alert rules
worth configuring:
- poll_retry_limit_exceeded_total (operations that never became acceptable)
- poll_retry_attempts_total with outcome="tolerated_failure" (flaky dependencies)
"""

from prometheus_client import Counter, Histogram

from poll_retry.config import settings
from poll_retry.models.enums import AttemptOutcome, EngineKind

# === Attempt Metrics ===

attempts_total = Counter(
    "poll_retry_attempts_total",
    "Total operation attempts by engine kind and outcome",
    ["engine", "outcome"],
)
"""
Attempts counter.

Labels:
- engine: counter, time
- outcome: success, tolerated_failure, rejected_result, fatal_failure
"""

invocation_attempts = Histogram(
    "poll_retry_invocation_attempts",
    "Attempts needed per finished invocation",
    ["engine"],
    buckets=(1, 2, 3, 5, 10, 20, 50, 100),
)

# === Exhaustion Metrics ===

limit_exceeded_total = Counter(
    "poll_retry_limit_exceeded_total",
    "Total invocations that ran out of attempts or time",
    ["engine"],
)


def record_attempt(engine: EngineKind, outcome: AttemptOutcome) -> None:
    """Count one classified attempt."""
    if not settings.METRICS_ENABLED:
        return
    attempts_total.labels(engine=engine.value, outcome=outcome.value).inc()


def record_invocation(engine: EngineKind, attempts: int, exhausted: bool) -> None:
    """Record the end of an invocation (success, fatal failure or exhaustion)."""
    if not settings.METRICS_ENABLED:
        return
    invocation_attempts.labels(engine=engine.value).observe(attempts)
    if exhausted:
        limit_exceeded_total.labels(engine=engine.value).inc()

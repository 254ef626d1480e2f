"""
Enumerations for Poll Retry.

All enums are closed taxonomies; their values double as Prometheus label
values and structured log fields.
"""

from enum import Enum


class AttemptOutcome(str, Enum):
    """
    Classification of a single attempt.

    SUCCESS ends the loop with the result, FATAL_FAILURE ends it by
    re-raising. TOLERATED_FAILURE and REJECTED_RESULT lead to another attempt
    or, once the bound is used up, to LimitExceeded.
    """

    SUCCESS = "success"
    TOLERATED_FAILURE = "tolerated_failure"
    REJECTED_RESULT = "rejected_result"
    FATAL_FAILURE = "fatal_failure"


class EngineKind(str, Enum):
    """Which bound governs an engine."""

    COUNTER = "counter"
    TIME = "time"

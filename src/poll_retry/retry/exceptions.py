"""
Retry engine exceptions.

LimitExceeded is the only failure the engine raises on its own behalf: the
bound ran out before the operation produced an acceptable outcome.
RetryConfigurationError signals a programming error while configuring an
engine. Failures raised by the operation itself are never wrapped.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from poll_retry.retry.metadata import RetryMetadata


class RetryError(Exception):
    """Base exception for errors raised by the retry engines themselves."""


class RetryConfigurationError(RetryError):
    """
    Raised when an engine slot is configured a second time.

    Tolerated exception kinds and the result predicate can each be set once
    per engine; a second attempt fails here, before any invocation.
    """


class LimitExceeded(RetryError):
    """
    Raised when the attempt count or time bound is used up.

    `__cause__` is set to the last tolerated exception so tracebacks show it.
    When every attempt returned a rejected result instead of raising, there
    is no cause and `last_result` holds the final rejected value.

    Attributes:
        last_cause: Last tolerated exception, or None
        last_result: Last rejected result (None if no result was ever rejected)
        metadata: Attempt history for diagnostics
    """

    def __init__(
        self,
        message: str,
        last_cause: BaseException | None = None,
        last_result: Any = None,
        metadata: "RetryMetadata | None" = None,
    ) -> None:
        self.message = message
        self.last_cause = last_cause
        self.last_result = last_result
        self.metadata = metadata
        super().__init__(message)

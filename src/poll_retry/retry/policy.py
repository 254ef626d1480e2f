"""
Retry policy: which exceptions to tolerate and which results to reject.

A RetryPolicy is an immutable value. Configuring it returns a new policy,
and each slot (tolerated kinds, result predicate) can be filled once only.

Defaults when a slot is empty:
    - Exceptions: every Exception is tolerated. BaseException subclasses that
      are not Exceptions (KeyboardInterrupt, SystemExit) are never caught.
    - Results: None, False, numeric zero, empty strings and empty sized
      containers are rejected; anything else is accepted.
"""

from collections.abc import Callable, Sized
from dataclasses import dataclass, replace
from numbers import Number
from typing import Any

from poll_retry.retry.exceptions import RetryConfigurationError

ResultPredicate = Callable[[Any], bool]


def is_empty_result(result: Any) -> bool:
    """
    Default rejection rule for results.

    >>> [is_empty_result(v) for v in (None, False, 0, 0.0, "", [], {}, "OK", 1, True)]
    [True, True, True, True, True, True, True, False, False, False]
    """
    if result is None or result is False:
        return True
    if isinstance(result, Number) and result == 0:
        return True
    if isinstance(result, Sized) and len(result) == 0:
        return True
    return False


def _negate(predicate: ResultPredicate) -> ResultPredicate:
    def rejected_unless(result: Any) -> bool:
        return not predicate(result)

    rejected_unless.__name__ = f"not_{getattr(predicate, '__name__', 'predicate')}"
    return rejected_unless


def is_exception_class(value: Any) -> bool:
    return isinstance(value, type) and issubclass(value, BaseException)


@dataclass(frozen=True)
class RetryPolicy:
    """
    Tolerated exception kinds and result predicate.

    Attributes:
        ignored_exceptions: Exception classes to tolerate, matched with
            isinstance (subclasses match too). None means tolerate every
            Exception; an empty tuple means tolerate nothing.
        ignored_result: Predicate returning True for results that must be
            retried. None means use is_empty_result.
    """

    ignored_exceptions: tuple[type[BaseException], ...] | None = None
    ignored_result: ResultPredicate | None = None

    def ignoring_exceptions(self, *kinds: type[BaseException]) -> "RetryPolicy":
        if self.ignored_exceptions is not None:
            raise RetryConfigurationError("Ignored exceptions can be set once only")
        for kind in kinds:
            if not is_exception_class(kind):
                raise TypeError(f"Expected an exception class, got {kind!r}")
        return replace(self, ignored_exceptions=tuple(kinds))

    def ignoring_results(self, predicate: ResultPredicate) -> "RetryPolicy":
        if self.ignored_result is not None:
            raise RetryConfigurationError(
                "Predicate to ignore unwanted results can be set once only"
            )
        if not callable(predicate):
            raise TypeError(f"Expected a callable predicate, got {predicate!r}")
        return replace(self, ignored_result=predicate)

    def until(self, predicate: ResultPredicate) -> "RetryPolicy":
        if not callable(predicate):
            raise TypeError(f"Expected a callable predicate, got {predicate!r}")
        return self.ignoring_results(_negate(predicate))

    def is_exception_ignored(self, exc: BaseException) -> bool:
        if self.ignored_exceptions is None:
            return isinstance(exc, Exception)
        return isinstance(exc, self.ignored_exceptions)

    def is_result_ignored(self, result: Any) -> bool:
        if self.ignored_result is None:
            return is_empty_result(result)
        return bool(self.ignored_result(result))

"""
Unit tests for CounterBasedRetryEngine.

All engines run on a ManualClock, so sleeps are counted instead of waited.
"""

import pytest

from poll_retry.models.enums import AttemptOutcome, EngineKind
from poll_retry.retry.engine import CounterBasedRetryEngine
from poll_retry.retry.exceptions import LimitExceeded


# ============================================================================
# Construction
# ============================================================================


@pytest.mark.parametrize("attempts", [0, -1, 1.5, True, None])
def test_max_attempts_must_be_positive_integer(attempts):
    with pytest.raises(ValueError):
        CounterBasedRetryEngine(attempts, interval=1)


def test_negative_interval_is_rejected():
    with pytest.raises(ValueError):
        CounterBasedRetryEngine(3, interval=-1)


def test_interval_defaults_to_settings(monkeypatch):
    from poll_retry.config import settings

    monkeypatch.setattr(settings, "DEFAULT_INTERVAL_SECONDS", 0.25)

    assert CounterBasedRetryEngine(3).interval == 0.25


def test_times_uses_default_attempts(monkeypatch):
    from poll_retry.config import settings

    monkeypatch.setattr(settings, "DEFAULT_MAX_ATTEMPTS", 7)

    assert CounterBasedRetryEngine.times().max_attempts == 7
    assert CounterBasedRetryEngine.times(2).max_attempts == 2


# ============================================================================
# Success Scenarios
# ============================================================================


def test_returns_immediately_when_first_attempt_succeeds(counter_engine, manual_clock, script):
    op = script("OK")

    assert counter_engine.get(op) == "OK"
    assert op.call_count == 1
    assert manual_clock.sleep_count == 0


@pytest.mark.parametrize("k", [1, 2, 3, 4, 5])
def test_first_acceptable_attempt_k_stops_the_loop(counter_engine, manual_clock, script, k):
    op = script(*([ValueError] * (k - 1) + ["OK"]))

    assert counter_engine.get(op) == "OK"
    assert op.call_count == k
    assert manual_clock.sleep_count == k - 1


def test_ignoring_predicate_skips_failed_results(counter_engine, manual_clock, script):
    op = script("FAIL", "FAIL", "OK")

    assert counter_engine.ignoring(lambda r: r == "FAIL").get(op) == "OK"
    assert op.call_count == 3
    assert manual_clock.sleep_count == 2


def test_default_rule_skips_empty_results(counter_engine, manual_clock, script):
    op = script(0, "", False, [], "OK")

    assert counter_engine.get(op) == "OK"
    assert op.call_count == 5
    assert manual_clock.sleep_count == 4


# ============================================================================
# Exhaustion
# ============================================================================


@pytest.mark.parametrize("n", [1, 2, 3, 10])
def test_never_exceeds_n_attempts_and_n_minus_one_sleeps(manual_clock, script, n):
    engine = CounterBasedRetryEngine(n, interval=1, clock=manual_clock, sleeper=manual_clock)
    op = script(ValueError)

    with pytest.raises(LimitExceeded):
        engine.get(op)

    assert op.call_count == n
    assert manual_clock.sleep_count == n - 1


def test_single_attempt_never_sleeps(manual_clock, script):
    engine = CounterBasedRetryEngine(1, interval=1, clock=manual_clock, sleeper=manual_clock)
    op = script(None)

    with pytest.raises(LimitExceeded):
        engine.get(op)

    assert op.call_count == 1
    assert manual_clock.sleeps == []


def test_limit_exceeded_carries_last_cause(counter_engine, script):
    first = ValueError("first")
    last = ValueError("last")
    op = script(first, first, first, first, last)

    with pytest.raises(LimitExceeded) as exc_info:
        counter_engine.get(op)

    assert exc_info.value.last_cause is last
    assert exc_info.value.__cause__ is last


def test_limit_exceeded_without_cause_when_results_rejected(counter_engine, script):
    op = script(None)

    with pytest.raises(LimitExceeded) as exc_info:
        counter_engine.get(op)

    assert exc_info.value.last_cause is None
    assert exc_info.value.__cause__ is None
    assert exc_info.value.last_result is None


def test_rejected_result_recorded_for_diagnostics(counter_engine, script):
    op = script("PENDING")

    with pytest.raises(LimitExceeded) as exc_info:
        counter_engine.until(lambda r: r == "DONE").get(op)

    assert exc_info.value.last_result == "PENDING"


def test_cause_from_earlier_failure_kept_when_later_results_rejected(counter_engine, script):
    boom = ValueError("boom")
    op = script(boom, None)

    with pytest.raises(LimitExceeded) as exc_info:
        counter_engine.get(op)

    assert exc_info.value.last_cause is boom


def test_limit_message_names_operation(counter_engine, script):
    op = script(ValueError, name="load_profile")

    with pytest.raises(LimitExceeded, match="Gave up after 5 attempts trying to perform action load_profile"):
        counter_engine.get(op)


def test_limit_exceeded_metadata(counter_engine, script):
    op = script(ValueError, None)

    with pytest.raises(LimitExceeded) as exc_info:
        counter_engine.get(op)

    metadata = exc_info.value.metadata
    assert metadata.engine == EngineKind.COUNTER
    assert metadata.operation == "scripted_operation"
    assert metadata.attempts == 5
    assert metadata.sleeps == 4
    assert metadata.elapsed_seconds == 4.0
    assert metadata.outcomes[0] == AttemptOutcome.TOLERATED_FAILURE
    assert metadata.tolerated_failures == 1
    assert metadata.rejected_results == 4


# ============================================================================
# Fatal failures
# ============================================================================


def test_non_tolerated_exception_propagates_unchanged(counter_engine, manual_clock, script):
    fatal = KeyError("fatal")
    op = script(ValueError, ValueError, fatal, "OK")

    with pytest.raises(KeyError) as exc_info:
        counter_engine.ignoring(ValueError).get(op)

    assert exc_info.value is fatal
    assert op.call_count == 3
    assert manual_clock.sleep_count == 2


def test_keyboard_interrupt_is_never_tolerated(counter_engine, script):
    op = script(KeyboardInterrupt, "OK")

    with pytest.raises(KeyboardInterrupt):
        counter_engine.get(op)

    assert op.call_count == 1


def test_empty_ignoring_makes_every_exception_fatal(counter_engine, script):
    op = script(ValueError, "OK")

    with pytest.raises(ValueError):
        counter_engine.ignoring().get(op)

    assert op.call_count == 1

"""Unit test fixtures (engines wired to a deterministic clock)."""

import pytest

from poll_retry.retry.engine import CounterBasedRetryEngine, TimeBasedRetryEngine
from poll_retry.timing.manual import ManualClock


@pytest.fixture
def counter_engine(manual_clock: ManualClock) -> CounterBasedRetryEngine:
    """Five attempts, one second apart, on the manual clock."""
    return CounterBasedRetryEngine(5, interval=1, clock=manual_clock, sleeper=manual_clock)


@pytest.fixture
def time_engine(manual_clock: ManualClock) -> TimeBasedRetryEngine:
    """Four second bound, one second interval, on the manual clock (five attempts)."""
    return TimeBasedRetryEngine(4, interval=1, clock=manual_clock, sleeper=manual_clock)


@pytest.fixture(params=["counter", "time"])
def any_engine(request, counter_engine, time_engine):
    """Both engine kinds; each allows exactly five attempts and four sleeps."""
    return counter_engine if request.param == "counter" else time_engine

"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import pytest

from poll_retry.config import Settings
from poll_retry.timing.manual import ManualClock


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults for local testing.

    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            test_settings.DEFAULT_MAX_ATTEMPTS = 2
    """
    return Settings(
        # === Application ===
        APP_NAME="poll-retry (Test)",
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",

        # === Retry Defaults ===
        DEFAULT_INTERVAL_SECONDS=0.0,
        DEFAULT_TIMEOUT_SECONDS=1.0,
        DEFAULT_MAX_ATTEMPTS=3,

        # === Monitoring ===
        METRICS_ENABLED=True,
    )


@pytest.fixture
def manual_clock() -> ManualClock:
    """Deterministic clock/sleeper starting at t=0; time moves only on sleep()."""
    return ManualClock()


class Script:
    """Callable that replays a scripted sequence of results and exceptions.

    Exception classes or instances in the script are raised; anything else is
    returned. The last entry repeats once the script runs out. Every call's
    argument (if any) is recorded in `calls`.
    """

    def __init__(self, *steps, name: str = "scripted_operation"):
        self.steps = list(steps)
        self.calls: list = []
        self.__name__ = name

    def __call__(self, *args):
        self.calls.append(args[0] if args else None)
        step = self.steps[min(len(self.calls), len(self.steps)) - 1]
        if isinstance(step, BaseException) or (
            isinstance(step, type) and issubclass(step, BaseException)
        ):
            raise step
        return step

    @property
    def call_count(self) -> int:
        return len(self.calls)


@pytest.fixture
def script():
    """Factory fixture building a Script.

    Usage:
        def test_something(script):
            op = script(ValueError, "OK")
    """
    return Script

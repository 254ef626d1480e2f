"""
Unit tests for Poll Retry.

Test individual components in isolation on a ManualClock:
- Retry policy (default result rule, exception matching, one-shot slots)
- Counter-based and time-based engines (attempt/sleep counts, exhaustion)
- Invocation shapes and interruption
- Timing helpers, metrics, configuration and logging
"""

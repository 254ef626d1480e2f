"""
Integration tests for Poll Retry.

Run the engines on the real SystemClock and SystemSleeper, including
cross-thread interruption and concurrently running engines.
"""

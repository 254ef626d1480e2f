"""Shared enumerations for engines, metrics and diagnostics."""

from poll_retry.models.enums import AttemptOutcome, EngineKind

__all__ = ["AttemptOutcome", "EngineKind"]

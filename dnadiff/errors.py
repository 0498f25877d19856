"""Exceptions raised by the alignment pipeline."""

from __future__ import annotations

from typing import Optional


class InvalidSequence(ValueError):
    """Raw input failed DNA validation (empty, wrong alphabet, or too long)."""

    def __init__(self, reason: str, label: Optional[str] = None) -> None:
        self.reason = reason
        self.label = label
        message = f"{label}: {reason}" if label else reason
        super().__init__(message)


class InternalInvariantViolation(RuntimeError):
    """The traceback or classifier reached a state the recurrence cannot produce."""


__all__ = ["InvalidSequence", "InternalInvariantViolation"]

"""
This module defines the scoring configuration for linear-gap global alignment
of DNA sequences, together with constants for the canonical DNA bases, the gap
marker and the maximum accepted sequence length.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Tuple

DNA_BASES: Tuple[str, str, str, str] = ("A", "T", "C", "G")
GAP: str = "-"
MAX_SEQUENCE_LENGTH: int = 1000


@dataclass(frozen=True)
class ScoringConfig:
    """Match reward, mismatch penalty and per-column gap penalty."""

    match: int = 1
    mismatch: int = -1
    gap: int = -2

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            # bool is an int subclass; reject it explicitly
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(
                    f"{field.name} score must be an integer, got {value!r}"
                )

    def substitution(self, x_base: str, y_base: str) -> int:
        """Return the diagonal score for aligning x_base against y_base."""
        return self.match if x_base == y_base else self.mismatch


DEFAULT_SCORING = ScoringConfig()


__all__ = [
    "ScoringConfig",
    "DEFAULT_SCORING",
    "DNA_BASES",
    "GAP",
    "MAX_SEQUENCE_LENGTH",
]

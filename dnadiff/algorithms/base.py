"""Shared interfaces for pairwise alignment algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod

from dnadiff.types import AlignmentResult, DNASequence
from dnadiff.types.parameters import DEFAULT_SCORING, ScoringConfig


class PairwiseAligner(ABC):
    """Abstract base class for pairwise alignment algorithms."""

    @abstractmethod
    def align(
        self,
        x_seq: DNASequence,
        y_seq: DNASequence,
        scoring: ScoringConfig = DEFAULT_SCORING,
    ) -> AlignmentResult:
        """Align two validated sequences under the given scoring."""
        raise NotImplementedError


__all__ = ["PairwiseAligner"]

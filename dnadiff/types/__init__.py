"""Types for the project."""

from .sequence import DNASequence, validate_dna_sequence
from .alignment import Alignment, AlignmentResult
from .mutation import (
    Deletion,
    Insertion,
    Match,
    Mutation,
    MutationStats,
    MutationType,
    Substitution,
)
from .parameters import DEFAULT_SCORING, ScoringConfig


__all__ = [
    "DNASequence",
    "validate_dna_sequence",
    "Alignment",
    "AlignmentResult",
    "Mutation",
    "MutationType",
    "Match",
    "Substitution",
    "Insertion",
    "Deletion",
    "MutationStats",
    "ScoringConfig",
    "DEFAULT_SCORING",
    "parameters",
]

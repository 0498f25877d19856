"""Global alignment and mutation analysis for pairs of DNA sequences."""

from .compare import compare_sequences, validate_inputs
from .errors import InternalInvariantViolation, InvalidSequence
from .types import AlignmentResult, DEFAULT_SCORING, ScoringConfig

__all__ = [
    "compare_sequences",
    "validate_inputs",
    "InvalidSequence",
    "InternalInvariantViolation",
    "AlignmentResult",
    "ScoringConfig",
    "DEFAULT_SCORING",
]

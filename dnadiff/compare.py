"""End-to-end comparison of two raw DNA strings."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from dnadiff.algorithms import NeedlemanWunschAligner
from dnadiff.errors import InvalidSequence
from dnadiff.types import AlignmentResult, DNASequence, validate_dna_sequence
from dnadiff.types.parameters import DEFAULT_SCORING, ScoringConfig

SEQUENCE_LABELS: Tuple[str, str] = ("seq1", "seq2")


def validate_inputs(
    raw1: str, raw2: str, labels: Tuple[str, str] = SEQUENCE_LABELS
) -> Dict[str, str]:
    """Validate both inputs independently and return reasons keyed by label.

    An empty dictionary means both inputs are valid.
    """
    errors: Dict[str, str] = {}
    for label, raw in zip(labels, (raw1, raw2)):
        try:
            validate_dna_sequence(raw, label=label)
        except InvalidSequence as err:
            errors[label] = err.reason
    return errors


def compare_sequences(
    raw1: str,
    raw2: str,
    scoring: Optional[ScoringConfig] = None,
    labels: Tuple[str, str] = SEQUENCE_LABELS,
) -> AlignmentResult:
    """Validate two raw strings and return their global alignment.

    Raises InvalidSequence (labelled with the offending input) before any
    alignment work is done.
    """
    x_seq = DNASequence.from_raw(labels[0], raw1)
    y_seq = DNASequence.from_raw(labels[1], raw2)
    aligner = NeedlemanWunschAligner()
    return aligner.align(x_seq, y_seq, scoring or DEFAULT_SCORING)


__all__ = ["SEQUENCE_LABELS", "validate_inputs", "compare_sequences"]

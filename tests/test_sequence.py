"""Unit tests for DNA input validation and the DNASequence type."""

from __future__ import annotations

import pytest

from dnadiff.errors import InvalidSequence
from dnadiff.types.sequence import DNASequence, validate_dna_sequence


@pytest.mark.parametrize(
    "raw, reason",
    [
        ("", "Sequence cannot be empty"),
        ("   \n\t", "Sequence cannot be empty"),
        ("ATCGN", "Sequence must contain only A, T, C, G characters"),
        ("ACGU", "Sequence must contain only A, T, C, G characters"),
        ("AT CG", "Sequence must contain only A, T, C, G characters"),
        ("A" * 1001, "Sequence too long (max 1000 characters)"),
    ],
)
def test_validate_rejects_bad_input(raw, reason):
    """Empty, non-ATCG and over-long inputs are rejected with a readable reason."""
    with pytest.raises(InvalidSequence) as excinfo:
        validate_dna_sequence(raw)
    assert excinfo.value.reason == reason


def test_validate_normalizes_lowercase_and_whitespace():
    """Lowercase input is accepted and surrounding whitespace is trimmed."""
    assert validate_dna_sequence("atcg") == "ATCG"
    assert validate_dna_sequence("  gAtTaCa\n") == "GATTACA"


def test_validate_accepts_length_limit_after_trimming():
    """The 1000-character cap applies to the trimmed input."""
    raw = "  " + "G" * 1000 + "  "
    assert validate_dna_sequence(raw) == "G" * 1000


def test_invalid_sequence_carries_label():
    """The error names the input it came from."""
    with pytest.raises(InvalidSequence) as excinfo:
        validate_dna_sequence("XYZ", label="seq2")
    assert excinfo.value.label == "seq2"
    assert str(excinfo.value).startswith("seq2: ")
    assert isinstance(excinfo.value, ValueError)


def test_from_raw_builds_uppercase_sequence():
    """DNASequence.from_raw validates and normalizes raw input."""
    seq = DNASequence.from_raw("query", " acgt ", description="demo")

    assert seq.residues == "ACGT"
    assert seq.identifier == "query"
    assert seq.description == "demo"
    assert seq.aligned is False
    assert len(seq) == 4


def test_from_raw_propagates_invalid_sequence():
    """Invalid raw input never produces a DNASequence."""
    with pytest.raises(InvalidSequence):
        DNASequence.from_raw("query", "ACGN")


def test_unaligned_sequence_rejects_gaps():
    """Only aligned sequences may contain the gap marker."""
    with pytest.raises(ValueError):
        DNASequence(identifier="x", residues="A-C")

    aligned = DNASequence(identifier="x", residues="A-C", aligned=True)
    assert aligned.ungapped() == "AC"


def test_unaligned_sequence_rejects_empty_and_over_long():
    """Direct construction enforces the same length bounds as validation."""
    with pytest.raises(ValueError):
        DNASequence(identifier="x", residues="")
    with pytest.raises(ValueError):
        DNASequence(identifier="x", residues="C" * 1001)


def test_sequence_is_immutable():
    """Validated sequences cannot be modified."""
    seq = DNASequence(identifier="x", residues="ACGT")
    with pytest.raises(AttributeError):
        seq.residues = "TTTT"

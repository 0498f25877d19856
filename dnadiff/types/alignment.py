"""Alignment types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .mutation import Mutation, MutationStats
from .sequence import DNASequence

PAIRWISE_COUNT = 2


@dataclass(frozen=True)
class Alignment:
    """Pairwise global alignment of two DNA sequences."""

    name: Optional[str]
    aligned_sequences: List[DNASequence]
    original_sequences: List[DNASequence]

    def __post_init__(self):
        # Validate that this is a pairwise alignment
        if self.num_sequences != PAIRWISE_COUNT:
            raise ValueError(
                f"Expected {PAIRWISE_COUNT} aligned sequences, "
                f"received {self.num_sequences}."
            )

        if len(self.aligned_sequences) != len(self.original_sequences):
            raise ValueError(
                "aligned_sequences and original_sequences must have the same length."
            )

        if any(s.aligned is False for s in self.aligned_sequences):
            raise ValueError("All aligned_sequences must have aligned=True.")

        if any(s.aligned is True for s in self.original_sequences):
            raise ValueError("All original_sequences must have aligned=False.")

        if any(len(s) != self.columns for s in self.aligned_sequences):
            raise ValueError("All aligned_sequences must have the same length.")

        # Removing gaps must give back the inputs
        for aligned, original in zip(self.aligned_sequences, self.original_sequences):
            if aligned.ungapped() != original.residues:
                raise ValueError(
                    f"Aligned sequence {aligned.identifier!r} does not match its "
                    "original once gaps are removed."
                )

    @property
    def num_sequences(self) -> int:
        """Number of sequences in the alignment."""
        return len(self.aligned_sequences)

    @property
    def columns(self) -> int:
        """Number of columns in the alignment."""
        return len(self.aligned_sequences[0])

    def __str__(self) -> str:
        class_name = self.__class__.__name__

        def _indent_seq_string(seq):
            s = str(seq)
            return "      " + s.replace("\n", "\n     ")

        aligned_str = "\n".join(
            _indent_seq_string(seq) for seq in self.aligned_sequences
        )
        original_str = "\n".join(
            _indent_seq_string(seq) for seq in self.original_sequences
        )
        return (
            f"{class_name} (\n"
            f"   name: {self.name}\n"
            f"   aligned_sequences (columns: {self.columns}):\n{aligned_str}\n"
            f"   original_sequences:\n{original_str}\n"
            f")"
        )


@dataclass(frozen=True)
class AlignmentResult:
    """Result of a pairwise alignment.

    Attributes:
        alignment: The pairwise alignment of two sequences
        score: Optimal global alignment score (bottom-right matrix cell)
        similarity: Percentage of columns that are matches, in [0, 100]
        mutations: One record per aligned column, in column order
    """

    alignment: Alignment
    score: int
    similarity: float
    mutations: Tuple[Mutation, ...]

    @property
    def aligned_seq1(self) -> str:
        return self.alignment.aligned_sequences[0].residues

    @property
    def aligned_seq2(self) -> str:
        return self.alignment.aligned_sequences[1].residues

    @property
    def stats(self) -> MutationStats:
        """Per-type counts derived from the mutation list."""
        # dnadiff.evaluation imports dnadiff.types
        from dnadiff.evaluation.metrics import mutation_stats

        return mutation_stats(self.mutations)


__all__ = ["Alignment", "AlignmentResult"]

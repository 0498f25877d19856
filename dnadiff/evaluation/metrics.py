"""Similarity and per-type statistics over mutation records."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from dnadiff.types.mutation import Mutation, MutationStats, MutationType


def _safe_divide(numerator: float, denominator: float) -> float:
    """Divide with zero-denominator protection."""
    return numerator / denominator if denominator else 0.0


def similarity(mutations: Sequence[Mutation]) -> float:
    """Percentage of aligned columns that are matches, or 0.0 with no columns."""
    matches = sum(1 for mutation in mutations if mutation.type is MutationType.MATCH)
    return _safe_divide(matches, len(mutations)) * 100


def mutation_stats(mutations: Sequence[Mutation]) -> MutationStats:
    """Count mutations per type."""
    counts = Counter(mutation.type for mutation in mutations)
    return MutationStats(
        matches=counts[MutationType.MATCH],
        substitutions=counts[MutationType.SUBSTITUTION],
        insertions=counts[MutationType.INSERTION],
        deletions=counts[MutationType.DELETION],
        total=len(mutations),
        similarity=similarity(mutations),
    )


__all__ = ["similarity", "mutation_stats"]

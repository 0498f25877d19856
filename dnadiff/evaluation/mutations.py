"""Classification of aligned columns into mutation events."""

from __future__ import annotations

from typing import List, Tuple

from dnadiff.errors import InternalInvariantViolation
from dnadiff.types.mutation import Deletion, Insertion, Match, Mutation, Substitution
from dnadiff.types.parameters import GAP


def extract_columns(aligned_x: str, aligned_y: str) -> List[Tuple[str, str]]:
    """Return the alignment columns as pairs of symbols (gaps retained)."""
    if len(aligned_x) != len(aligned_y):
        raise InternalInvariantViolation(
            "Aligned sequences have different lengths: "
            f"{len(aligned_x)} vs {len(aligned_y)}"
        )
    return list(zip(aligned_x, aligned_y))


def classify_column(position: int, left: str, right: str) -> Mutation:
    """Tag a single column; position is 1-based."""
    if left == GAP and right == GAP:
        raise InternalInvariantViolation(
            f"Column {position} is a gap in both sequences."
        )
    if left == GAP:
        return Insertion(position=position, to_base=right)
    if right == GAP:
        return Deletion(position=position, from_base=left)
    if left == right:
        return Match(position=position, base=left)
    return Substitution(position=position, from_base=left, to_base=right)


def classify_columns(aligned_x: str, aligned_y: str) -> Tuple[Mutation, ...]:
    """Return one mutation record per column, in column order.

    The first sequence is the reference: a gap on its side is an insertion,
    a gap on the other side is a deletion.
    """
    return tuple(
        classify_column(position, left, right)
        for position, (left, right) in enumerate(
            extract_columns(aligned_x, aligned_y), start=1
        )
    )


__all__ = ["extract_columns", "classify_column", "classify_columns"]

"""Algorithms for the project."""

from .base import PairwiseAligner
from .needleman_wunsch import NeedlemanWunschAligner


__all__ = [
    "PairwiseAligner",
    "NeedlemanWunschAligner",
]

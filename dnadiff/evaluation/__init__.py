"""Evaluation module for the project."""

from .metrics import mutation_stats, similarity
from .mutations import classify_columns

__all__ = [
    "classify_columns",
    "mutation_stats",
    "similarity",
    "metrics",
    "mutations",
]

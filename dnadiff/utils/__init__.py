"""Utility functions for the project."""

from .fasta import read_dna_fasta, strip_non_dna
from .serialization import (
    load_scoring_config,
    result_to_dict,
    save_scoring_config,
    scoring_to_dict,
)

__all__ = [
    "read_dna_fasta",
    "strip_non_dna",
    "load_scoring_config",
    "save_scoring_config",
    "scoring_to_dict",
    "result_to_dict",
]

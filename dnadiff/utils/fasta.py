"""Functions for turning FASTA files and free text into DNA sequences."""

import logging
import re
from typing import List, Optional

import skbio.io
from skbio import Sequence

from dnadiff.errors import InvalidSequence
from dnadiff.types import DNASequence

logger = logging.getLogger(__name__)

NON_DNA_PATTERN = re.compile(r"[^ATCG]", re.IGNORECASE)


def strip_non_dna(text: str) -> str:
    """Drop every character that is not A, T, C or G and uppercase the rest."""
    return NON_DNA_PATTERN.sub("", text).upper()


def dna_sequence_from_skbio(record: Sequence) -> DNASequence:
    """Convert a scikit-bio record to a DNASequence, filtering non-DNA symbols."""
    metadata = getattr(record, "metadata", {}) or {}
    identifier = metadata.get("id") or ""
    description = metadata.get("description") or None

    return DNASequence.from_raw(
        identifier=identifier,
        raw=strip_non_dna(str(record)),
        description=description,
    )


def read_dna_fasta(
    file_path: str, ids: Optional[List[str]] = None
) -> List[DNASequence]:
    """Read a FASTA file and return a list of DNASequence.

    Records that are empty or too long once non-DNA symbols are stripped are
    skipped with a warning.
    """
    sequences: List[DNASequence] = []
    for record in skbio.io.read(file_path, format="fasta"):
        if ids and record.metadata["id"] not in ids:
            continue

        try:
            sequences.append(dna_sequence_from_skbio(record))
        except InvalidSequence as err:
            logger.warning("Skipping FASTA record %s", err)
    return sequences


__all__ = ["strip_non_dna", "dna_sequence_from_skbio", "read_dna_fasta"]

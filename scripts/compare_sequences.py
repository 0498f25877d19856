#!/usr/bin/env python3
"""Align two DNA sequences and print the alignment with its mutation summary."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

# Ensure repository modules are importable when invoked as a script
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dnadiff.compare import compare_sequences, validate_inputs  # pylint: disable=C0413
from dnadiff.errors import InvalidSequence  # pylint: disable=C0413
from dnadiff.types import AlignmentResult, ScoringConfig  # pylint: disable=C0413
from dnadiff.types.mutation import MutationType  # pylint: disable=C0413
from dnadiff.types.parameters import DEFAULT_SCORING  # pylint: disable=C0413
from dnadiff.utils import load_scoring_config, read_dna_fasta  # pylint: disable=C0413
from scripts.constants import LABEL_WIDTH, SCORING_YAML  # pylint: disable=C0413

logger = logging.getLogger(__name__)


def format_alignment(result: AlignmentResult) -> str:
    """Return a human-readable three-line alignment string."""
    seq_x, seq_y = result.alignment.aligned_sequences
    marks = "".join(
        "|" if mutation.type is MutationType.MATCH else " "
        for mutation in result.mutations
    )
    return "\n".join(
        [
            f"{seq_x.identifier:>{LABEL_WIDTH}}: {seq_x.residues}",
            f"{'':>{LABEL_WIDTH}}  {marks}",
            f"{seq_y.identifier:>{LABEL_WIDTH}}: {seq_y.residues}",
        ]
    )


def _first_fasta_record(path: str) -> str:
    sequences = read_dna_fasta(path)
    if not sequences:
        raise ValueError(f"No usable DNA records found in {path}")
    return sequences[0].residues


def _resolve_inputs(args: argparse.Namespace) -> Tuple[str, str]:
    raw1 = _first_fasta_record(args.fasta1) if args.fasta1 else args.seq1
    raw2 = _first_fasta_record(args.fasta2) if args.fasta2 else args.seq2
    if raw1 is None or raw2 is None:
        raise ValueError(
            "Provide each sequence with --seq1/--seq2 or --fasta1/--fasta2."
        )
    return raw1, raw2


def _resolve_scoring(path: Optional[str]) -> ScoringConfig:
    if path:
        return load_scoring_config(Path(path))
    if SCORING_YAML.exists():
        return load_scoring_config(SCORING_YAML)
    return DEFAULT_SCORING


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Globally align two DNA sequences (Needleman-Wunsch)."
    )
    parser.add_argument("--seq1", type=str, help="First (reference) sequence.")
    parser.add_argument("--seq2", type=str, help="Second sequence.")
    parser.add_argument(
        "--fasta1", type=str, help="FASTA file; its first record is the reference."
    )
    parser.add_argument(
        "--fasta2",
        type=str,
        help="FASTA file; its first record is the second sequence.",
    )
    parser.add_argument(
        "--scoring",
        type=str,
        default=None,
        help=f"YAML scoring config (defaults to {SCORING_YAML} when present).",
    )
    parser.add_argument(
        "--mutations",
        action="store_true",
        help="List every non-match column.",
    )
    args = parser.parse_args(argv)

    raw1, raw2 = _resolve_inputs(args)
    scoring = _resolve_scoring(args.scoring)

    try:
        result = compare_sequences(raw1, raw2, scoring)
    except InvalidSequence:
        for label, reason in validate_inputs(raw1, raw2).items():
            logger.error("%s: %s", label, reason)
        return 1

    stats = result.stats
    print(format_alignment(result))
    print(f"\nScore: {result.score}")
    print(f"Similarity: {result.similarity:.1f}%")
    print(
        f"Matches: {stats.matches}  Substitutions: {stats.substitutions}  "
        f"Insertions: {stats.insertions}  Deletions: {stats.deletions}"
    )

    if args.mutations:
        print("\nMutations:")
        for mutation in result.mutations:
            if mutation.type is not MutationType.MATCH:
                print(f"- {mutation.description}")

    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    sys.exit(main())

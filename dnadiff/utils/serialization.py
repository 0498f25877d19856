"""Serialization utilities for scoring configs (load and save) and results."""

from __future__ import annotations

from dataclasses import asdict, fields
from pathlib import Path
from typing import Any, Dict, List

import yaml

from dnadiff.types import AlignmentResult, Mutation, ScoringConfig
from dnadiff.types.mutation import Deletion, Insertion, Substitution


def scoring_to_dict(scoring: ScoringConfig) -> Dict[str, int]:
    """
    Convert a ScoringConfig into a plain dictionary suitable for YAML.
    """
    return asdict(scoring)


def save_scoring_config(scoring: ScoringConfig, yaml_path: Path) -> None:
    """Write a ScoringConfig to a YAML file under a top-level ``scoring`` key."""
    with yaml_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump({"scoring": scoring_to_dict(scoring)}, handle, sort_keys=False)


def load_scoring_config(yaml_path: Path) -> ScoringConfig:
    """Load a ScoringConfig from a YAML file; omitted keys keep their defaults."""
    with yaml_path.open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or {}

    if not isinstance(payload, dict):
        raise ValueError(
            f"scoring config must be a mapping, got {type(payload).__name__}"
        )

    scoring_dict = payload.get("scoring", payload)
    if not isinstance(scoring_dict, dict):
        raise ValueError(
            f"scoring section must be a mapping, got {type(scoring_dict).__name__}"
        )

    known = {field.name for field in fields(ScoringConfig)}
    unexpected = [key for key in scoring_dict if key not in known]
    if unexpected:
        raise ValueError(f"scoring config has unexpected keys: {unexpected}")

    return ScoringConfig(**scoring_dict)


def mutation_to_dict(mutation: Mutation) -> Dict[str, Any]:
    """Return the record for one column.

    ``from`` and ``to`` are present only for variants that carry them.
    """
    record: Dict[str, Any] = {
        "type": mutation.type.value,
        "position": mutation.position,
    }
    if isinstance(mutation, (Substitution, Deletion)):
        record["from"] = mutation.from_base
    if isinstance(mutation, (Substitution, Insertion)):
        record["to"] = mutation.to_base
    record["description"] = mutation.description
    return record


def result_to_dict(result: AlignmentResult) -> Dict[str, Any]:
    """
    Convert an AlignmentResult into the plain record consumed by front ends.
    """
    mutations: List[Dict[str, Any]] = [
        mutation_to_dict(mutation) for mutation in result.mutations
    ]
    return {
        "score": result.score,
        "alignedSeq1": result.aligned_seq1,
        "alignedSeq2": result.aligned_seq2,
        "similarity": result.similarity,
        "mutations": mutations,
    }


__all__ = [
    "scoring_to_dict",
    "save_scoring_config",
    "load_scoring_config",
    "mutation_to_dict",
    "result_to_dict",
]

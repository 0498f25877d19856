"""Unit tests for scoring config YAML handling and result records."""

from __future__ import annotations

import pytest

from dnadiff import compare_sequences
from dnadiff.types.parameters import DEFAULT_SCORING, ScoringConfig
from dnadiff.utils.serialization import (
    load_scoring_config,
    result_to_dict,
    save_scoring_config,
    scoring_to_dict,
)


def test_default_scoring_values():
    """Default scoring is +1 / -1 / -2."""
    assert DEFAULT_SCORING == ScoringConfig(match=1, mismatch=-1, gap=-2)
    assert scoring_to_dict(DEFAULT_SCORING) == {"match": 1, "mismatch": -1, "gap": -2}


@pytest.mark.parametrize("bad_value", [1.5, "2", None, True])
def test_scoring_config_requires_integers(bad_value):
    """Scores are signed integers only."""
    with pytest.raises(ValueError):
        ScoringConfig(match=bad_value)


def test_scoring_config_is_immutable():
    """A scoring config cannot be changed once built."""
    with pytest.raises(AttributeError):
        DEFAULT_SCORING.gap = -5


def test_load_scoring_config_nested_and_partial(tmp_path):
    """Keys may sit under 'scoring'; omitted keys fall back to the defaults."""
    path = tmp_path / "scoring.yaml"
    path.write_text("scoring:\n  match: 2\n  gap: -3\n", encoding="utf-8")

    assert load_scoring_config(path) == ScoringConfig(match=2, mismatch=-1, gap=-3)


def test_load_scoring_config_flat(tmp_path):
    """A flat mapping is accepted too."""
    path = tmp_path / "scoring.yaml"
    path.write_text("match: 3\nmismatch: -2\ngap: -4\n", encoding="utf-8")

    assert load_scoring_config(path) == ScoringConfig(match=3, mismatch=-2, gap=-4)


@pytest.mark.parametrize(
    "content",
    [
        "- 1\n- -1\n- -2\n",
        "scoring:\n  - match\n",
        "just a string\n",
    ],
)
def test_load_scoring_config_rejects_non_mapping(tmp_path, content):
    """A YAML document or scoring section that is not a mapping is a config error."""
    path = tmp_path / "scoring.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError):
        load_scoring_config(path)


def test_load_scoring_config_rejects_unknown_keys(tmp_path):
    """Unknown keys such as affine gap settings are refused."""
    path = tmp_path / "scoring.yaml"
    path.write_text("scoring:\n  gap_open: -5\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_scoring_config(path)


def test_save_then_load_scoring_config(tmp_path):
    """A saved config loads back unchanged."""
    path = tmp_path / "scoring.yaml"
    scoring = ScoringConfig(match=4, mismatch=-3, gap=-6)

    save_scoring_config(scoring, path)

    assert load_scoring_config(path) == scoring


def test_result_to_dict_shape():
    """The record carries from/to only for the variants that have them."""
    result = compare_sequences("ACGT", "AGGTT")
    record = result_to_dict(result)

    assert set(record) == {"score", "alignedSeq1", "alignedSeq2", "similarity", "mutations"}
    assert record["score"] == result.score
    assert record["alignedSeq1"] == result.aligned_seq1
    assert record["alignedSeq2"] == result.aligned_seq2
    assert record["similarity"] == result.similarity
    assert len(record["mutations"]) == len(result.mutations)

    for entry in record["mutations"]:
        if entry["type"] == "match":
            assert "from" not in entry and "to" not in entry
        elif entry["type"] == "substitution":
            assert "from" in entry and "to" in entry
        elif entry["type"] == "insertion":
            assert "from" not in entry and "to" in entry
        else:
            assert entry["type"] == "deletion"
            assert "from" in entry and "to" not in entry


def test_result_to_dict_mutation_entries():
    """Entries match the per-column records in order."""
    record = result_to_dict(compare_sequences("AA", "A"))

    assert record["mutations"] == [
        {
            "type": "deletion",
            "position": 1,
            "from": "A",
            "description": "Deletion at position 1: A deleted",
        },
        {
            "type": "match",
            "position": 2,
            "description": "Match at position 2: A",
        },
    ]

"""Sequence types and input validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from dnadiff.errors import InvalidSequence
from dnadiff.types.parameters import DNA_BASES, GAP, MAX_SEQUENCE_LENGTH


def validate_dna_sequence(raw: str, label: Optional[str] = None) -> str:
    """Validate raw user input and return it trimmed and uppercased.

    Raises InvalidSequence if the trimmed input is empty, contains anything
    other than A, T, C, G (case-insensitive), or exceeds MAX_SEQUENCE_LENGTH.
    """
    trimmed = raw.strip()
    if not trimmed:
        raise InvalidSequence("Sequence cannot be empty", label)

    normalized = trimmed.upper()
    if any(base not in DNA_BASES for base in normalized):
        raise InvalidSequence(
            "Sequence must contain only A, T, C, G characters", label
        )

    if len(normalized) > MAX_SEQUENCE_LENGTH:
        raise InvalidSequence(
            f"Sequence too long (max {MAX_SEQUENCE_LENGTH} characters)", label
        )

    return normalized


@dataclass(frozen=True)
class DNASequence:
    """DNA sequence with an identifier and optional description.

    Unaligned sequences hold only A, T, C, G; aligned sequences may also hold
    the gap marker. Residues are uppercased on construction.
    """

    identifier: str
    residues: str
    description: Optional[str] = None
    aligned: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "residues", self.residues.upper())
        self._validate()

    @classmethod
    def from_raw(
        cls,
        identifier: str,
        raw: str,
        description: Optional[str] = None,
    ) -> "DNASequence":
        """Build an unaligned sequence from raw input, raising InvalidSequence."""
        residues = validate_dna_sequence(raw, label=identifier)
        return cls(identifier=identifier, residues=residues, description=description)

    def __len__(self) -> int:
        return len(self.residues)

    def __str__(self) -> str:
        class_name = self.__class__.__name__
        return (
            f"{class_name} (\n"
            f"   id: {self.identifier} ({'aligned' if self.aligned else 'unaligned'})\n"
            f"   description: {self.description}\n"
            f"   residues: {self.residues}\n"
            f")"
        )

    def ungapped(self) -> str:
        """Return the residues with gap markers removed."""
        return self.residues.replace(GAP, "")

    def _validate(self) -> None:
        allowed = set(DNA_BASES)
        if self.aligned:
            allowed.add(GAP)
        elif not self.residues:
            raise ValueError("Unaligned sequence must contain at least one residue.")
        elif len(self.residues) > MAX_SEQUENCE_LENGTH:
            raise ValueError(
                f"Sequence {self.identifier!r} exceeds {MAX_SEQUENCE_LENGTH} residues."
            )

        invalid = {ch for ch in self.residues if ch not in allowed}
        if invalid:
            raise ValueError(
                f"Invalid DNA residues: {sorted(invalid)}; allowed: {sorted(allowed)}"
            )


__all__ = ["DNASequence", "validate_dna_sequence"]

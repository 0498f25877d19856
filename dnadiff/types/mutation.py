"""Per-column mutation events and their aggregate counts.

Each aligned column is tagged with exactly one of four variants. The
variants carry only the bases that make sense for them: an insertion has
no source base and a deletion has no destination base.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


class MutationType(str, Enum):
    """Tag naming the kind of event an aligned column represents."""

    MATCH = "match"
    SUBSTITUTION = "substitution"
    INSERTION = "insertion"
    DELETION = "deletion"


@dataclass(frozen=True)
class Match:
    """Both sequences carry the same base at this column."""

    type: ClassVar[MutationType] = MutationType.MATCH

    position: int
    base: str

    @property
    def description(self) -> str:
        return f"Match at position {self.position}: {self.base}"


@dataclass(frozen=True)
class Substitution:
    """The reference base is replaced by a different base."""

    type: ClassVar[MutationType] = MutationType.SUBSTITUTION

    position: int
    from_base: str
    to_base: str

    @property
    def description(self) -> str:
        return (
            f"Substitution at position {self.position}: "
            f"{self.from_base} → {self.to_base}"
        )


@dataclass(frozen=True)
class Insertion:
    """The second sequence has a base where the reference has a gap."""

    type: ClassVar[MutationType] = MutationType.INSERTION

    position: int
    to_base: str

    @property
    def description(self) -> str:
        return f"Insertion at position {self.position}: {self.to_base} inserted"


@dataclass(frozen=True)
class Deletion:
    """The reference has a base where the second sequence has a gap."""

    type: ClassVar[MutationType] = MutationType.DELETION

    position: int
    from_base: str

    @property
    def description(self) -> str:
        return f"Deletion at position {self.position}: {self.from_base} deleted"


Mutation = Union[Match, Substitution, Insertion, Deletion]


@dataclass(frozen=True)
class MutationStats:
    """Counts per mutation type over one alignment."""

    matches: int
    substitutions: int
    insertions: int
    deletions: int
    total: int
    similarity: float


__all__ = [
    "MutationType",
    "Match",
    "Substitution",
    "Insertion",
    "Deletion",
    "Mutation",
    "MutationStats",
]

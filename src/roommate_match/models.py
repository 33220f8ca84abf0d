"""Data models for roommate_match."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Tuple


def split_fields(line: str, delimiter: str = ",") -> List[str]:
    """Split a delimited line into trimmed fields.

    Empty fields are kept so the caller can tell a missing name
    (``",bob"``) from a missing preference (``"alice,,bob"``).
    """
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    return [part.strip() for part in line.split(delimiter)]


@dataclass(frozen=True)
class PersonRecord:
    """One person and their ordered roommate preferences."""

    name: str
    preferences: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any sequence but store a tuple so the record stays hashable.
        object.__setattr__(self, "preferences", tuple(self.preferences))

    def choice(self, index: int) -> Optional[str]:
        if 0 <= index < len(self.preferences):
            return self.preferences[index]
        return None

    @property
    def first_choice(self) -> Optional[str]:
        return self.choice(0)


@dataclass(frozen=True, eq=False)
class Assignment:
    """Two people matched as roommates.

    ``first`` is the person whose turn produced the match. Equality ignores
    the order so ``Assignment("a", "b") == Assignment("b", "a")``.
    """

    first: str
    second: str

    def __post_init__(self) -> None:
        if self.first == self.second:
            raise ValueError(f"Cannot pair {self.first!r} with themself")

    @property
    def names(self) -> FrozenSet[str]:
        return frozenset((self.first, self.second))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Assignment):
            return NotImplemented
        return self.names == other.names

    def __hash__(self) -> int:
        return hash(self.names)

    def __iter__(self):
        yield self.first
        yield self.second

    def __str__(self) -> str:
        return f"{self.first} & {self.second}"


@dataclass(frozen=True)
class MatchOutcome:
    """Final result: matched pairs in discovery order and the leftovers."""

    matches: Tuple[Assignment, ...] = ()
    unmatched: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "matches", tuple(self.matches))
        object.__setattr__(self, "unmatched", frozenset(self.unmatched))

    def matched_names(self) -> FrozenSet[str]:
        names = set()
        for pair in self.matches:
            names.update(pair.names)
        return frozenset(names)

    def all_names(self) -> FrozenSet[str]:
        return self.matched_names() | self.unmatched

    def partners(self) -> Dict[str, str]:
        """Map each matched name to their roommate."""
        partner_by_name: Dict[str, str] = {}
        for pair in self.matches:
            partner_by_name[pair.first] = pair.second
            partner_by_name[pair.second] = pair.first
        return partner_by_name

    def partner_of(self, name: str) -> Optional[str]:
        """Return who ``name`` was paired with, or ``None``."""
        return self.partners().get(name)

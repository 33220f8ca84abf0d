"""Exceptions raised while loading, validating and matching people."""
from __future__ import annotations

from typing import List, Sequence


class RoommateMatchError(Exception):
    """Base class for every error raised by roommate_match."""


class InputError(RoommateMatchError, ValueError):
    """The input data is unusable. Raised before any matching happens."""


class UnreadableInput(InputError):
    """The input file exists but its bytes are not text we can read."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"cannot read {source}: {reason}")


class MalformedLine(InputError):
    """A single input line could not be turned into a person."""

    def __init__(self, line: str, reason: str) -> None:
        self.line = line
        self.reason = reason
        super().__init__(f"Invalid line: {reason}. Line: {line!r}")


class ParseErrors(InputError):
    """Several malformed lines, collected instead of stopping at the first."""

    def __init__(self, errors: Sequence[MalformedLine]) -> None:
        self.errors: List[MalformedLine] = list(errors)
        details = "; ".join(str(e) for e in self.errors)
        super().__init__(f"{len(self.errors)} invalid line(s): {details}")


class NoData(InputError):
    def __init__(self) -> None:
        super().__init__("Input contains no people")


class InvalidName(InputError):
    """A record whose name is blank or carries surrounding whitespace."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid person name {name!r}: names must be non-empty and trimmed")


class DuplicatePerson(InputError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Duplicate person with name {name!r}")


class SelfChoice(InputError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Person {name!r} chose themself as a preference")


class ChoseMissingPerson(InputError):
    def __init__(self, person: str, missing: str) -> None:
        self.person = person
        self.missing = missing
        super().__init__(f"Person {person!r} chose {missing!r} who does not exist")


class MatchError(RoommateMatchError):
    """A matching rule could not complete. Aborts the whole run."""

"""The validated set of people still waiting for a roommate."""
from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional

from .errors import ChoseMissingPerson, DuplicatePerson, InvalidName, MatchError, NoData, SelfChoice
from .models import Assignment, PersonRecord

logger = logging.getLogger(__name__)


class UnmatchedPeople:
    """People not yet paired, indexed by name.

    Instances come from :func:`build_people`, which guarantees that every
    name is unique and every preference refers to someone in the set. The
    only mutation afterwards is removal.
    """

    def __init__(self, person_by_name: Dict[str, PersonRecord]) -> None:
        self._person_by_name = person_by_name

    def __len__(self) -> int:
        return len(self._person_by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._person_by_name

    def __repr__(self) -> str:
        return f"UnmatchedPeople({sorted(self._person_by_name)!r})"

    def get(self, name: str) -> Optional[PersonRecord]:
        return self._person_by_name.get(name)

    def names(self) -> FrozenSet[str]:
        return frozenset(self._person_by_name)

    def remove(self, name: str) -> None:
        """Remove ``name``. Removing someone already gone does nothing."""
        self._person_by_name.pop(name, None)

    def claim_pair(self, first: str, second: str) -> Assignment:
        """Remove both people and return their assignment.

        Either both are removed or, if one of them is missing, neither is.
        """
        if first == second:
            raise MatchError(f"Cannot pair {first!r} with themself")
        missing = [n for n in (first, second) if n not in self._person_by_name]
        if missing:
            raise MatchError(f"Cannot pair {first!r} and {second!r}: {', '.join(missing)} already matched")
        del self._person_by_name[first]
        del self._person_by_name[second]
        return Assignment(first, second)

    def snapshot(self) -> Iterator[PersonRecord]:
        """Iterate over the people present when this is called.

        The records are copied up front, so the set may shrink while the
        iterator is consumed. Removed people are still yielded; check with
        :meth:`get` before acting on them.
        """
        return iter(list(self._person_by_name.values()))

    def drain(self) -> FrozenSet[str]:
        """Empty the set and return the names that were left."""
        names = frozenset(self._person_by_name)
        self._person_by_name.clear()
        return names


def _index_people(records: List[PersonRecord]) -> Dict[str, PersonRecord]:
    person_by_name: Dict[str, PersonRecord] = {}
    for person in records:
        if not person.name or person.name != person.name.strip():
            raise InvalidName(person.name)
        if person.name in person_by_name:
            raise DuplicatePerson(person.name)
        person_by_name[person.name] = person
    return person_by_name


def _check_preferences(person_by_name: Dict[str, PersonRecord]) -> None:
    for person in person_by_name.values():
        for choice in person.preferences:
            if choice == person.name:
                raise SelfChoice(person.name)
            if choice not in person_by_name:
                raise ChoseMissingPerson(person.name, choice)


def build_people(records: Iterable[PersonRecord]) -> UnmatchedPeople:
    """Validate a batch of records and index them by name.

    Checks run in order and stop at the first failure: an empty batch
    raises :class:`NoData`, a blank or untrimmed name :class:`InvalidName`,
    a repeated name :class:`DuplicatePerson`, then
    each preference is checked for :class:`SelfChoice` and
    :class:`ChoseMissingPerson`. Nothing is returned unless every check
    passes.
    """
    records = list(records)
    if not records:
        raise NoData()
    person_by_name = _index_people(records)
    _check_preferences(person_by_name)
    logger.info("Validated %d people", len(person_by_name))
    return UnmatchedPeople(person_by_name)

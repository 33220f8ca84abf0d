"""
Rule based roommate matcher.

Matching runs an ordered list of rules over the people still unmatched.
Each rule pairs whoever it can and removes them from the set; the next rule
only sees the residue. Whoever is left after the last rule is unmatched.

Rules currently shipped:
    mutual first choice: A's first choice is B and B's first choice is A.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Sequence

from .csv_loader import parse_lines
from .models import Assignment, MatchOutcome, PersonRecord
from .people import UnmatchedPeople, build_people

logger = logging.getLogger(__name__)


# ----------------------------- rules -----------------------------
class MatchRule(ABC):
    """One matching strategy.

    ``apply`` pairs people from ``people``, removes them, and returns the new
    assignments in the order found. Raise :class:`~roommate_match.errors.MatchError`
    to abort the whole run.
    """

    name = "rule"

    @abstractmethod
    def apply(self, people: UnmatchedPeople) -> List[Assignment]:
        raise NotImplementedError


class MutualFirstChoiceRule(MatchRule):
    """Pair people who picked each other as first choice."""

    name = "mutual first choice"

    def apply(self, people: UnmatchedPeople) -> List[Assignment]:
        matches: List[Assignment] = []
        for person in people.snapshot():
            # Already paired earlier in this pass.
            if person.name not in people:
                continue
            choice_name = person.first_choice
            if choice_name is None:
                continue
            choice = people.get(choice_name)
            if choice is None or choice.first_choice != person.name:
                continue
            pair = people.claim_pair(person.name, choice_name)
            logger.debug("Matched %s", pair)
            matches.append(pair)
        return matches


DEFAULT_RULES: Sequence[MatchRule] = (MutualFirstChoiceRule(),)


# ----------------------------- matcher -----------------------------
class RoommateMatcher:
    """Apply matching rules in priority order and collect the outcome."""

    def __init__(self, rules: Optional[Sequence[MatchRule]] = None) -> None:
        self.rules: List[MatchRule] = list(DEFAULT_RULES if rules is None else rules)

    def run(self, people: UnmatchedPeople) -> MatchOutcome:
        """Match ``people`` and drain whoever is left.

        ``people`` is consumed: it is empty when this returns. A rule error
        propagates and no outcome is produced.
        """
        total = len(people)
        matches: List[Assignment] = []
        for rule in self.rules:
            if not people:
                break
            found = rule.apply(people)
            logger.info("Rule '%s' matched %d pair(s)", rule.name, len(found))
            matches.extend(found)
        unmatched = people.drain()
        logger.info("Matched %d of %d people, %d unmatched", 2 * len(matches), total, len(unmatched))
        return MatchOutcome(matches=tuple(matches), unmatched=unmatched)


def match_roommates(
    records: Iterable[PersonRecord], rules: Optional[Sequence[MatchRule]] = None
) -> MatchOutcome:
    """Validate ``records`` and match them."""
    return RoommateMatcher(rules).run(build_people(records))


def match_roommates_from_lines(
    lines: Iterable[str],
    delimiter: str = ",",
    collect_errors: bool = False,
    skip_blank: bool = False,
    rules: Optional[Sequence[MatchRule]] = None,
) -> MatchOutcome:
    """Parse raw lines, validate them and match. Stops at the first error."""
    records = parse_lines(lines, delimiter=delimiter, collect_errors=collect_errors, skip_blank=skip_blank)
    return match_roommates(records, rules)

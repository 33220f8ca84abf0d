"""roommate_match package."""
from .models import Assignment, MatchOutcome, PersonRecord
from .errors import (
    ChoseMissingPerson,
    DuplicatePerson,
    InputError,
    InvalidName,
    MalformedLine,
    MatchError,
    NoData,
    ParseErrors,
    RoommateMatchError,
    SelfChoice,
    UnreadableInput,
)
from .csv_loader import load_people, parse_line, parse_lines, read_lines
from .people import UnmatchedPeople, build_people
from .solver import (
    MatchRule,
    MutualFirstChoiceRule,
    RoommateMatcher,
    match_roommates,
    match_roommates_from_lines,
)
from .report import render_outcome

__all__ = [
    "Assignment",
    "MatchOutcome",
    "PersonRecord",
    "ChoseMissingPerson",
    "DuplicatePerson",
    "InputError",
    "InvalidName",
    "MalformedLine",
    "MatchError",
    "NoData",
    "ParseErrors",
    "RoommateMatchError",
    "SelfChoice",
    "UnreadableInput",
    "load_people",
    "parse_line",
    "parse_lines",
    "read_lines",
    "UnmatchedPeople",
    "build_people",
    "MatchRule",
    "MutualFirstChoiceRule",
    "RoommateMatcher",
    "match_roommates",
    "match_roommates_from_lines",
    "render_outcome",
]

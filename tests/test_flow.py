import pathlib

from roommate_match import csv_loader, solver
from roommate_match.models import Assignment
from roommate_match.report import render_outcome


def test_full_flow():
    data_dir = pathlib.Path(__file__).parent / "data"
    people = csv_loader.load_people(data_dir / "preferences.csv")

    outcome = solver.match_roommates(people)

    # every person is either matched or unmatched, never both
    names = {p.name for p in people}
    assert outcome.matched_names() | outcome.unmatched == names
    assert not outcome.matched_names() & outcome.unmatched

    # mutual first choices are paired exactly once
    assert sorted(outcome.matches, key=lambda a: min(a.names)) == [
        Assignment("alice", "bob"),
        Assignment("carol", "dave"),
    ]
    assert outcome.unmatched == {"erin", "frank", "gina"}

    report = render_outcome(outcome)
    assert report.startswith("-- Matches --\n")
    assert report.endswith("-- Unmatched --\nerin\nfrank\ngina\n")

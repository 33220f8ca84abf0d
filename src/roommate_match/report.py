"""Rendering and exporting a :class:`MatchOutcome`."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, List

import pandas as pd

from .models import MatchOutcome

MATCHES_HEADER = "-- Matches --"
UNMATCHED_HEADER = "-- Unmatched --"


def render_outcome(outcome: MatchOutcome) -> str:
    """Return the two section text report.

    Pairs keep the order the matcher found them in; unmatched names are
    sorted so the same input always prints the same way.
    """
    lines: List[str] = [MATCHES_HEADER]
    lines.extend(str(pair) for pair in outcome.matches)
    lines.append("")
    lines.append(UNMATCHED_HEADER)
    lines.extend(sorted(outcome.unmatched))
    return "\n".join(lines) + "\n"


def matches_frame(outcome: MatchOutcome) -> pd.DataFrame:
    return pd.DataFrame(
        [(pair.first, pair.second) for pair in outcome.matches],
        columns=["first", "second"],
    )


def unmatched_frame(outcome: MatchOutcome) -> pd.DataFrame:
    return pd.DataFrame({"name": sorted(outcome.unmatched)}, columns=["name"])


def summarize(outcome: MatchOutcome) -> Dict[str, int]:
    """Counts for a quick summary line."""
    matched = len(outcome.matched_names())
    return {
        "people": matched + len(outcome.unmatched),
        "matched_pairs": len(outcome.matches),
        "matched_people": matched,
        "unmatched": len(outcome.unmatched),
    }


def _write_frame(df: pd.DataFrame, path: Path | str) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)


def write_matches_csv(outcome: MatchOutcome, path: Path | str) -> None:
    """Write ``first,second`` rows, one per pair."""
    _write_frame(matches_frame(outcome), path)


def write_unmatched_csv(outcome: MatchOutcome, path: Path | str) -> None:
    """Write a ``name`` column with every unmatched person."""
    _write_frame(unmatched_frame(outcome), path)

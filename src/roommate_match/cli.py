"""Command line interface for roommate_match."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .csv_loader import load_people
from .errors import RoommateMatchError
from .report import render_outcome, summarize, write_matches_csv, write_unmatched_csv
from .solver import match_roommates

logger = logging.getLogger(__name__)


def _delimiter(value: str) -> str:
    if not value:
        raise argparse.ArgumentTypeError("delimiter must not be empty")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roommate-match",
        description="Pair up roommates who picked each other as first choice",
    )
    parser.add_argument("preferences", type=Path,
                        help="Path to a preferences file, one 'name,choice1,choice2,...' per line.")
    parser.add_argument("--delimiter", default=",", type=_delimiter,
                        help="Field separator used in the preferences file.")
    parser.add_argument("--collect-errors", action="store_true",
                        help="Report every malformed line instead of stopping at the first.")
    parser.add_argument("--skip-blank", action="store_true",
                        help="Ignore blank lines instead of rejecting them.")
    parser.add_argument("--out-matches", type=Path,
                        help="Write matches CSV: first,second.")
    parser.add_argument("--out-unmatched", type=Path,
                        help="Write unmatched CSV: name.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point used by ``roommate-match`` and ``python -m roommate_match``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        people = load_people(
            args.preferences,
            delimiter=args.delimiter,
            collect_errors=args.collect_errors,
            skip_blank=args.skip_blank,
        )
        outcome = match_roommates(people)
    except OSError as e:
        print(f"error: cannot read {args.preferences}: {e}", file=sys.stderr)
        return 1
    except RoommateMatchError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(render_outcome(outcome))

    # Optional outputs
    if args.out_matches:
        write_matches_csv(outcome, args.out_matches)
    if args.out_unmatched:
        write_unmatched_csv(outcome, args.out_unmatched)

    counts = summarize(outcome)
    logger.info(
        "[REPORT] people=%d pairs=%d unmatched=%d",
        counts["people"], counts["matched_pairs"], counts["unmatched"],
    )
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())

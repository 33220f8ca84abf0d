import pathlib

import pytest

from roommate_match.cli import build_parser, main

DATA_DIR = pathlib.Path(__file__).parent / "data"


def test_parser_defaults():
    args = build_parser().parse_args(["prefs.csv"])
    assert args.preferences == pathlib.Path("prefs.csv")
    assert args.delimiter == ","
    assert not args.collect_errors
    assert not args.skip_blank
    assert args.out_matches is None


def test_main_prints_report(capsys):
    assert main([str(DATA_DIR / "preferences.csv")]) == 0
    out = capsys.readouterr().out
    assert out.startswith("-- Matches --\n")
    assert ("alice & bob" in out) or ("bob & alice" in out)
    assert out.endswith("-- Unmatched --\nerin\nfrank\ngina\n")


def test_main_writes_csv(tmp_path):
    matches = tmp_path / "matches.csv"
    unmatched = tmp_path / "unmatched.csv"
    code = main([
        str(DATA_DIR / "preferences.csv"),
        "--out-matches", str(matches),
        "--out-unmatched", str(unmatched),
    ])
    assert code == 0
    assert matches.read_text().splitlines()[0] == "first,second"
    assert len(matches.read_text().splitlines()) == 3
    assert unmatched.read_text().splitlines() == ["name", "erin", "frank", "gina"]


def test_main_reports_input_error(tmp_path, capsys):
    prefs = tmp_path / "prefs.csv"
    prefs.write_text("alice,bob\n")
    assert main([str(prefs)]) == 1
    err = capsys.readouterr().err
    assert "error:" in err and "'bob'" in err


def test_main_collects_line_errors(tmp_path, capsys):
    prefs = tmp_path / "prefs.csv"
    prefs.write_text(",x\nalice\n , \n")
    assert main([str(prefs), "--collect-errors"]) == 1
    assert "2 invalid line(s)" in capsys.readouterr().err


def test_main_rejects_invalid_utf8(tmp_path, capsys):
    prefs = tmp_path / "prefs.csv"
    prefs.write_bytes(b"al\xffice,bob\nbob,alice\n")
    assert main([str(prefs)]) == 1
    err = capsys.readouterr().err
    assert "error: cannot read" in err and "UTF-8" in err


def test_parser_rejects_empty_delimiter(capsys):
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["prefs.csv", "--delimiter", ""])
    assert exc.value.code == 2
    assert "delimiter must not be empty" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.csv")]) == 1
    assert "cannot read" in capsys.readouterr().err

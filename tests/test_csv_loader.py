import io
import pathlib

import pytest

from roommate_match.csv_loader import load_people, parse_line, parse_lines, read_lines, split_lines
from roommate_match.solver import match_roommates
from roommate_match.errors import ChoseMissingPerson, InputError, MalformedLine, ParseErrors, UnreadableInput
from roommate_match.models import PersonRecord

DATA_DIR = pathlib.Path(__file__).parent / "data"


@pytest.mark.parametrize(
    "line, expected",
    [
        ("1a,1b,1c,1d", PersonRecord("1a", ("1b", "1c", "1d"))),
        ("2a,2b,2c,2d,", PersonRecord("2a", ("2b", "2c", "2d"))),
        ("3a,,,", PersonRecord("3a")),
        ("4a,", PersonRecord("4a")),
        ("5a", PersonRecord("5a")),
        (" 6a ", PersonRecord("6a")),
        (" 7a, ", PersonRecord("7a")),
        (" 8a, 8b ", PersonRecord("8a", ("8b",))),
        ("a,,,b", PersonRecord("a", ("b",))),
        ("a,b\r\n", PersonRecord("a", ("b",))),
    ],
)
def test_parse_line_ok(line, expected):
    assert parse_line(line) == expected


@pytest.mark.parametrize("line", ["", " ", ",", " , ", ",name"])
def test_parse_line_rejects_missing_name(line):
    with pytest.raises(MalformedLine) as exc:
        parse_line(line)
    assert exc.value.line == line
    assert exc.value.reason


def test_malformed_line_is_a_value_error():
    with pytest.raises(ValueError):
        parse_line(",bob")


def test_parse_line_custom_delimiter():
    assert parse_line("alice; bob;carol", delimiter=";") == PersonRecord("alice", ("bob", "carol"))


def test_parse_lines_fails_fast():
    with pytest.raises(MalformedLine) as exc:
        parse_lines(["alice,bob", ",x", ""])
    assert exc.value.line == ",x"


def test_parse_lines_collects_all_errors():
    with pytest.raises(ParseErrors) as exc:
        parse_lines(["alice,bob", ",x", "bob", " "], collect_errors=True)
    assert [e.line for e in exc.value.errors] == [",x", " "]
    assert isinstance(exc.value, InputError)


def test_parse_lines_skip_blank():
    people = parse_lines(["alice,bob", "", "bob,alice", "   "], skip_blank=True)
    assert [p.name for p in people] == ["alice", "bob"]


def test_parse_lines_empty_input():
    assert parse_lines([]) == []


def test_read_lines_from_path_and_streams(tmp_path):
    path = tmp_path / "prefs.csv"
    path.write_text("alice,bob\nbob,alice\n", encoding="utf-8")
    assert read_lines(path) == ["alice,bob", "bob,alice"]
    assert read_lines(str(path)) == ["alice,bob", "bob,alice"]
    assert read_lines(io.StringIO("a\nb")) == ["a", "b"]
    assert read_lines(io.BytesIO("\ufeffa,b\r\nb,a\r\n".encode("utf-8"))) == ["a,b", "b,a"]


def test_load_people_from_data_file():
    people = load_people(DATA_DIR / "preferences.csv")
    by_name = {p.name: p for p in people}
    assert len(people) == 7
    assert by_name["carol"].preferences == ("dave", "erin")
    assert by_name["dave"].preferences == ("carol", "bob")
    assert by_name["frank"].preferences == ()


def test_split_lines_only_breaks_on_newline():
    assert split_lines("a,b\x1cx\nb\x0ca\r\nc d\n") == ["a,b\x1cx", "b\x0ca", "c d"]
    assert split_lines("") == []
    assert split_lines("a\n\nb") == ["a", "", "b"]


def test_separator_characters_stay_inside_a_line(tmp_path):
    path = tmp_path / "prefs.csv"
    path.write_bytes("alice,bob\x1cx\nbob,alice\n".encode("utf-8"))
    people = load_people(path)
    assert [p.name for p in people] == ["alice", "bob"]
    assert people[0].preferences == ("bob\x1cx",)
    with pytest.raises(ChoseMissingPerson) as exc:
        match_roommates(people)
    assert exc.value.missing == "bob\x1cx"


def test_read_lines_rejects_invalid_utf8(tmp_path):
    path = tmp_path / "prefs.csv"
    path.write_bytes(b"al\xffice,bob\nbob,alice\n")
    with pytest.raises(UnreadableInput) as exc:
        read_lines(path)
    assert exc.value.source == str(path)
    assert isinstance(exc.value, InputError)
    with pytest.raises(UnreadableInput):
        read_lines(io.BytesIO(b"\xff\xfe"))

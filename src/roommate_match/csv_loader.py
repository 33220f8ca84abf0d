"""Loading roommate preferences from delimited text.

Each line has the shape ``name[,preference]*``. There is no header row and
no quoting, so lines are split by hand rather than through a CSV reader.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Iterable, List

from .errors import MalformedLine, ParseErrors, UnreadableInput
from .models import PersonRecord, split_fields

logger = logging.getLogger(__name__)


def parse_line(line: str, delimiter: str = ",") -> PersonRecord:
    """Parse one line into a :class:`PersonRecord`.

    The first field is the name and must not be blank. Later fields are
    preferences in order; empty ones are dropped, so ``"a,,,b"`` gives
    ``("b",)`` and ``"a,,,"`` gives no preferences at all.
    """
    raw = line.rstrip("\r\n")
    name, *rest = split_fields(raw, delimiter)
    if not name:
        reason = "empty line" if not raw.strip() else "missing name"
        raise MalformedLine(line, reason)
    preferences = tuple(value for value in rest if value)
    return PersonRecord(name=name, preferences=preferences)


def parse_lines(
    lines: Iterable[str],
    delimiter: str = ",",
    collect_errors: bool = False,
    skip_blank: bool = False,
) -> List[PersonRecord]:
    """Parse every line, stopping at the first bad one.

    With ``collect_errors`` every line is parsed and all failures are raised
    together as :class:`ParseErrors`.
    """
    people: List[PersonRecord] = []
    errors: List[MalformedLine] = []
    for line in lines:
        if skip_blank and not line.strip():
            continue
        try:
            people.append(parse_line(line, delimiter))
        except MalformedLine as exc:
            if not collect_errors:
                raise
            errors.append(exc)
    if errors:
        raise ParseErrors(errors)
    logger.debug("Parsed %d people", len(people))
    return people


def split_lines(text: str) -> List[str]:
    """Split text on ``\\n`` only, dropping a trailing ``\\r`` from each line.

    Unlike ``str.splitlines``, form feeds, ``\\x1c``-``\\x1e`` and unicode
    separators stay inside the line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _decode(data: bytes, source: str) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise UnreadableInput(source, f"not valid UTF-8 (byte {exc.start})") from exc


def read_lines(source: Path | str | IO[Any]) -> List[str]:
    """Read raw lines from a path or an open file.

    Files and binary streams (such as a Streamlit upload) are decoded as
    UTF-8; anything else raises :class:`UnreadableInput`.
    """
    if hasattr(source, "read"):
        data = source.read()
        if isinstance(data, bytes):
            data = _decode(data, getattr(source, "name", "<stream>"))
    else:
        data = _decode(Path(source).read_bytes(), str(source))
    lines = split_lines(data)
    logger.info("Read %d lines", len(lines))
    return lines


def load_people(
    source: Path | str | IO[Any],
    delimiter: str = ",",
    collect_errors: bool = False,
    skip_blank: bool = False,
) -> List[PersonRecord]:
    """Convenience wrapper reading ``source`` and parsing every line."""
    return parse_lines(
        read_lines(source),
        delimiter=delimiter,
        collect_errors=collect_errors,
        skip_blank=skip_blank,
    )

"""Line-oriented text import and report export.

Import is all-or-nothing: the first malformed line aborts the whole read
with an error naming its 1-based line number.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, TypeVar

from ems.domain.model.grading import Student
from ems.domain.validation import parse_int, require_fields

V = TypeVar("V")

LineParser = Callable[[list[str], int], V]

STUDENT_FIELDS = ("Id", "FullName", "Score")


def read_records(
    lines: Iterable[str],
    parse_line: LineParser,
    delimiter: str = ",",
) -> list:
    records = []
    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        parts = line.rstrip("\r\n").split(delimiter)
        records.append(parse_line(parts, line_no))
    return records


def read_file(path: Path, parse_line: LineParser, delimiter: str = ",") -> list:
    with path.open(encoding="utf-8") as fh:
        return read_records(fh, parse_line, delimiter)


def write_lines(path: Path, lines: Iterable[object]) -> None:
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")


# --- Record parsers -----------------------------------------------------------


def parse_student(parts: list[str], line_no: int) -> Student:
    """Build a Student from ``Id,FullName,Score``."""
    require_fields(parts, len(STUDENT_FIELDS), line_no, STUDENT_FIELDS)
    return Student(
        id=parse_int(parts[0], "Id", line_no),
        full_name=parts[1].strip(),
        score=parse_int(parts[2], "Score", line_no),
    )

"""Tests for delimited-text import and report export."""

import pytest

from ems.domain.exceptions import InvalidFormatError, MissingFieldError
from ems.domain.model.grading import Student
from ems.infrastructure.persistence.delimited import (
    parse_student,
    read_file,
    read_records,
    write_lines,
)


class TestReadRecords:

    def test_parses_in_file_order(self):
        lines = ["3,Kofi Boateng,72\n", "1, Ama Owusu ,85\n"]
        students = read_records(lines, parse_student)
        assert students == [Student(3, "Kofi Boateng", 72), Student(1, "Ama Owusu", 85)]

    def test_blank_lines_skipped_but_counted(self):
        lines = ["1,Ama,85", "", "   ", "2,Kofi"]
        with pytest.raises(MissingFieldError) as info:
            read_records(lines, parse_student)
        assert info.value.line_no == 4

    def test_too_few_fields(self):
        with pytest.raises(MissingFieldError, match="Line 1: expected 3 fields") as info:
            read_records(["1,Ann"], parse_student)
        assert (info.value.expected, info.value.actual) == (3, 2)

    def test_bad_score(self):
        with pytest.raises(InvalidFormatError, match="Line 2: invalid Score format 'ninety'"):
            read_records(["1,Ann,80", "2,Bo,ninety"], parse_student)

    def test_bad_id(self):
        with pytest.raises(InvalidFormatError, match="invalid Id format"):
            read_records(["x1,Ann,80"], parse_student)

    def test_custom_delimiter(self):
        students = read_records(["1;Ann;80"], parse_student, delimiter=";")
        assert students == [Student(1, "Ann", 80)]


class TestFiles:

    def test_read_file(self, tmp_path):
        path = tmp_path / "students.csv"
        path.write_text("1,Ann,80\r\n\r\n2,Bo,40\r\n", encoding="utf-8")
        assert [s.id for s in read_file(path, parse_student)] == [1, 2]

    def test_missing_file_raises_os_error(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_file(tmp_path / "nope.csv", parse_student)

    def test_write_lines(self, tmp_path):
        path = tmp_path / "report.txt"
        write_lines(path, [Student(1, "Ann", 80), Student(2, "Bo", 40)])
        assert path.read_text(encoding="utf-8") == (
            "Ann (ID: 1): Score = 80, Grade = A\n"
            "Bo (ID: 2): Score = 40, Grade = F\n"
        )

"""Application service: student results.

Reading the import file and writing the report are infrastructure
concerns; this service only sees already-parsed students.
"""

from __future__ import annotations

import logging
from typing import Iterable

from ems.domain.model.grading import Student
from ems.domain.store import EntityStore

logger = logging.getLogger(__name__)


class GradingService:

    def __init__(self, students: EntityStore[int, Student]) -> None:
        self._students = students

    def add_student(self, student: Student) -> None:
        self._students.add(student)

    def list_students(self) -> list[Student]:
        return self._students.list_all()

    def import_students(self, students: Iterable[Student]) -> int:
        """Add a parsed batch; if any student is rejected none are added."""
        count = self._students.insert_many(students)
        logger.info("imported %d students", count)
        return count

    def report_lines(self) -> list[str]:
        return [str(student) for student in self._students.list_all()]

"""Student results and letter grades."""

from __future__ import annotations

from dataclasses import dataclass

# Lower bound (inclusive) of each letter grade, highest first.
GRADE_BANDS: tuple[tuple[int, str], ...] = (
    (80, "A"),
    (70, "B"),
    (60, "C"),
    (50, "D"),
)


@dataclass(frozen=True)
class Student:
    id: int
    full_name: str
    score: int

    @property
    def grade(self) -> str:
        for lower, letter in GRADE_BANDS:
            if self.score >= lower:
                return letter
        return "F"

    def __str__(self) -> str:
        return (
            f"{self.full_name} (ID: {self.id}): "
            f"Score = {self.score}, Grade = {self.grade}"
        )

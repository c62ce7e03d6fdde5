"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a list. No file I/O, no side effects.
"""

from __future__ import annotations

from typing import Sequence

from ems.domain.repository.snapshot_repository import SnapshotRepository


class FakeSnapshotRepository(SnapshotRepository):

    def __init__(self, values: list | None = None) -> None:
        self.saved: list | None = list(values) if values is not None else None
        self.save_calls = 0

    @property
    def location(self) -> str:
        return "memory"

    def load(self) -> list:
        return list(self.saved or [])

    def save(self, values: Sequence) -> None:
        self.saved = list(values)
        self.save_calls += 1

"""Abstract snapshot repository.

Defined in the domain layer so the domain never depends on
infrastructure. A snapshot is the full content of one store: ``save``
writes all of it and ``load`` returns all of it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Sequence, TypeVar

V = TypeVar("V")


class SnapshotRepository(ABC, Generic[V]):

    @abstractmethod
    def load(self) -> list[V]:
        """Return every persisted record, or an empty list if none exist."""

    @abstractmethod
    def save(self, values: Sequence[V]) -> None:
        """Persist *values*, replacing the previous snapshot entirely."""

    @property
    @abstractmethod
    def location(self) -> str:
        """Where snapshots are kept, for display."""

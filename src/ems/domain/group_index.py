"""GroupIndex — a derived grouping of one store's values by a foreign key.

The index is a view, never a source of truth. It is recomputed in full by
``rebuild`` and is otherwise left alone: removing a value from the source
store does not remove it from an index built earlier. Callers rebuild after
the mutations they care about.
"""

from __future__ import annotations

from typing import Callable, Generic, Hashable, Iterable, TypeVar

FK = TypeVar("FK", bound=Hashable)
V = TypeVar("V")


class GroupIndex(Generic[FK, V]):

    def __init__(self) -> None:
        self._groups: dict[FK, list[V]] = {}

    def rebuild(self, source: Iterable[V], key_of: Callable[[V], FK]) -> None:
        """Regroup *source* by ``key_of``, keeping source order in each group."""
        groups: dict[FK, list[V]] = {}
        for value in source:
            groups.setdefault(key_of(value), []).append(value)
        self._groups = groups

    def lookup(self, foreign_key: FK) -> list[V]:
        """Return a copy of the group, or an empty list for an unseen key."""
        return list(self._groups.get(foreign_key, ()))

    def keys(self) -> list[FK]:
        return list(self._groups)

    def __contains__(self, foreign_key: object) -> bool:
        return foreign_key in self._groups

    def __len__(self) -> int:
        return len(self._groups)

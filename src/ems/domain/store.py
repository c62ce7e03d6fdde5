"""EntityStore — an in-memory, insertion-ordered collection keyed by ID.

One store is created per entity kind (electronics, groceries, patients,
prescriptions, students, inventory items, transactions). The store owns
the uniqueness invariant: at most one value per key, enforced inside every
operation regardless of how the caller handles failures.

Values are frozen dataclasses, so handing one out never exposes a mutable
alias of store state. Mutation goes through ``update`` which swaps in a
new value after the validation rules accept it.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Callable, Generic, Hashable, Iterable, Iterator, Sequence, TypeVar

from ems.domain.capabilities import HasIdentity
from ems.domain.exceptions import (
    DuplicateKeyError,
    EntityNotFoundError,
    InvalidValueError,
)
from ems.domain.validation import Rule

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class EntityStore(Generic[K, V]):
    """Unique-key, insertion-ordered store.

    Invariants:
    - at most one value per key
    - every stored value has passed all ``rules``
    - a value exposing ``id`` is stored under that same key
    """

    def __init__(self, entity: str = "Entity", rules: Sequence[Rule] = ()) -> None:
        self.entity = entity
        self._rules = tuple(rules)
        self._items: OrderedDict[K, V] = OrderedDict()

    # --- Commands -------------------------------------------------------------

    def insert(self, key: K, value: V) -> None:
        """Add *value* under *key* at the end of insertion order.

        Raises DuplicateKeyError if the key is taken and InvalidValueError
        if a rule rejects the value. Nothing changes on failure.
        """
        if key in self._items:
            raise DuplicateKeyError(key, self.entity)
        self._check(key, value)
        self._items[key] = value
        logger.debug("%s %s inserted", self.entity, key)

    def add(self, value: V) -> None:
        """Insert a value under its own ``id``."""
        if not isinstance(value, HasIdentity):
            raise InvalidValueError(f"{self.entity} has no ID to key it by.")
        self.insert(value.id, value)

    def insert_many(self, values: Iterable[V]) -> int:
        """Insert a batch keyed by each value's ``id``, all or nothing."""
        staged: OrderedDict[K, V] = OrderedDict()
        for value in values:
            if not isinstance(value, HasIdentity):
                raise InvalidValueError(f"{self.entity} has no ID to key it by.")
            key = value.id
            if key in self._items or key in staged:
                raise DuplicateKeyError(key, self.entity)
            self._check(key, value)
            staged[key] = value
        self._items.update(staged)
        logger.debug("%d %s records inserted", len(staged), self.entity)
        return len(staged)

    def remove(self, key: K) -> V:
        """Delete and return the value stored under *key*.

        Indexes built over this store are not touched; they keep the
        removed value until the caller rebuilds them.
        """
        try:
            value = self._items.pop(key)
        except KeyError:
            raise EntityNotFoundError(key, self.entity) from None
        logger.debug("%s %s removed", self.entity, key)
        return value

    def update(self, key: K, mutation: Callable[[V], V]) -> V:
        """Replace the value under *key* with ``mutation(current)``.

        The proposed value is validated before it is committed, so a
        rejected mutation leaves the stored value exactly as it was.
        The key keeps its position in insertion order.
        """
        current = self.get(key)
        proposed = mutation(current)
        self._check(key, proposed)
        self._items[key] = proposed
        logger.debug("%s %s updated", self.entity, key)
        return proposed

    def replace_all(self, values: Iterable[V]) -> None:
        """Swap the whole content for *values* (snapshot load semantics)."""
        fresh: EntityStore[K, V] = EntityStore(self.entity, self._rules)
        fresh.insert_many(values)
        self._items = fresh._items
        logger.debug("%s store replaced with %d records", self.entity, len(self._items))

    def clear(self) -> None:
        self._items.clear()

    # --- Queries --------------------------------------------------------------

    def get(self, key: K) -> V:
        try:
            return self._items[key]
        except KeyError:
            raise EntityNotFoundError(key, self.entity) from None

    def find(self, key: K) -> V | None:
        return self._items.get(key)

    def list_all(self) -> list[V]:
        return list(self._items.values())

    def keys(self) -> list[K]:
        return list(self._items.keys())

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[V]:
        return iter(self.list_all())

    # --- Internal helpers -----------------------------------------------------

    def _check(self, key: K, value: V) -> None:
        if isinstance(value, HasIdentity) and value.id != key:
            raise InvalidValueError(
                f"{self.entity} ID {value.id} does not match key {key}."
            )
        for rule in self._rules:
            rule(value)

"""Unit tests for EntityStore."""

from dataclasses import dataclass, replace

import pytest

from ems.domain.exceptions import (
    DuplicateKeyError,
    EntityNotFoundError,
    ErrorKind,
    InvalidValueError,
)
from ems.domain.store import EntityStore
from ems.domain.validation import non_negative_quantity


@dataclass(frozen=True)
class Item:
    id: int
    qty: int

    @property
    def quantity(self) -> int:
        return self.qty


def _store(*items: Item) -> EntityStore[int, Item]:
    store = EntityStore("Item", rules=[non_negative_quantity])
    for item in items:
        store.insert(item.id, item)
    return store


def _add(n: int):
    return lambda item: replace(item, qty=item.qty + n)


class TestInsert:

    def test_get_returns_inserted_value(self):
        store = _store()
        item = Item(1, 10)
        store.insert(1, item)
        assert store.get(1) is item

    def test_duplicate_key_rejected_and_original_kept(self):
        store = _store(Item(1, 10))
        with pytest.raises(DuplicateKeyError, match="Item with ID 1 already exists"):
            store.insert(1, Item(1, 99))
        assert store.get(1).qty == 10
        assert len(store) == 1

    def test_duplicate_error_carries_kind_and_key(self):
        store = _store(Item(1, 10))
        with pytest.raises(DuplicateKeyError) as info:
            store.insert(1, Item(1, 99))
        assert info.value.kind is ErrorKind.DUPLICATE_KEY
        assert info.value.key == 1

    def test_rule_violation_leaves_store_empty(self):
        store = _store()
        with pytest.raises(InvalidValueError, match="cannot be negative"):
            store.insert(1, Item(1, -1))
        assert 1 not in store
        assert len(store) == 0

    def test_value_id_must_match_key(self):
        store = _store()
        with pytest.raises(InvalidValueError, match="does not match key 2"):
            store.insert(2, Item(1, 5))

    def test_add_uses_value_id(self):
        store = _store()
        store.add(Item(7, 1))
        assert store.keys() == [7]

    def test_add_rejects_values_without_id(self):
        store: EntityStore[int, str] = EntityStore("Note")
        with pytest.raises(InvalidValueError, match="no ID"):
            store.add("hello")

    def test_plain_values_need_no_id(self):
        store: EntityStore[str, int] = EntityStore("Counter")
        store.insert("a", 1)
        assert store.get("a") == 1


class TestInsertMany:

    def test_inserts_in_order(self):
        store = _store(Item(5, 1))
        count = store.insert_many([Item(3, 1), Item(1, 1)])
        assert count == 2
        assert store.keys() == [5, 3, 1]

    def test_duplicate_against_store_inserts_nothing(self):
        store = _store(Item(2, 1))
        with pytest.raises(DuplicateKeyError):
            store.insert_many([Item(1, 1), Item(2, 1)])
        assert store.keys() == [2]

    def test_duplicate_within_batch_inserts_nothing(self):
        store = _store()
        with pytest.raises(DuplicateKeyError):
            store.insert_many([Item(1, 1), Item(1, 2)])
        assert len(store) == 0

    def test_invalid_member_inserts_nothing(self):
        store = _store()
        with pytest.raises(InvalidValueError):
            store.insert_many([Item(1, 1), Item(2, -4)])
        assert len(store) == 0


class TestMissingKeys:

    @pytest.mark.parametrize(
        "operation",
        [
            lambda s: s.get(9),
            lambda s: s.remove(9),
            lambda s: s.update(9, _add(1)),
        ],
        ids=["get", "remove", "update"],
    )
    def test_absent_key_not_found_and_store_unchanged(self, operation):
        store = _store(Item(1, 10), Item(2, 5))
        before = store.list_all()
        with pytest.raises(EntityNotFoundError, match="Item with ID 9 not found") as info:
            operation(store)
        assert info.value.kind is ErrorKind.NOT_FOUND
        assert store.list_all() == before

    def test_find_returns_none(self):
        assert _store().find(1) is None


class TestUpdate:

    def test_applies_mutation(self):
        store = _store(Item(1, 10))
        updated = store.update(1, _add(5))
        assert updated.qty == 15
        assert store.get(1).qty == 15

    def test_negative_result_rejected_and_value_unchanged(self):
        store = _store(Item(1, 15))
        before = store.get(1)
        with pytest.raises(InvalidValueError):
            store.update(1, lambda item: replace(item, qty=-3))
        assert store.get(1) is before

    def test_key_change_rejected(self):
        store = _store(Item(1, 15))
        with pytest.raises(InvalidValueError):
            store.update(1, lambda item: replace(item, id=2))
        assert store.keys() == [1]

    def test_keeps_position_in_order(self):
        store = _store(Item(1, 1), Item(2, 2), Item(3, 3))
        store.update(2, _add(10))
        assert [i.id for i in store.list_all()] == [1, 2, 3]


class TestRemove:

    def test_remove_returns_value(self):
        store = _store(Item(1, 10))
        assert store.remove(1) == Item(1, 10)
        assert 1 not in store

    def test_reinsert_after_remove_starts_fresh(self):
        store = _store(Item(1, 10), Item(2, 5))
        store.remove(1)
        store.insert(1, Item(1, 3))
        assert store.get(1).qty == 3
        assert store.keys() == [2, 1]


class TestListAll:

    def test_insertion_order(self):
        store = _store(Item(3, 1), Item(1, 1), Item(2, 1))
        assert [i.id for i in store.list_all()] == [3, 1, 2]

    def test_returned_list_is_a_copy(self):
        store = _store(Item(1, 10))
        items = store.list_all()
        items.append(Item(2, 2))
        items.clear()
        assert store.list_all() == [Item(1, 10)]
        assert store.get(1) == Item(1, 10)

    def test_iteration_tolerates_removal(self):
        store = _store(Item(1, 1), Item(2, 2))
        for item in store:
            store.remove(item.id)
        assert len(store) == 0


class TestReplaceAll:

    def test_replaces_content(self):
        store = _store(Item(1, 1), Item(2, 2))
        store.replace_all([Item(9, 9)])
        assert store.keys() == [9]

    def test_invalid_snapshot_keeps_old_content(self):
        store = _store(Item(1, 1))
        with pytest.raises(DuplicateKeyError):
            store.replace_all([Item(5, 1), Item(5, 2)])
        assert store.keys() == [1]


class TestScenarios:

    def test_duplicate_insert_scenario(self):
        store = _store()
        store.insert(1, Item(1, 10))
        store.insert(2, Item(2, 5))
        with pytest.raises(DuplicateKeyError):
            store.insert(1, Item(1, 99))
        assert len(store.list_all()) == 2
        assert store.get(1).qty == 10

    def test_update_then_remove_scenario(self):
        store = _store(Item(1, 10), Item(2, 5))
        store.update(1, _add(5))
        assert store.get(1).qty == 15
        with pytest.raises(InvalidValueError):
            store.update(1, lambda item: replace(item, qty=-3))
        assert store.get(1).qty == 15
        store.remove(1)
        with pytest.raises(EntityNotFoundError):
            store.get(1)

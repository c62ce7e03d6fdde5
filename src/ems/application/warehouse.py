"""Application service: warehouse stock of groceries and electronics."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, timedelta

from ems.domain.model.inventory import ElectronicItem, GroceryItem, ItemKind
from ems.domain.store import EntityStore

logger = logging.getLogger(__name__)


class WarehouseService:

    def __init__(
        self,
        electronics: EntityStore[int, ElectronicItem],
        groceries: EntityStore[int, GroceryItem],
    ) -> None:
        self._electronics = electronics
        self._groceries = groceries

    def seed(self, today: date | None = None) -> None:
        """Load the demo catalogue. Expiry dates are relative to *today*."""
        today = today or date.today()
        self._electronics.insert_many([
            ElectronicItem(1, "Phone", 10, "TechBrand", 24),
            ElectronicItem(2, "Laptop", 5, "CompPro", 12),
            ElectronicItem(3, "Headset", 20, "SoundX", 6),
        ])
        self._groceries.insert_many([
            GroceryItem(101, "Rice 5kg", 30, today + timedelta(days=365)),
            GroceryItem(102, "Milk", 50, today + timedelta(days=20)),
            GroceryItem(103, "Eggs (tray)", 40, today + timedelta(days=10)),
        ])
        logger.info("warehouse seeded")

    def add_grocery(self, item: GroceryItem) -> None:
        self._groceries.add(item)

    def add_electronic(self, item: ElectronicItem) -> None:
        self._electronics.add(item)

    def list_items(self, kind: ItemKind) -> list[ElectronicItem] | list[GroceryItem]:
        return self._store(kind).list_all()

    def increase_stock(self, kind: ItemKind, item_id: int, amount: int):
        """Add *amount* to an item's quantity and return the updated item.

        A negative amount is allowed as long as the result stays >= 0.
        """
        return self._store(kind).update(
            item_id, lambda item: replace(item, quantity=item.quantity + amount)
        )

    def set_quantity(self, kind: ItemKind, item_id: int, quantity: int):
        return self._store(kind).update(
            item_id, lambda item: replace(item, quantity=quantity)
        )

    def remove_item(self, kind: ItemKind, item_id: int) -> None:
        self._store(kind).remove(item_id)

    def _store(self, kind: ItemKind) -> EntityStore:
        if kind is ItemKind.GROCERY:
            return self._groceries
        return self._electronics

"""Application service: the persisted inventory log."""

from __future__ import annotations

import logging
from datetime import datetime

from ems.domain.model.inventory import InventoryItem
from ems.domain.repository.snapshot_repository import SnapshotRepository
from ems.domain.store import EntityStore

logger = logging.getLogger(__name__)


class InventoryLogService:

    def __init__(
        self,
        items: EntityStore[int, InventoryItem],
        snapshots: SnapshotRepository[InventoryItem],
    ) -> None:
        self._items = items
        self._snapshots = snapshots

    def seed(self, now: datetime | None = None) -> None:
        now = now or datetime.now()
        self._items.insert_many([
            InventoryItem(1, "Notebook", 50, now),
            InventoryItem(2, "Pen", 200, now),
            InventoryItem(3, "Stapler", 15, now),
            InventoryItem(4, "Marker", 80, now),
            InventoryItem(5, "Envelope Pack", 30, now),
        ])
        logger.info("inventory log seeded")

    def add_item(self, item: InventoryItem) -> None:
        self._items.add(item)

    def list_items(self) -> list[InventoryItem]:
        return self._items.list_all()

    def save(self) -> int:
        items = self._items.list_all()
        self._snapshots.save(items)
        return len(items)

    def load(self) -> int:
        """Replace the in-memory log with the persisted snapshot."""
        self._items.replace_all(self._snapshots.load())
        return len(self._items)

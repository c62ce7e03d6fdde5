"""Stock-keeping entities for the warehouse and the inventory log.

All three are frozen: a quantity change produces a new instance via
``dataclasses.replace`` and is committed by the owning store.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from ems.domain.exceptions import InvalidFormatError


class ItemKind(Enum):
    GROCERY = "G"
    ELECTRONIC = "E"

    @staticmethod
    def parse(code: str) -> ItemKind:
        """Map the one-letter menu code (case-insensitive) to a kind."""
        try:
            return ItemKind(code.strip().upper())
        except ValueError:
            raise InvalidFormatError(
                f"Unknown item type '{code}'. Expected G or E.", value=code
            ) from None


@dataclass(frozen=True)
class ElectronicItem:
    id: int
    name: str
    quantity: int
    brand: str
    warranty_months: int

    def __str__(self) -> str:
        return (
            f"ElectronicItem {{ Id={self.id}, Name={self.name}, Qty={self.quantity}, "
            f"Brand={self.brand}, Warranty={self.warranty_months}m }}"
        )


@dataclass(frozen=True)
class GroceryItem:
    id: int
    name: str
    quantity: int
    expiry_date: date

    def __str__(self) -> str:
        return (
            f"GroceryItem {{ Id={self.id}, Name={self.name}, Qty={self.quantity}, "
            f"Expiry={self.expiry_date:%Y-%m-%d} }}"
        )


@dataclass(frozen=True)
class InventoryItem:
    """An entry in the persisted inventory log."""

    id: int
    name: str
    quantity: int
    date_added: datetime

    def __str__(self) -> str:
        return (
            f"ID={self.id}, Name={self.name}, Quantity={self.quantity}, "
            f"Added={self.date_added:%Y-%m-%d %H:%M}"
        )

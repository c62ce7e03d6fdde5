"""Application context — the stores and indexes one process works with.

Created once at start-up by the composition root and handed to the
services, instead of keeping live collections in menu-loop locals.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ems.application.finance import FinanceService
from ems.application.grading import GradingService
from ems.application.healthcare import HealthcareService
from ems.application.inventory_log import InventoryLogService
from ems.application.warehouse import WarehouseService
from ems.domain.group_index import GroupIndex
from ems.domain.model.finance import Transaction
from ems.domain.model.grading import Student
from ems.domain.model.healthcare import Patient, Prescription
from ems.domain.model.inventory import ElectronicItem, GroceryItem, InventoryItem
from ems.domain.repository.snapshot_repository import SnapshotRepository
from ems.domain.store import EntityStore
from ems.domain.validation import (
    non_negative_age,
    non_negative_quantity,
    positive_amount,
    required_text,
    score_in_range,
)

logger = logging.getLogger(__name__)


def _electronics() -> EntityStore[int, ElectronicItem]:
    return EntityStore("Item", rules=[non_negative_quantity, required_text("name")])


def _groceries() -> EntityStore[int, GroceryItem]:
    return EntityStore("Item", rules=[non_negative_quantity, required_text("name")])


def _patients() -> EntityStore[int, Patient]:
    return EntityStore("Patient", rules=[non_negative_age, required_text("name")])


def _prescriptions() -> EntityStore[int, Prescription]:
    return EntityStore("Prescription", rules=[required_text("medication_name")])


def _students() -> EntityStore[int, Student]:
    return EntityStore("Student", rules=[score_in_range, required_text("full_name")])


def _inventory_log() -> EntityStore[int, InventoryItem]:
    return EntityStore("Item", rules=[non_negative_quantity, required_text("name")])


def _transactions() -> EntityStore[int, Transaction]:
    return EntityStore("Transaction", rules=[positive_amount, required_text("category")])


@dataclass
class AppContext:
    inventory_snapshots: SnapshotRepository[InventoryItem]
    electronics: EntityStore[int, ElectronicItem] = field(default_factory=_electronics)
    groceries: EntityStore[int, GroceryItem] = field(default_factory=_groceries)
    patients: EntityStore[int, Patient] = field(default_factory=_patients)
    prescriptions: EntityStore[int, Prescription] = field(default_factory=_prescriptions)
    prescriptions_by_patient: GroupIndex[int, Prescription] = field(default_factory=GroupIndex)
    students: EntityStore[int, Student] = field(default_factory=_students)
    inventory_log: EntityStore[int, InventoryItem] = field(default_factory=_inventory_log)
    transactions: EntityStore[int, Transaction] = field(default_factory=_transactions)

    # --- Services -------------------------------------------------------------

    def warehouse(self) -> WarehouseService:
        return WarehouseService(self.electronics, self.groceries)

    def healthcare(self) -> HealthcareService:
        return HealthcareService(
            self.patients, self.prescriptions, self.prescriptions_by_patient
        )

    def grading(self) -> GradingService:
        return GradingService(self.students)

    def inventory(self) -> InventoryLogService:
        return InventoryLogService(self.inventory_log, self.inventory_snapshots)

    def finance(self) -> FinanceService:
        return FinanceService(self.transactions)

    # --- Lifecycle ------------------------------------------------------------

    def close(self) -> None:
        """Drop all in-memory state. Nothing is saved implicitly."""
        for store in (
            self.electronics,
            self.groceries,
            self.patients,
            self.prescriptions,
            self.students,
            self.inventory_log,
            self.transactions,
        ):
            store.clear()
        self.prescriptions_by_patient.rebuild([], lambda p: p.patient_id)
        logger.debug("application context closed")

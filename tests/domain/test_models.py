"""Unit tests for entity models and their display formats."""

from dataclasses import FrozenInstanceError
from datetime import date, datetime

import pytest

from ems.domain.capabilities import HasIdentity, HasName, HasQuantity
from ems.domain.exceptions import InvalidFormatError
from ems.domain.model.grading import Student
from ems.domain.model.healthcare import Patient, Prescription
from ems.domain.model.inventory import ElectronicItem, GroceryItem, InventoryItem, ItemKind


class TestInventoryModels:

    def test_electronic_str(self):
        item = ElectronicItem(1, "Phone", 10, "TechBrand", 24)
        assert str(item) == (
            "ElectronicItem { Id=1, Name=Phone, Qty=10, Brand=TechBrand, Warranty=24m }"
        )

    def test_grocery_str(self):
        item = GroceryItem(101, "Milk", 50, date(2025, 3, 1))
        assert str(item) == "GroceryItem { Id=101, Name=Milk, Qty=50, Expiry=2025-03-01 }"

    def test_inventory_item_str(self):
        item = InventoryItem(2, "Pen", 200, datetime(2024, 6, 1, 9, 5))
        assert str(item) == "ID=2, Name=Pen, Quantity=200, Added=2024-06-01 09:05"

    def test_items_are_frozen(self):
        item = GroceryItem(101, "Milk", 50, date(2025, 3, 1))
        with pytest.raises(FrozenInstanceError):
            item.quantity = 0  # type: ignore[misc]

    @pytest.mark.parametrize("code,kind", [("g", ItemKind.GROCERY), (" E ", ItemKind.ELECTRONIC)])
    def test_item_kind_parse(self, code, kind):
        assert ItemKind.parse(code) is kind

    def test_item_kind_parse_rejects_unknown(self):
        with pytest.raises(InvalidFormatError, match="Unknown item type 'X'"):
            ItemKind.parse("X")


class TestCapabilities:

    def test_stock_items_have_quantity(self):
        item = ElectronicItem(1, "Phone", 10, "TechBrand", 24)
        assert isinstance(item, HasIdentity)
        assert isinstance(item, HasName)
        assert isinstance(item, HasQuantity)

    def test_patient_has_no_quantity(self):
        patient = Patient(1, "Ann", 30, "F")
        assert isinstance(patient, HasIdentity)
        assert not isinstance(patient, HasQuantity)


class TestHealthcareModels:

    def test_patient_str(self):
        assert str(Patient(1, "Ann", 30, "F")) == "Patient { Id=1, Name=Ann, Age=30, Gender=F }"

    def test_prescription_str(self):
        prescription = Prescription(4, 1, "Ibuprofen", date(2024, 2, 3))
        assert str(prescription) == (
            "Prescription { Id=4, PatientId=1, Medication=Ibuprofen, Date=2024-02-03 }"
        )


class TestStudentGrade:

    @pytest.mark.parametrize(
        "score,grade",
        [(100, "A"), (80, "A"), (79, "B"), (70, "B"), (69, "C"), (60, "C"),
         (59, "D"), (50, "D"), (49, "F"), (0, "F")],
    )
    def test_grade_bands(self, score, grade):
        assert Student(1, "Ann", score).grade == grade

    def test_str(self):
        assert str(Student(3, "Kofi Boateng", 72)) == "Kofi Boateng (ID: 3): Score = 72, Grade = B"

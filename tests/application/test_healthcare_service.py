"""Integration tests for the healthcare use cases."""

from datetime import date

import pytest

from ems.application.context import AppContext
from ems.domain.exceptions import DuplicateKeyError, EntityNotFoundError, InvalidValueError
from ems.domain.model.healthcare import Patient, Prescription
from tests.fakes import FakeSnapshotRepository

ISSUED = date(2024, 3, 1)


def _setup():
    context = AppContext(inventory_snapshots=FakeSnapshotRepository())
    service = context.healthcare()
    for pid in (7, 8, 9):
        service.add_patient(Patient(pid, f"Patient {pid}", 40, "F"))
    return service


def _add(service, prescription_id: int, patient_id: int) -> None:
    service.add_prescription(
        Prescription(prescription_id, patient_id, f"Med {prescription_id}", ISSUED)
    )


class TestPatients:

    def test_list_in_insertion_order(self):
        service = _setup()
        assert [p.id for p in service.list_patients()] == [7, 8, 9]
        assert service.has_patient(8)
        assert not service.has_patient(1)

    def test_duplicate_patient_rejected(self):
        service = _setup()
        with pytest.raises(DuplicateKeyError, match="Patient with ID 7 already exists"):
            service.add_patient(Patient(7, "Other", 20, "M"))

    def test_negative_age_rejected(self):
        service = _setup()
        with pytest.raises(InvalidValueError):
            service.add_patient(Patient(1, "Baby", -1, "M"))


class TestPrescriptionsByPatient:

    def test_grouped_in_source_order(self):
        service = _setup()
        _add(service, 1, 7)
        _add(service, 2, 9)
        _add(service, 3, 7)
        assert [p.id for p in service.prescriptions_for(7)] == [1, 3]
        assert [p.id for p in service.prescriptions_for(9)] == [2]
        assert service.prescriptions_for(8) == []

    def test_unknown_patient_rejected(self):
        service = _setup()
        with pytest.raises(EntityNotFoundError, match="Patient with ID 42 not found"):
            _add(service, 1, 42)
        assert service.prescriptions_for(42) == []

    def test_duplicate_prescription_rejected(self):
        service = _setup()
        _add(service, 1, 7)
        with pytest.raises(DuplicateKeyError):
            _add(service, 1, 8)
        assert service.prescriptions_for(8) == []

    def test_removed_prescription_listed_until_rebuild(self):
        service = _setup()
        _add(service, 1, 7)
        _add(service, 2, 7)
        service.remove_prescription(1)
        assert [p.id for p in service.prescriptions_for(7)] == [1, 2]

        service.rebuild_index()
        assert [p.id for p in service.prescriptions_for(7)] == [2]

    def test_next_addition_rebuilds(self):
        service = _setup()
        _add(service, 1, 7)
        service.remove_prescription(1)
        _add(service, 2, 9)
        assert service.prescriptions_for(7) == []


class TestSeed:

    def test_seed_groups_prescriptions(self):
        context = AppContext(inventory_snapshots=FakeSnapshotRepository())
        service = context.healthcare()
        service.seed(today=ISSUED)
        assert [p.id for p in service.prescriptions_for(1)] == [1, 3]

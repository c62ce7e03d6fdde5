"""Application service: patients and their prescriptions.

Prescriptions are grouped by patient through a GroupIndex. The index is
rebuilt after every prescription is added. Removing a prescription does
not rebuild it, so a removed prescription is still listed for its patient
until the next addition or an explicit ``rebuild_index`` call.
"""

from __future__ import annotations

import logging
from datetime import date

from ems.domain.exceptions import EntityNotFoundError
from ems.domain.group_index import GroupIndex
from ems.domain.model.healthcare import Patient, Prescription
from ems.domain.store import EntityStore

logger = logging.getLogger(__name__)


class HealthcareService:

    def __init__(
        self,
        patients: EntityStore[int, Patient],
        prescriptions: EntityStore[int, Prescription],
        prescriptions_by_patient: GroupIndex[int, Prescription],
    ) -> None:
        self._patients = patients
        self._prescriptions = prescriptions
        self._by_patient = prescriptions_by_patient

    def add_patient(self, patient: Patient) -> None:
        self._patients.add(patient)

    def list_patients(self) -> list[Patient]:
        return self._patients.list_all()

    def has_patient(self, patient_id: int) -> bool:
        return patient_id in self._patients

    def add_prescription(self, prescription: Prescription) -> None:
        """Record a prescription for an existing patient.

        Raises EntityNotFoundError if the patient is unknown.
        """
        if self._patients.find(prescription.patient_id) is None:
            raise EntityNotFoundError(prescription.patient_id, "Patient")
        self._prescriptions.add(prescription)
        self.rebuild_index()

    def remove_prescription(self, prescription_id: int) -> Prescription:
        return self._prescriptions.remove(prescription_id)

    def rebuild_index(self) -> None:
        self._by_patient.rebuild(
            self._prescriptions.list_all(), lambda p: p.patient_id
        )
        logger.debug("prescription index rebuilt: %d patients", len(self._by_patient))

    def prescriptions_for(self, patient_id: int) -> list[Prescription]:
        return self._by_patient.lookup(patient_id)

    def seed(self, today: date | None = None) -> None:
        today = today or date.today()
        self._patients.insert_many([
            Patient(1, "John Doe", 34, "M"),
            Patient(2, "Jane Smith", 28, "F"),
            Patient(3, "Kwame Mensah", 45, "M"),
        ])
        self._prescriptions.insert_many([
            Prescription(1, 1, "Amoxicillin", today),
            Prescription(2, 2, "Ibuprofen", today),
            Prescription(3, 1, "Paracetamol", today),
        ])
        self.rebuild_index()
        logger.info("healthcare records seeded")

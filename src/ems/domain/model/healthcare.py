"""Patients and the prescriptions that reference them."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Patient:
    id: int
    name: str
    age: int
    gender: str

    def __str__(self) -> str:
        return (
            f"Patient {{ Id={self.id}, Name={self.name}, "
            f"Age={self.age}, Gender={self.gender} }}"
        )


@dataclass(frozen=True)
class Prescription:
    """A medication issued to one patient.

    ``patient_id`` is a foreign key into the patient store; prescriptions
    are grouped by it for per-patient lookups.
    """

    id: int
    patient_id: int
    medication_name: str
    date_issued: date

    def __str__(self) -> str:
        return (
            f"Prescription {{ Id={self.id}, PatientId={self.patient_id}, "
            f"Medication={self.medication_name}, Date={self.date_issued:%Y-%m-%d} }}"
        )

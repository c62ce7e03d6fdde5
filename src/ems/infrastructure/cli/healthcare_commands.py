"""CLI command for the healthcare menu."""

from __future__ import annotations

import click

from ems.application.context import AppContext
from ems.application.healthcare import HealthcareService
from ems.domain.exceptions import EntityNotFoundError
from ems.domain.model.healthcare import Patient, Prescription
from ems.domain.validation import parse_date
from ems.infrastructure.cli.menu import Menu, MenuOption


def _add_patient(service: HealthcareService) -> None:
    patient_id = click.prompt("Enter Patient ID", type=int)
    name = click.prompt("Enter Name")
    age = click.prompt("Enter Age", type=int)
    gender = click.prompt("Enter Gender (M/F)")
    service.add_patient(Patient(patient_id, name, age, gender))
    click.echo("Patient added successfully.")


def _add_prescription(service: HealthcareService) -> None:
    prescription_id = click.prompt("Enter Prescription ID", type=int)
    patient_id = click.prompt("Enter Patient ID", type=int)
    if not service.has_patient(patient_id):
        raise EntityNotFoundError(patient_id, "Patient")
    medication = click.prompt("Enter Medication Name")
    issued = parse_date(click.prompt("Enter Date Issued (yyyy-mm-dd)"), "Date Issued")
    service.add_prescription(Prescription(prescription_id, patient_id, medication, issued))
    click.echo("Prescription added successfully.")


def _print_patients(service: HealthcareService) -> None:
    patients = service.list_patients()
    if not patients:
        click.echo("No patients found.")
        return
    click.echo("--- All Patients ---")
    for patient in patients:
        click.echo(str(patient))


def _print_prescriptions(service: HealthcareService) -> None:
    patient_id = click.prompt("Enter Patient ID to view prescriptions", type=int)
    prescriptions = service.prescriptions_for(patient_id)
    if not prescriptions:
        click.echo("No prescriptions found.")
        return
    click.echo(f"--- Prescriptions for Patient ID {patient_id} ---")
    for prescription in prescriptions:
        click.echo(str(prescription))


def _rebuild_index(service: HealthcareService) -> None:
    service.rebuild_index()
    click.echo("Prescription index rebuilt.")


def _remove_prescription(service: HealthcareService) -> None:
    prescription_id = click.prompt("Enter Prescription ID", type=int)
    service.remove_prescription(prescription_id)
    click.echo(f"Prescription {prescription_id} removed.")


def healthcare_menu(service: HealthcareService) -> Menu:
    return Menu(
        "Healthcare System",
        [
            MenuOption("Add Patient", lambda: _add_patient(service)),
            MenuOption("Add Prescription", lambda: _add_prescription(service)),
            MenuOption("View All Patients", lambda: _print_patients(service)),
            MenuOption("View Prescriptions by Patient", lambda: _print_prescriptions(service)),
            MenuOption("Remove Prescription", lambda: _remove_prescription(service)),
            MenuOption("Rebuild Prescription Index", lambda: _rebuild_index(service)),
        ],
    )


@click.command("healthcare")
@click.option("--seed/--no-seed", default=False, show_default=True, help="Start with sample records.")
@click.pass_obj
def healthcare(context: AppContext, seed: bool) -> None:
    """Manage patients and prescriptions."""
    service = context.healthcare()
    if seed:
        service.seed()
    healthcare_menu(service).run()

"""CLI commands for the student grading tools."""

from __future__ import annotations

from pathlib import Path

import click

from ems.application.context import AppContext
from ems.application.grading import GradingService
from ems.domain.exceptions import DomainException
from ems.domain.model.grading import Student
from ems.domain.validation import parse_int
from ems.infrastructure.cli.menu import Menu, MenuOption
from ems.infrastructure.persistence.delimited import (
    parse_student,
    read_file,
    write_lines,
)


def _add_student(service: GradingService) -> None:
    student_id = click.prompt("Enter Student ID", type=int)
    name = click.prompt("Enter Full Name")
    score = parse_int(click.prompt("Enter Score"), "Score")
    service.add_student(Student(student_id, name, score))
    click.echo("Student added successfully!")


def _print_students(service: GradingService) -> None:
    students = service.list_students()
    if not students:
        click.echo("No students available.")
        return
    click.echo("Current Students:")
    for student in students:
        click.echo(str(student))


def _load(service: GradingService, path: Path) -> int:
    try:
        students = read_file(path, parse_student)
    except OSError as exc:
        raise click.ClickException(f"Cannot read {path}: {exc.strerror}")
    return service.import_students(students)


def _write_report(service: GradingService, path: Path) -> None:
    try:
        write_lines(path, service.report_lines())
    except OSError as exc:
        raise click.ClickException(f"Cannot write {path}: {exc.strerror}")


def _load_interactive(service: GradingService) -> None:
    path = Path(click.prompt("Enter input file path"))
    count = _load(service, path)
    click.echo(f"Loaded {count} students from file.")


def _report_interactive(service: GradingService) -> None:
    path = Path(click.prompt("Enter output file path"))
    _write_report(service, path)
    click.echo(f"Report generated successfully at {path}")


def grading_menu(service: GradingService) -> Menu:
    return Menu(
        "Student Grading System",
        [
            MenuOption("Add Student", lambda: _add_student(service)),
            MenuOption("View Students", lambda: _print_students(service)),
            MenuOption("Load Students From File", lambda: _load_interactive(service)),
            MenuOption("Generate Report to File", lambda: _report_interactive(service)),
        ],
    )


@click.group("grading", invoke_without_command=True)
@click.pass_context
def grading(ctx: click.Context) -> None:
    """Record student scores and produce grade reports.

    Without a subcommand, starts the interactive menu.
    """
    if ctx.invoked_subcommand is None:
        grading_menu(ctx.obj.grading()).run()
        click.echo("Exiting Grading System.")


@grading.command("import")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--report",
    "report_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the grade report to this file.",
)
@click.pass_obj
def grading_import(context: AppContext, input_file: Path, report_file: Path | None) -> None:
    """Import students from INPUT_FILE (Id,FullName,Score per line)."""
    service = context.grading()
    try:
        count = _load(service, input_file)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Loaded {count} students from {input_file}")
    if report_file is not None:
        _write_report(service, report_file)
        click.echo(f"Report generated successfully at {report_file}")
    else:
        for line in service.report_lines():
            click.echo(line)

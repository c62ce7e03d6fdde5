from pathlib import Path

import click

from ems.infrastructure.bootstrap import (
    DATA_DIR_ENV,
    configure_logging,
    create_context,
    data_dir,
)
from ems.infrastructure.cli.finance_commands import finance
from ems.infrastructure.cli.grading_commands import grading
from ems.infrastructure.cli.healthcare_commands import healthcare
from ems.infrastructure.cli.inventory_commands import inventory
from ems.infrastructure.cli.warehouse_commands import warehouse


@click.group()
@click.option(
    "--data-dir",
    "directory",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=DATA_DIR_ENV,
    default=None,
    help="Directory holding snapshot files.",
)
@click.option("-d", "--debug/--no-debug", default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, directory: Path | None, debug: bool) -> None:
    """EMS — Entity Management System"""
    configure_logging(debug)
    context = create_context(data_dir(directory))
    ctx.obj = context
    ctx.call_on_close(context.close)


# Register subcommands
cli.add_command(finance)
cli.add_command(grading)
cli.add_command(healthcare)
cli.add_command(inventory)
cli.add_command(warehouse)

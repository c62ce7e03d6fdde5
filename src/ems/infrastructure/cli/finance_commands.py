"""CLI command for the finance demo."""

from __future__ import annotations

import click

from ems.application.context import AppContext


@click.command("finance")
@click.pass_obj
def finance(context: AppContext) -> None:
    """Process sample transactions against a savings account."""
    for line in context.finance().run_demo():
        click.echo(line)
    click.echo()
    click.echo("Done.")

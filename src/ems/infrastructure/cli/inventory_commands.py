"""CLI commands for the persisted inventory log."""

from __future__ import annotations

from datetime import datetime

import click

from ems.application.context import AppContext
from ems.application.inventory_log import InventoryLogService
from ems.domain.model.inventory import InventoryItem
from ems.infrastructure.cli.menu import Menu, MenuOption


def _seed(service: InventoryLogService) -> None:
    service.seed()
    click.echo("Sample data seeded.")


def _add_item(service: InventoryLogService) -> None:
    item_id = click.prompt("Enter Item ID", type=int)
    name = click.prompt("Enter Item Name")
    quantity = click.prompt("Enter Quantity", type=int)
    service.add_item(InventoryItem(item_id, name, quantity, datetime.now()))
    click.echo("Item added successfully.")


def _save(service: InventoryLogService, location: str) -> None:
    count = service.save()
    click.echo(f"{count} items saved to {location}")


def _load(service: InventoryLogService, location: str) -> None:
    count = service.load()
    click.echo(f"{count} items loaded from {location}")


def _print_items(service: InventoryLogService) -> None:
    items = service.list_items()
    if not items:
        click.echo("No items in inventory.")
        return
    click.echo("Inventory Items:")
    click.echo(f"{'ID':<6} {'Name':<20} {'Quantity':>10} {'Added':>18}")
    click.echo("-" * 57)
    for item in items:
        click.echo(
            f"{item.id:<6} {item.name:<20} {item.quantity:>10} "
            f"{item.date_added:%Y-%m-%d %H:%M}"
        )


def inventory_menu(service: InventoryLogService, location: str) -> Menu:
    return Menu(
        "Inventory Management",
        [
            MenuOption("Seed Sample Data", lambda: _seed(service)),
            MenuOption("Add New Item", lambda: _add_item(service)),
            MenuOption("Save Inventory to File", lambda: _save(service, location)),
            MenuOption("Load Inventory from File", lambda: _load(service, location)),
            MenuOption("Print All Items", lambda: _print_items(service)),
        ],
    )


@click.command("inventory")
@click.pass_obj
def inventory(context: AppContext) -> None:
    """Keep an inventory log that can be saved to and loaded from disk."""
    location = context.inventory_snapshots.location
    inventory_menu(context.inventory(), location).run()
    click.echo("Exiting...")

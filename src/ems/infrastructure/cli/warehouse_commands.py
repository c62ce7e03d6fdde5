"""CLI command for the warehouse inventory menu."""

from __future__ import annotations

import click

from ems.application.context import AppContext
from ems.application.warehouse import WarehouseService
from ems.domain.model.inventory import ElectronicItem, GroceryItem, ItemKind
from ems.domain.validation import parse_date
from ems.infrastructure.cli.menu import Menu, MenuOption


def _print_items(service: WarehouseService, kind: ItemKind) -> None:
    items = service.list_items(kind)
    if not items:
        click.echo("No items found.")
        return
    for item in items:
        click.echo(f" - {item}")


def _prompt_kind() -> ItemKind:
    return ItemKind.parse(click.prompt("Enter Type (G/E)"))


def _add_grocery(service: WarehouseService) -> None:
    item_id = click.prompt("Enter ID", type=int)
    name = click.prompt("Enter Name")
    quantity = click.prompt("Enter Quantity", type=int)
    expiry = parse_date(click.prompt("Enter Expiry Date (yyyy-mm-dd)"), "Expiry Date")
    service.add_grocery(GroceryItem(item_id, name, quantity, expiry))
    click.echo(f"Grocery item {item_id} added.")


def _add_electronic(service: WarehouseService) -> None:
    item_id = click.prompt("Enter ID", type=int)
    name = click.prompt("Enter Name")
    quantity = click.prompt("Enter Quantity", type=int)
    brand = click.prompt("Enter Brand")
    warranty = click.prompt("Enter Warranty Months", type=int)
    service.add_electronic(ElectronicItem(item_id, name, quantity, brand, warranty))
    click.echo(f"Electronic item {item_id} added.")


def _increase_stock(service: WarehouseService) -> None:
    kind = _prompt_kind()
    item_id = click.prompt("Enter ID", type=int)
    amount = click.prompt("Enter Increase Amount", type=int)
    item = service.increase_stock(kind, item_id, amount)
    click.echo(f"Stock increased: ID {item_id} -> {item.quantity}")


def _remove_item(service: WarehouseService) -> None:
    kind = _prompt_kind()
    item_id = click.prompt("Enter ID", type=int)
    service.remove_item(kind, item_id)
    click.echo(f"Removed item ID {item_id}")


def warehouse_menu(service: WarehouseService) -> Menu:
    return Menu(
        "Warehouse Inventory Menu",
        [
            MenuOption("View Grocery Items", lambda: _print_items(service, ItemKind.GROCERY)),
            MenuOption("View Electronic Items", lambda: _print_items(service, ItemKind.ELECTRONIC)),
            MenuOption("Add Grocery Item", lambda: _add_grocery(service)),
            MenuOption("Add Electronic Item", lambda: _add_electronic(service)),
            MenuOption("Increase Stock", lambda: _increase_stock(service)),
            MenuOption("Remove Item", lambda: _remove_item(service)),
        ],
    )


@click.command("warehouse")
@click.option("--seed/--no-seed", default=True, show_default=True, help="Start with sample stock.")
@click.pass_obj
def warehouse(context: AppContext, seed: bool) -> None:
    """Manage warehouse groceries and electronics."""
    service = context.warehouse()
    if seed:
        service.seed()
    warehouse_menu(service).run()

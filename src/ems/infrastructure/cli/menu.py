"""Numbered interactive menu shared by the console tools.

The loop keeps running until the exit choice (or end of input). An
operation that fails is reported as ``[Error] <message>`` and the menu is
shown again; no domain failure ends the process.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

import click

from ems.domain.result import Err, attempt
from ems.infrastructure.persistence.json_snapshot import SnapshotError


@dataclass(frozen=True)
class MenuOption:
    label: str
    action: Callable[[], None]


class Menu:

    def __init__(
        self,
        title: str,
        options: Sequence[MenuOption],
        exit_label: str = "Exit",
    ) -> None:
        self.title = title
        self.options = list(options)
        self.exit_label = exit_label

    @property
    def exit_choice(self) -> int:
        return len(self.options) + 1

    def run(self) -> None:
        while True:
            self._show()
            try:
                choice = click.prompt("Choose an option", type=int)
            except click.Abort:
                click.echo()
                return

            if choice == self.exit_choice:
                return
            if not 1 <= choice <= len(self.options):
                click.echo("Invalid choice. Try again.")
                continue
            self._dispatch(self.options[choice - 1])

    def _show(self) -> None:
        click.echo()
        click.echo(f"--- {self.title} ---")
        for number, option in enumerate(self.options, start=1):
            click.echo(f"{number}. {option.label}")
        click.echo(f"{self.exit_choice}. {self.exit_label}")

    @staticmethod
    def _dispatch(option: MenuOption) -> None:
        try:
            result = attempt(option.action)
        except SnapshotError as exc:
            click.echo(f"[Error] {exc}")
            return
        except click.ClickException as exc:
            click.echo(f"[Error] {exc.format_message()}")
            return
        except click.Abort:
            # input ended mid-operation; the next prompt ends the loop
            click.echo()
            return
        if isinstance(result, Err):
            click.echo(f"[Error] {result.message}")

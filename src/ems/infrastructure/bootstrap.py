"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
It also owns the little configuration the tools have: where snapshot
files live and how logging is set up.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ems.application.context import AppContext
from ems.domain.model.inventory import InventoryItem
from ems.infrastructure.persistence.json_snapshot import (
    DataclassCodec,
    JsonSnapshotRepository,
)

DATA_DIR_ENV = "EMS_DATA_DIR"
INVENTORY_FILE = "inventory.json"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir(override: str | os.PathLike | None = None) -> Path:
    """Pick the data directory: explicit override, then env, then default."""
    if override:
        return Path(override)
    env = os.environ.get(DATA_DIR_ENV)
    if env:
        return Path(env)
    return _DEFAULT_DATA_DIR


def configure_logging(debug: bool = False) -> None:
    logging.basicConfig(format=LOG_FORMAT, level=logging.WARNING)
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)


def inventory_snapshots(directory: Path) -> JsonSnapshotRepository[InventoryItem]:
    return JsonSnapshotRepository(directory / INVENTORY_FILE, DataclassCodec(InventoryItem))


def create_context(directory: Path | None = None) -> AppContext:
    directory = directory or data_dir()
    return AppContext(inventory_snapshots=inventory_snapshots(directory))

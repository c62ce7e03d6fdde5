"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TransactionLineDTO:
    """Output: a stored transaction as displayed to the user."""

    id: int
    category: str
    amount: str  # formatted, e.g. "$120.50"
    date: str

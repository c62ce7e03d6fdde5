"""Narrow capability interfaces implemented structurally by entity models.

A store over patients only needs ``HasIdentity``; quantity rules only need
``HasQuantity``. Models never inherit from these.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class HasIdentity(Protocol):
    @property
    def id(self) -> int: ...


@runtime_checkable
class HasName(Protocol):
    @property
    def name(self) -> str: ...


@runtime_checkable
class HasQuantity(Protocol):
    @property
    def quantity(self) -> int: ...

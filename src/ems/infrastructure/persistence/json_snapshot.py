"""JSON-file-backed implementation of SnapshotRepository.

One file holds one store: a JSON array with one object per entity, keys
named exactly like the dataclass fields. Dates are ISO text and money is
fixed-point text, so the file stays human-readable.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import os
import typing
from datetime import date, datetime
from pathlib import Path
from typing import Any, Callable, Generic, Sequence, TypeVar

from ems.domain.exceptions import InvalidFormatError
from ems.domain.model.value_objects import Money
from ems.domain.repository.snapshot_repository import SnapshotRepository
from ems.domain.validation import parse_date, parse_datetime

logger = logging.getLogger(__name__)

V = TypeVar("V")


class SnapshotError(Exception):
    """The snapshot file could not be read or written.

    An I/O failure of this adapter, not a domain outcome, so it stays
    outside the ErrorKind taxonomy. The cause is chained.
    """


# ---------------------------------------------------------------------------
# Codec
# ---------------------------------------------------------------------------

# datetime before date: a datetime is also a date
_ENCODERS: list[tuple[type, Callable[[Any], Any]]] = [
    (datetime, lambda value: value.isoformat()),
    (date, lambda value: value.isoformat()),
    (Money, lambda value: str(value.amount)),
]

# decoders take the raw value and the field name it came from
_DECODERS: dict[type, Callable[[Any, str], Any]] = {
    datetime: parse_datetime,
    date: parse_date,
    Money: lambda value, field: Money.of(value),
    int: lambda value, field: int(value),
    str: lambda value, field: str(value),
}


class DataclassCodec(Generic[V]):
    """Converts a frozen dataclass to and from a JSON-ready dict."""

    def __init__(self, cls: type[V]) -> None:
        self._cls = cls
        self._types = typing.get_type_hints(cls)
        self._fields = [f.name for f in dataclasses.fields(cls)]

    def to_raw(self, value: V) -> dict:
        return {name: self._encode(getattr(value, name)) for name in self._fields}

    def to_domain(self, raw: dict) -> V:
        if not isinstance(raw, dict):
            raise InvalidFormatError(f"Expected an object, got {type(raw).__name__}")
        kwargs = {}
        for name in self._fields:
            if name not in raw:
                raise InvalidFormatError(
                    f"{self._cls.__name__} record is missing '{name}'"
                )
            decode = _DECODERS.get(self._types[name], lambda value, field: value)
            try:
                kwargs[name] = decode(raw[name], name)
            except (TypeError, ValueError, ArithmeticError) as exc:
                raise InvalidFormatError(
                    f"Invalid {name} value {raw[name]!r}", value=str(raw[name])
                ) from exc
        return self._cls(**kwargs)

    @staticmethod
    def _encode(value: Any) -> Any:
        for kind, encode in _ENCODERS:
            if isinstance(value, kind):
                return encode(value)
        return value


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


class JsonSnapshotRepository(SnapshotRepository[V]):

    def __init__(self, file_path: Path, codec: DataclassCodec[V]) -> None:
        self._file_path = file_path
        self._codec = codec

    @property
    def location(self) -> str:
        return str(self._file_path)

    # --- SnapshotRepository interface -----------------------------------------

    def load(self) -> list[V]:
        if not self._file_path.exists():
            logger.warning(
                "snapshot %s not found, starting with an empty store", self._file_path
            )
            return []
        records = self._load_raw()
        if not isinstance(records, list):
            raise InvalidFormatError(f"{self._file_path} does not hold a JSON array")
        values = [self._codec.to_domain(raw) for raw in records]
        logger.info("loaded %d records from %s", len(values), self._file_path)
        return values

    def save(self, values: Sequence[V]) -> None:
        self._persist_raw([self._codec.to_raw(value) for value in values])
        logger.info("saved %d records to %s", len(values), self._file_path)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> Any:
        try:
            text = self._file_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SnapshotError(f"Cannot read {self._file_path}: {exc}") from exc
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise InvalidFormatError(
                f"{self._file_path} is not valid JSON ({exc.msg})", line_no=exc.lineno
            ) from exc

    def _persist_raw(self, records: list[dict]) -> None:
        """Write to a sibling temp file, then swap it in."""
        tmp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
            os.replace(tmp_path, self._file_path)
        except OSError as exc:
            if tmp_path.is_file():
                tmp_path.unlink()
            raise SnapshotError(f"Cannot write {self._file_path}: {exc}") from exc

"""Domain-level exceptions.

Every failure of a store, index or validation rule is one of five kinds.
All of them subclass DomainException so the CLI layer can catch them
uniformly and display user-friendly messages.
"""

from __future__ import annotations

from enum import Enum
from typing import Hashable, Sequence


class ErrorKind(Enum):
    DUPLICATE_KEY = "DuplicateKey"
    NOT_FOUND = "NotFound"
    INVALID_VALUE = "InvalidValue"
    INVALID_FORMAT = "InvalidFormat"
    MISSING_FIELD = "MissingField"


class DomainException(Exception):
    """Base class for all domain errors."""

    kind: ErrorKind

    @property
    def message(self) -> str:
        return str(self)


class DuplicateKeyError(DomainException):
    """An insert targeted a key that is already occupied."""

    kind = ErrorKind.DUPLICATE_KEY

    def __init__(self, key: Hashable, entity: str = "Entity") -> None:
        self.key = key
        self.entity = entity
        super().__init__(f"{entity} with ID {key} already exists.")


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, key: Hashable, entity: str = "Entity") -> None:
        self.key = key
        self.entity = entity
        super().__init__(f"{entity} with ID {key} not found.")


class InvalidValueError(DomainException):
    """A value or mutation would violate a domain invariant."""

    kind = ErrorKind.INVALID_VALUE


class InvalidFormatError(DomainException):
    """Externally supplied text could not be parsed into the expected type."""

    kind = ErrorKind.INVALID_FORMAT

    def __init__(
        self,
        message: str,
        value: str | None = None,
        line_no: int | None = None,
    ) -> None:
        self.value = value
        self.line_no = line_no
        if line_no is not None:
            message = f"Line {line_no}: {message}"
        super().__init__(message)


class MissingFieldError(DomainException):
    """A delimited record supplied fewer fields than required."""

    kind = ErrorKind.MISSING_FIELD

    def __init__(
        self,
        expected: int,
        actual: int,
        line_no: int,
        names: Sequence[str] | None = None,
    ) -> None:
        self.expected = expected
        self.actual = actual
        self.line_no = line_no
        detail = f" ({', '.join(names)})" if names else ""
        super().__init__(
            f"Line {line_no}: expected {expected} fields{detail} but got {actual}."
        )

"""Validation rules invoked before a mutation is committed.

Two families live here:

- *rules* take a whole entity and raise InvalidValueError when it breaks
  an invariant. Stores run them on every insert and update.
- *parsers* turn externally supplied text into typed values and raise
  InvalidFormatError / MissingFieldError with the source line number.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Callable, Sequence, TypeVar

from ems.domain.capabilities import HasQuantity
from ems.domain.exceptions import (
    InvalidFormatError,
    InvalidValueError,
    MissingFieldError,
)

V = TypeVar("V")

Rule = Callable[[V], None]

DATE_FORMAT = "%Y-%m-%d"
MIN_SCORE = 0
MAX_SCORE = 100


# ---------------------------------------------------------------------------
# Entity rules
# ---------------------------------------------------------------------------


def require_non_negative(value: int | Decimal, field: str) -> None:
    if value < 0:
        raise InvalidValueError(f"{field} cannot be negative.")


def non_negative_quantity(entity: HasQuantity) -> None:
    require_non_negative(entity.quantity, "Quantity")


def non_negative_age(entity) -> None:
    require_non_negative(entity.age, "Age")


def score_in_range(entity) -> None:
    if not MIN_SCORE <= entity.score <= MAX_SCORE:
        raise InvalidValueError(
            f"Score must be between {MIN_SCORE} and {MAX_SCORE}, got {entity.score}."
        )


def positive_amount(entity) -> None:
    if not entity.amount.is_positive:
        raise InvalidValueError(
            f"Transaction amount must be greater than zero, got {entity.amount}."
        )


def required_text(field: str) -> Rule:
    """Build a rule rejecting entities whose *field* is blank."""

    def rule(entity) -> None:
        text = getattr(entity, field)
        if not text or not text.strip():
            raise InvalidValueError(f"{field.replace('_', ' ').capitalize()} is required.")

    return rule


# ---------------------------------------------------------------------------
# Text parsers
# ---------------------------------------------------------------------------


def parse_int(text: str, field: str, line_no: int | None = None) -> int:
    try:
        return int(text.strip())
    except (ValueError, AttributeError) as exc:
        raise InvalidFormatError(
            f"invalid {field} format '{text}'.", value=text, line_no=line_no
        ) from exc


def parse_decimal(text: str, field: str, line_no: int | None = None) -> Decimal:
    """Parse a finite decimal; NaN and Infinity are rejected."""
    try:
        value = Decimal(text.strip())
    except (InvalidOperation, AttributeError) as exc:
        raise InvalidFormatError(
            f"invalid {field} format '{text}'.", value=text, line_no=line_no
        ) from exc
    if not value.is_finite():
        raise InvalidFormatError(
            f"invalid {field} format '{text}'.", value=text, line_no=line_no
        )
    return value


def parse_date(text: str, field: str, line_no: int | None = None) -> date:
    """Parse ``YYYY-MM-DD``."""
    try:
        return datetime.strptime(text.strip(), DATE_FORMAT).date()
    except (ValueError, AttributeError) as exc:
        raise InvalidFormatError(
            f"invalid {field} format '{text}' (expected YYYY-MM-DD).",
            value=text,
            line_no=line_no,
        ) from exc


def parse_datetime(text: str, field: str, line_no: int | None = None) -> datetime:
    """Parse an ISO 8601 date-time."""
    try:
        return datetime.fromisoformat(text.strip())
    except (ValueError, AttributeError) as exc:
        raise InvalidFormatError(
            f"invalid {field} format '{text}'.", value=text, line_no=line_no
        ) from exc


def require_fields(
    parts: Sequence[str],
    expected: int,
    line_no: int,
    names: Sequence[str] | None = None,
) -> None:
    if len(parts) < expected:
        raise MissingFieldError(expected, len(parts), line_no, names)

"""Success-or-failure values for callers that prefer not to catch.

Domain operations raise DomainException subclasses. ``attempt`` runs an
operation and turns the outcome into either ``Ok`` or ``Err`` so the
interactive shell can branch on a value instead of an exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from ems.domain.exceptions import DomainException, ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]


def attempt(fn: Callable[..., T], *args, **kwargs) -> Result[T]:
    """Call *fn* and wrap its return value or domain failure.

    Anything that is not a DomainException is a bug, not an outcome,
    and propagates unchanged.
    """
    try:
        return Ok(fn(*args, **kwargs))
    except DomainException as exc:
        return Err(kind=exc.kind, message=str(exc))

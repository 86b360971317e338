"""Discriminated result values returned by every TODO API operation.

A call yields exactly one of ``Ok`` (carrying the decoded value, ``None`` for
delete) or ``Err`` (carrying a ``ClientError``). Both expose ``ok``, ``value``
and ``error`` so callers may branch on attributes or use ``match``::

    match client.get_task_by_id("1"):
        case Ok(value=task):
            ...
        case Err(error=ItemNotFound()):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Literal, NoReturn, TypeAlias, TypeVar

from packages.todo_sdk.errors import ClientError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful call carrying the decoded value."""

    value: T

    @property
    def ok(self) -> Literal[True]:
        return True

    @property
    def error(self) -> None:
        return None

    def unwrap(self) -> T:
        """Return the carried value."""
        return self.value


@dataclass(frozen=True, slots=True)
class Err:
    """Failed call carrying one typed client error."""

    error: ClientError

    @property
    def ok(self) -> Literal[False]:
        return False

    @property
    def value(self) -> None:
        return None

    def unwrap(self) -> NoReturn:
        """Raise the carried client error."""
        raise self.error


Result: TypeAlias = Ok[T] | Err

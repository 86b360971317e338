"""Map one raw HTTP outcome to a typed result.

Priority is fixed: a transport failure wins over any status, 404 is checked
before the success range, and a success body that fails to decode is reported
as a network error because no usable data arrived.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from packages.todo_shared.http import HttpOutcome
from packages.todo_sdk.errors import ItemNotFound, NetworkError, UnknownError
from packages.todo_sdk.result import Err, Ok, Result

T = TypeVar("T")

Decoder = Callable[[bytes], T]

STATUS_NOT_FOUND = 404


def classify(outcome: HttpOutcome, decode: Decoder[T]) -> Result[T]:
    """Return ``Ok`` with the decoded body or ``Err`` with one client error."""
    if outcome.transport_failed:
        return Err(
            NetworkError(
                message=str(outcome.error) if outcome.error is not None else "",
                method=outcome.method,
                url=outcome.url,
                reason="transport",
                cause=outcome.error,
            )
        )

    status = outcome.status_code
    if status == STATUS_NOT_FOUND:
        return Err(ItemNotFound(method=outcome.method, url=outcome.url))

    if 200 <= status <= 299:
        try:
            return Ok(decode(outcome.body))
        except ValueError as exc:
            return Err(
                NetworkError(
                    message=f"Undecodable response body for {outcome.method} {outcome.url}",
                    method=outcome.method,
                    url=outcome.url,
                    reason="decode",
                    cause=exc,
                )
            )

    return Err(UnknownError(code=status, method=outcome.method, url=outcome.url))


def no_content(_: bytes) -> None:
    """Decoder for operations whose success carries no value."""
    return None

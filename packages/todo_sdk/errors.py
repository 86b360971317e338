"""Closed error taxonomy for TODO API client calls.

Exactly three variants exist. Equality compares the variant and, for
``UnknownError``, the status code; diagnostic fields never affect equality so
callers can write ``result.error == ItemNotFound()``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Literal


@dataclass(frozen=True, kw_only=True)
class ClientError(Exception):
    """Base error type for TODO API client failures."""

    kind: ClassVar[str] = "client_error"

    message: str = field(default="", compare=False)
    method: str = field(default="", compare=False)
    url: str = field(default="", compare=False)

    def __str__(self) -> str:
        """Return the human-readable error message."""
        if self.message:
            return self.message
        return f"{self._label()}{self._target()}"

    def _label(self) -> str:
        return self.kind

    def _target(self) -> str:
        return f" for {self.method} {self.url}" if self.url else ""


@dataclass(frozen=True, kw_only=True)
class NetworkError(ClientError):
    """No usable data arrived: transport failure or undecodable success body."""

    kind: ClassVar[str] = "network_error"

    reason: Literal["transport", "decode"] = field(default="transport", compare=False)
    cause: Exception | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, kw_only=True)
class ItemNotFound(ClientError):
    """The server answered HTTP 404."""

    kind: ClassVar[str] = "item_not_found"


@dataclass(frozen=True, kw_only=True)
class UnknownError(ClientError):
    """The server answered any other non-2xx status."""

    kind: ClassVar[str] = "unknown_error"

    code: int

    def _label(self) -> str:
        return f"{self.kind} (HTTP {self.code})"

"""Typed errors for the shared HTTP client helpers."""

from __future__ import annotations

from dataclasses import dataclass

import httpx


@dataclass(frozen=True)
class HttpError(Exception):
    """Base error type for shared HTTP helper failures."""

    message: str

    def __str__(self) -> str:
        """Return the human-readable error message."""
        return self.message


@dataclass(frozen=True)
class HttpClientError(HttpError):
    """Base error for outbound HTTP client call failures."""

    method: str
    url: str
    retryable: bool = False


@dataclass(frozen=True)
class HttpRequestError(HttpClientError):
    """HTTP client transport-level failure (no status was obtained)."""

    cause: Exception | None = None

    @property
    def timed_out(self) -> bool:
        """Return True when the underlying failure was a timeout."""
        return isinstance(self.cause, httpx.TimeoutException)

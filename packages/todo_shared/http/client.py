"""Minimal shared HTTP client wrappers over httpx."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from .errors import HttpRequestError


@dataclass(frozen=True, slots=True)
class HttpOutcome:
    """Raw result of one HTTP exchange: a status and body, or a transport error."""

    method: str
    url: str
    status_code: int | None = None
    body: bytes = b""
    error: HttpRequestError | None = None

    @property
    def transport_failed(self) -> bool:
        """Return True when no HTTP status was obtained."""
        return self.error is not None or self.status_code is None


def _request_error(
    exc: httpx.RequestError, *, method: str, url: str
) -> HttpRequestError:
    """Build a typed transport error from one httpx request failure."""
    request = _failed_request(exc)
    request_url = str(request.url) if request is not None else url
    request_method = request.method if request is not None else method.upper()
    return HttpRequestError(
        message=f"HTTP request failed for {request_method} {request_url}: {exc}",
        method=request_method,
        url=request_url,
        retryable=True,
        cause=exc,
    )


def _failed_request(exc: httpx.RequestError) -> httpx.Request | None:
    """Return the request attached to an httpx error, when one was set."""
    try:
        return exc.request
    except RuntimeError:
        return None


def _outcome(response: httpx.Response) -> HttpOutcome:
    """Build one raw outcome from a fully-read response."""
    return HttpOutcome(
        method=response.request.method,
        url=str(response.request.url),
        status_code=response.status_code,
        body=response.content,
    )


class HttpClient:
    """Thin synchronous wrapper over ``httpx.Client``."""

    def __init__(
        self,
        *,
        base_url: str = "",
        timeout_seconds: float = 10.0,
        headers: Mapping[str, str] | None = None,
        follow_redirects: bool = False,
        transport: httpx.BaseTransport | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        """Create a new shared HTTP client wrapper."""
        self._owns_client = client is None
        self._client = client or httpx.Client(
            base_url=base_url,
            timeout=timeout_seconds,
            headers=dict(headers or {}),
            follow_redirects=follow_redirects,
            transport=transport,
        )

    def close(self) -> None:
        """Close underlying transport resources when owned."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpClient:
        """Enter context manager scope."""
        return self

    def __exit__(self, *_: object) -> None:
        """Exit context manager scope and close client."""
        self.close()

    def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Issue one request and map transport failures to typed errors."""
        try:
            return self._client.request(method=method, url=url, **kwargs)
        except httpx.RequestError as exc:
            raise _request_error(exc, method=method, url=url) from exc

    def exchange(self, method: str, url: str, **kwargs: Any) -> HttpOutcome:
        """Issue one request and report its raw outcome without raising."""
        try:
            response = self.request(method, url, **kwargs)
        except HttpRequestError as exc:
            return HttpOutcome(method=exc.method, url=exc.url, error=exc)
        return _outcome(response)


class AsyncHttpClient:
    """Thin asynchronous wrapper over ``httpx.AsyncClient``."""

    def __init__(
        self,
        *,
        base_url: str = "",
        timeout_seconds: float = 10.0,
        headers: Mapping[str, str] | None = None,
        follow_redirects: bool = False,
        transport: httpx.AsyncBaseTransport | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Create a new shared asynchronous HTTP client wrapper."""
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_seconds,
            headers=dict(headers or {}),
            follow_redirects=follow_redirects,
            transport=transport,
        )

    async def aclose(self) -> None:
        """Close underlying transport resources when owned."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> AsyncHttpClient:
        """Enter async context manager scope."""
        return self

    async def __aexit__(self, *_: object) -> None:
        """Exit async context manager scope and close client."""
        await self.aclose()

    async def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Issue one request and map transport failures to typed errors."""
        try:
            return await self._client.request(method=method, url=url, **kwargs)
        except httpx.RequestError as exc:
            raise _request_error(exc, method=method, url=url) from exc

    async def exchange(self, method: str, url: str, **kwargs: Any) -> HttpOutcome:
        """Issue one request and report its raw outcome without raising."""
        try:
            response = await self.request(method, url, **kwargs)
        except HttpRequestError as exc:
            return HttpOutcome(method=exc.method, url=exc.url, error=exc)
        return _outcome(response)

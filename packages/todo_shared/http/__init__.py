"""Public shared HTTP API for internal TODO client packages."""

from .client import AsyncHttpClient, HttpClient, HttpOutcome
from .errors import HttpClientError, HttpError, HttpRequestError

__all__ = [
    "AsyncHttpClient",
    "HttpClient",
    "HttpClientError",
    "HttpError",
    "HttpOutcome",
    "HttpRequestError",
]

"""Structured logging context carried in a ``ContextVar``.

Fields bound here are copied onto every record by ``ContextFilter``. Because
the storage is a context variable, concurrent asyncio tasks each see their own
operation fields.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

_LOG_CONTEXT: ContextVar[dict[str, str]] = ContextVar("todo_log_context", default={})


def _stringified(values: dict[str, object]) -> dict[str, str]:
    """Drop ``None`` values and stringify the rest."""
    return {str(key): str(value) for key, value in values.items() if value is not None}


def get_context() -> dict[str, str]:
    """Return a shallow copy of the current logging context."""
    return dict(_LOG_CONTEXT.get())


def bind_context(**values: object) -> None:
    """Merge values into the current logging context until cleared."""
    extra = _stringified(values)
    if extra:
        _LOG_CONTEXT.set({**_LOG_CONTEXT.get(), **extra})


def clear_context(*keys: str) -> None:
    """Remove the named keys, or every key when none are given."""
    if not keys:
        _LOG_CONTEXT.set({})
        return
    _LOG_CONTEXT.set(
        {key: value for key, value in _LOG_CONTEXT.get().items() if key not in keys}
    )


@contextmanager
def log_context(**values: object) -> Iterator[dict[str, str]]:
    """Bind values for the duration of a block and restore the previous context."""
    token = _LOG_CONTEXT.set({**_LOG_CONTEXT.get(), **_stringified(values)})
    try:
        yield get_context()
    finally:
        _LOG_CONTEXT.reset(token)

"""Stdout logging setup for the TODO client library and CLI.

One handler is installed on the root logger. Records are rendered either as
newline-delimited JSON or as a single plain line, and in both cases carry the
fields bound through ``packages.todo_shared.logging.context``.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any, TextIO

from . import fields
from .context import bind_context, get_context

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ContextFilter(logging.Filter):
    """Copy the bound logging context onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        context = get_context()
        record.context = context
        for key, value in context.items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True


class JsonFormatter(logging.Formatter):
    """Render one record as a compact JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            fields.TIMESTAMP: datetime.fromtimestamp(record.created, UTC).isoformat(),
            fields.LEVEL: record.levelname,
            fields.LOGGER: record.name,
            fields.MESSAGE: record.getMessage(),
        }
        payload.update(_record_context(record))
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


class PlainFormatter(logging.Formatter):
    """Render one record as ``time level logger message key=value ...``."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)-7s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _record_context(record)
        if not context:
            return line
        pairs = " ".join(f"{key}={context[key]}" for key in sorted(context))
        return f"{line} {pairs}"


def _record_context(record: logging.LogRecord) -> dict[str, str]:
    """Return the context dict attached by ``ContextFilter``, if any."""
    context = getattr(record, "context", None)
    return context if isinstance(context, dict) else {}


def _resolve_level(level: str) -> str:
    """Normalize a level name, rejecting names logging does not define."""
    normalized = level.strip().upper()
    if normalized not in _LEVELS:
        raise ValueError(f"Unknown log level: {level!r}")
    return normalized


def configure_logging(
    *,
    level: str = "INFO",
    json_output: bool = True,
    service: str | None = None,
    environment: str | None = None,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Install one stream handler on the root logger and return it.

    Existing root handlers are removed first, so calling this again replaces
    the previous setup rather than duplicating output.
    """
    resolved = _resolve_level(level)
    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.setLevel(resolved)

    handler = logging.StreamHandler(stream=stream if stream is not None else sys.stdout)
    handler.setLevel(resolved)
    handler.addFilter(ContextFilter())
    handler.setFormatter(JsonFormatter() if json_output else PlainFormatter())
    root.addHandler(handler)

    bind_context(**{fields.SERVICE: service or None, fields.ENVIRONMENT: environment or None})
    return handler


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a standard library logger."""
    return logging.getLogger(name)

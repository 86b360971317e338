"""Unit tests for shared logging configuration and context propagation."""

from __future__ import annotations

import io
import json
import logging
from typing import Iterator

import httpx
import pytest

from packages.todo_shared.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_context,
    get_logger,
    log_context,
)


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    clear_context()
    yield
    clear_context()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_log_context_restores_previous_values() -> None:
    """Values bound in a block should disappear after it exits."""
    bind_context(service="todo")

    with log_context(operation="tasks.get", status_code=None) as bound:
        assert bound == {"service": "todo", "operation": "tasks.get"}

    assert get_context() == {"service": "todo"}


def test_clear_context_removes_selected_keys() -> None:
    """Named keys should be cleared while others remain."""
    bind_context(a=1, b=2)

    clear_context("a")

    assert get_context() == {"b": "2"}


def test_json_logging_includes_bound_context() -> None:
    """JSON lines should carry core fields plus context values."""
    stream = io.StringIO()
    configure_logging(level="info", json_output=True, service="todo-client", stream=stream)

    with log_context(operation="tasks.list"):
        get_logger("tests").info("hello")

    payload = json.loads(stream.getvalue().strip())
    assert payload["message"] == "hello"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "tests"
    assert payload["service"] == "todo-client"
    assert payload["operation"] == "tasks.list"


def test_plain_logging_appends_sorted_context_pairs() -> None:
    """Plain lines should end with ``key=value`` pairs in key order."""
    stream = io.StringIO()
    configure_logging(level="DEBUG", json_output=False, stream=stream)

    with log_context(url="http://t/todos", operation="tasks.list"):
        get_logger("tests").debug("plain")

    assert stream.getvalue().rstrip().endswith("operation=tasks.list url=http://t/todos")


def test_configure_logging_replaces_existing_handlers() -> None:
    """Repeated configuration should not duplicate output."""
    stream = io.StringIO()
    configure_logging(stream=stream)
    configure_logging(stream=stream)

    get_logger("tests").warning("once")

    assert stream.getvalue().count("once") == 1


def test_configure_logging_rejects_unknown_levels() -> None:
    """Unknown level names should fail fast."""
    with pytest.raises(ValueError):
        configure_logging(level="chatty")


def test_sdk_completion_log_carries_operation_fields() -> None:
    """Client calls should log one completion line with outcome fields."""
    from packages.todo_sdk import TodoApiClient

    stream = io.StringIO()
    configure_logging(level="INFO", json_output=True, stream=stream)

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, request=request)

    with TodoApiClient(transport=httpx.MockTransport(handler)) as client:
        client.get_task_by_id("1")

    lines = [json.loads(line) for line in stream.getvalue().splitlines()]
    completion = [line for line in lines if line.get("event") == "api_completion"]
    assert len(completion) == 1
    assert completion[0]["level"] == "WARNING"
    assert completion[0]["operation"] == "tasks.get"
    assert completion[0]["http_method"] == "GET"
    assert completion[0]["status_code"] == "500"
    assert completion[0]["outcome"] == "failure"
    assert completion[0]["error_kind"] == "unknown_error"

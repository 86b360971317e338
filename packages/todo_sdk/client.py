"""Synchronous and asynchronous TODO API clients.

Every operation issues exactly one HTTP request and returns exactly one
``Result``; HTTP and network failures are reported as ``Err`` values, never
raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from time import perf_counter
from typing import Any, Callable, Generic, TypeVar
from urllib.parse import quote

import httpx

from packages.todo_shared.http import AsyncHttpClient, HttpClient, HttpOutcome
from packages.todo_shared.logging import fields, get_logger, log_context
from packages.todo_sdk.classifier import classify, no_content
from packages.todo_sdk.config import TODOS_PATH, TodoSdkConfig
from packages.todo_sdk.models import NewTask, Task, decode_task, decode_task_list
from packages.todo_sdk.result import Result

T = TypeVar("T")

_LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ApiCall(Generic[T]):
    """One prepared API request and the decoder for its success body."""

    operation: str
    method: str
    path: str
    decode: Callable[[bytes], T]
    body: bytes | None = None

    def request_kwargs(self) -> dict[str, Any]:
        """Return httpx keyword arguments for the request body, if any."""
        return {} if self.body is None else {"content": self.body}


def _task_path(task_id: str) -> str:
    return f"{TODOS_PATH}/{quote(str(task_id), safe='')}"


def list_tasks_call() -> ApiCall[list[Task]]:
    """Prepare ``GET /todos``."""
    return ApiCall("tasks.list", "GET", TODOS_PATH, decode_task_list)


def get_task_call(task_id: str) -> ApiCall[Task]:
    """Prepare ``GET /todos/{id}``."""
    return ApiCall("tasks.get", "GET", _task_path(task_id), decode_task)


def create_task_call(new_task: NewTask) -> ApiCall[Task]:
    """Prepare ``POST /todos`` with the create payload."""
    return ApiCall(
        "tasks.create", "POST", TODOS_PATH, decode_task, body=new_task.to_json()
    )


def update_task_call(task: Task) -> ApiCall[Task]:
    """Prepare ``PUT /todos/{id}`` with the full task payload."""
    return ApiCall(
        "tasks.update", "PUT", _task_path(task.id), decode_task, body=task.to_json()
    )


def delete_task_call(task_id: str) -> ApiCall[None]:
    """Prepare ``DELETE /todos/{id}``."""
    return ApiCall("tasks.delete", "DELETE", _task_path(task_id), no_content)


def _complete(call: ApiCall[T], outcome: HttpOutcome, started: float) -> Result[T]:
    """Classify one outcome and emit the completion log line."""
    result = classify(outcome, call.decode)
    with log_context(
        **{
            fields.EVENT: fields.COMPLETION_EVENT,
            fields.STATUS_CODE: outcome.status_code,
            fields.OUTCOME: "success" if result.ok else "failure",
            fields.ERROR_KIND: None if result.ok else result.error.kind,
            fields.DURATION_MS: round((perf_counter() - started) * 1000, 3),
        }
    ):
        if result.ok:
            _LOGGER.info("TODO API call succeeded")
        else:
            _LOGGER.warning("TODO API call failed: %s", result.error)
    return result


def _log_request() -> None:
    with log_context(**{fields.EVENT: fields.REQUEST_EVENT}):
        _LOGGER.debug("TODO API request")


def _call_context(call: ApiCall[Any], base_url: str) -> dict[str, object]:
    return {
        fields.OPERATION: call.operation,
        fields.HTTP_METHOD: call.method,
        fields.URL: f"{base_url}{call.path}",
    }


class TodoApiClient:
    """Blocking client for the TODO REST API."""

    def __init__(
        self,
        *,
        config: TodoSdkConfig | None = None,
        transport: httpx.BaseTransport | None = None,
        http: HttpClient | None = None,
    ) -> None:
        """Create one client from config, optionally over an injected transport."""
        self._config = TodoSdkConfig() if config is None else config
        self._owns_http = http is None
        self._http = http or HttpClient(
            base_url=self._config.base_url,
            timeout_seconds=self._config.timeout_seconds,
            headers=self._config.default_headers(),
            transport=transport,
        )

    def close(self) -> None:
        """Close the underlying HTTP client when owned."""
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> TodoApiClient:
        """Enter context manager scope."""
        return self

    def __exit__(self, *_: object) -> None:
        """Exit context manager scope and close HTTP resources."""
        self.close()

    def get_all_tasks(self) -> Result[list[Task]]:
        """Return every task in server order."""
        return self._execute(list_tasks_call())

    def get_task_by_id(self, task_id: str) -> Result[Task]:
        """Return one task by id."""
        return self._execute(get_task_call(task_id))

    def add_task_to_user(
        self, user_id: str, title: str, completed: bool = False
    ) -> Result[Task]:
        """Create one task for a user and return the server's copy."""
        new_task = NewTask(user_id=user_id, title=title, completed=completed)
        return self._execute(create_task_call(new_task))

    def update_task(self, task: Task) -> Result[Task]:
        """Replace one task and return the server's copy."""
        return self._execute(update_task_call(task))

    def delete_task_by_id(self, task_id: str) -> Result[None]:
        """Delete one task by id."""
        return self._execute(delete_task_call(task_id))

    def _execute(self, call: ApiCall[T]) -> Result[T]:
        with log_context(**_call_context(call, self._config.base_url)):
            _log_request()
            started = perf_counter()
            outcome = self._http.exchange(
                call.method, call.path, **call.request_kwargs()
            )
            return _complete(call, outcome, started)


class AsyncTodoApiClient:
    """Non-blocking client for the TODO REST API."""

    def __init__(
        self,
        *,
        config: TodoSdkConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        http: AsyncHttpClient | None = None,
    ) -> None:
        """Create one client from config, optionally over an injected transport."""
        self._config = TodoSdkConfig() if config is None else config
        self._owns_http = http is None
        self._http = http or AsyncHttpClient(
            base_url=self._config.base_url,
            timeout_seconds=self._config.timeout_seconds,
            headers=self._config.default_headers(),
            transport=transport,
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP client when owned."""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> AsyncTodoApiClient:
        """Enter async context manager scope."""
        return self

    async def __aexit__(self, *_: object) -> None:
        """Exit async context manager scope and close HTTP resources."""
        await self.aclose()

    async def get_all_tasks(self) -> Result[list[Task]]:
        """Return every task in server order."""
        return await self._execute(list_tasks_call())

    async def get_task_by_id(self, task_id: str) -> Result[Task]:
        """Return one task by id."""
        return await self._execute(get_task_call(task_id))

    async def add_task_to_user(
        self, user_id: str, title: str, completed: bool = False
    ) -> Result[Task]:
        """Create one task for a user and return the server's copy."""
        new_task = NewTask(user_id=user_id, title=title, completed=completed)
        return await self._execute(create_task_call(new_task))

    async def update_task(self, task: Task) -> Result[Task]:
        """Replace one task and return the server's copy."""
        return await self._execute(update_task_call(task))

    async def delete_task_by_id(self, task_id: str) -> Result[None]:
        """Delete one task by id."""
        return await self._execute(delete_task_call(task_id))

    async def _execute(self, call: ApiCall[T]) -> Result[T]:
        with log_context(**_call_context(call, self._config.base_url)):
            _log_request()
            started = perf_counter()
            outcome = await self._http.exchange(
                call.method, call.path, **call.request_kwargs()
            )
            return _complete(call, outcome, started)

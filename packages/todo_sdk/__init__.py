"""Public TODO API SDK interface for library and CLI callers."""

from packages.todo_sdk.classifier import classify
from packages.todo_sdk.client import AsyncTodoApiClient, TodoApiClient
from packages.todo_sdk.config import TodoSdkConfig
from packages.todo_sdk.errors import (
    ClientError,
    ItemNotFound,
    NetworkError,
    UnknownError,
)
from packages.todo_sdk.models import NewTask, Task
from packages.todo_sdk.result import Err, Ok, Result

__all__ = [
    "AsyncTodoApiClient",
    "ClientError",
    "Err",
    "ItemNotFound",
    "NetworkError",
    "NewTask",
    "Ok",
    "Result",
    "Task",
    "TodoApiClient",
    "TodoSdkConfig",
    "UnknownError",
    "classify",
]

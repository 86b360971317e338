"""TODO API command-line client implemented with Typer."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable

import typer

from packages.todo_sdk import (
    ClientError,
    ItemNotFound,
    NetworkError,
    Result,
    Task,
    TodoApiClient,
    TodoSdkConfig,
    UnknownError,
)
from packages.todo_shared.config import TodoSettings, load_settings
from packages.todo_shared.logging import configure_logging

SUCCESS_EXIT_CODE = 0
NOT_FOUND_EXIT_CODE = 3
NETWORK_ERROR_EXIT_CODE = 4
UNKNOWN_ERROR_EXIT_CODE = 5

_EXIT_CODES: dict[type[ClientError], int] = {
    ItemNotFound: NOT_FOUND_EXIT_CODE,
    NetworkError: NETWORK_ERROR_EXIT_CODE,
    UnknownError: UNKNOWN_ERROR_EXIT_CODE,
}


class LogLevel(str, Enum):
    """Log levels accepted by the --log-level option."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass(frozen=True)
class CliConfig:
    """Global CLI runtime options propagated to SDK calls."""

    settings: TodoSettings
    as_json: bool


def _build_client(config: TodoSdkConfig) -> TodoApiClient:
    """Return one SDK client; tests replace this to inject a mock transport."""
    return TodoApiClient(config=config)


def _serialize(value: Any) -> Any:
    """Convert result values to JSON-serializable structures."""
    if isinstance(value, Task):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, list):
        return [_serialize(item) for item in value]
    return value


def _render_task(task: dict[str, Any]) -> str:
    """Render one task as a checklist line."""
    mark = "x" if task.get("completed") else " "
    return f"[{mark}] {task.get('id')}: {task.get('title')} (user {task.get('userId')})"


def _emit_output(value: Any, as_json: bool) -> None:
    """Render command output in requested format."""
    data = _serialize(value)
    if as_json:
        typer.echo(json.dumps(data, sort_keys=True, separators=(",", ":")))
        return
    if data is None:
        typer.echo("ok")
        return
    if isinstance(data, list):
        if len(data) == 0:
            typer.echo("No tasks found.")
            return
        typer.echo("\n".join(_render_task(item) for item in data))
        return
    typer.echo(_render_task(data))


def _emit_error(error: ClientError, as_json: bool) -> None:
    """Render one typed client error to stderr."""
    if as_json:
        payload: dict[str, Any] = {"error": error.kind, "message": str(error)}
        if isinstance(error, UnknownError):
            payload["code"] = error.code
        typer.echo(json.dumps(payload, sort_keys=True), err=True)
        return
    typer.echo(f"error: {error}", err=True)


def _run_command(cfg: CliConfig, invoke: Callable[[TodoApiClient], Result[Any]]) -> None:
    """Execute one SDK call and map its result to process semantics."""
    with _build_client(TodoSdkConfig.from_settings(cfg.settings)) as client:
        result = invoke(client)

    if not result.ok:
        _emit_error(result.error, cfg.as_json)
        raise typer.Exit(code=_EXIT_CODES.get(type(result.error), UNKNOWN_ERROR_EXIT_CODE))

    _emit_output(result.value, cfg.as_json)
    raise typer.Exit(code=SUCCESS_EXIT_CODE)


def _require_config(ctx: typer.Context) -> CliConfig:
    """Return required CLI config from Typer context."""
    config = ctx.obj
    if not isinstance(config, CliConfig):
        raise RuntimeError("CLI configuration not initialized")
    return config


app = typer.Typer(no_args_is_help=True, help="TODO API command-line interface")


@app.callback()
def main(
    ctx: typer.Context,
    base_url: str | None = typer.Option(None, help="TODO API base URL"),
    timeout: float | None = typer.Option(
        None, min=0.001, help="Request timeout in seconds"
    ),
    config: Path | None = typer.Option(
        None, "--config", help="Path to a YAML settings file"
    ),
    log_level: LogLevel | None = typer.Option(
        None, case_sensitive=False, help="Log level override"
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON output"),
) -> None:
    """Resolve settings and store global options for all commands."""
    settings = load_settings(
        cli_params={
            "api": {"base_url": base_url, "timeout_seconds": timeout},
            "logging": {"level": log_level.value if log_level else None},
        },
        config_path=config,
    )
    configure_logging(
        level=settings.logging.level,
        json_output=settings.logging.json_output,
        service=settings.logging.service,
        environment=settings.logging.environment,
        stream=sys.stderr,
    )
    ctx.obj = CliConfig(settings=settings, as_json=as_json)


@app.command("list")
def list_command(ctx: typer.Context) -> None:
    """List every task."""
    _run_command(_require_config(ctx), lambda client: client.get_all_tasks())


@app.command("get")
def get_command(
    ctx: typer.Context, task_id: str = typer.Argument(..., help="Task id")
) -> None:
    """Show one task."""
    _run_command(_require_config(ctx), lambda client: client.get_task_by_id(task_id))


@app.command("create")
def create_command(
    ctx: typer.Context,
    user_id: str = typer.Argument(..., help="Owning user id"),
    title: str = typer.Argument(..., help="Task title"),
    completed: bool = typer.Option(False, "--completed", help="Mark as completed"),
) -> None:
    """Create one task for a user."""
    _run_command(
        _require_config(ctx),
        lambda client: client.add_task_to_user(user_id, title, completed),
    )


@app.command("update")
def update_command(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task id"),
    user_id: str = typer.Argument(..., help="Owning user id"),
    title: str = typer.Argument(..., help="Task title"),
    completed: bool = typer.Option(False, "--completed", help="Mark as completed"),
) -> None:
    """Replace one task."""
    task = Task(user_id=user_id, id=task_id, title=title, completed=completed)
    _run_command(_require_config(ctx), lambda client: client.update_task(task))


@app.command("delete")
def delete_command(
    ctx: typer.Context, task_id: str = typer.Argument(..., help="Task id")
) -> None:
    """Delete one task."""
    _run_command(
        _require_config(ctx), lambda client: client.delete_task_by_id(task_id)
    )


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()

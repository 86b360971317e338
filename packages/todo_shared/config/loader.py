"""Configuration loading with deterministic precedence.

The cascade is always:
1) CLI params
2) Environment variables
3) ~/.config/todo-client/todo.yaml
4) Built-in model defaults

Environment variable format:
- Prefix: ``TODO_``
- Nested keys: ``__`` separator
- Example: ``TODO_API__BASE_URL=http://localhost:3000`` -> ``api.base_url``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, Mapping

from .models import DEFAULT_CONFIG_PATH, TodoSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> TodoSettings:
    """Resolve settings from CLI params, environment, YAML file and defaults.

    ``cli_params`` is a nested mapping shaped like the settings model; ``None``
    leaves are dropped so unset CLI options never mask lower sources.
    """
    resolved_path = (
        Path(config_path).expanduser() if config_path is not None else DEFAULT_CONFIG_PATH
    )

    class _BoundSettings(TodoSettings):
        _config_path: ClassVar[Path] = resolved_path

    return _BoundSettings(**_drop_none(cli_params or {}))


def _drop_none(values: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively drop ``None`` leaves and empty nested mappings."""
    output: dict[str, Any] = {}
    for key, value in values.items():
        if isinstance(value, Mapping):
            nested = _drop_none(value)
            if nested:
                output[str(key)] = nested
            continue
        if value is not None:
            output[str(key)] = value
    return output

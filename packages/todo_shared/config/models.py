"""Typed configuration models for TODO client runtime settings."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "todo-client" / "todo.yaml"
DEFAULT_BASE_URL = "http://jsonplaceholder.typicode.com"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_USER_AGENT = "todo-client/0.1"


class ApiSettings(BaseModel):
    """Remote TODO API endpoint settings."""

    base_url: str = Field(default=DEFAULT_BASE_URL, min_length=1)
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=1)

    @field_validator("base_url")
    @classmethod
    def _require_http_scheme(cls, value: str) -> str:
        """Reject base URLs that httpx cannot route."""
        stripped = value.strip().rstrip("/")
        if not stripped.startswith(("http://", "https://")):
            raise ValueError("api.base_url must start with http:// or https://")
        return stripped


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    json_output: bool = False
    service: str = "todo-client"
    environment: str = "dev"


class TodoSettings(BaseSettings):
    """Root runtime settings resolved from init/env/yaml/default sources."""

    model_config = SettingsConfigDict(
        env_prefix="TODO_",
        env_nested_delimiter="__",
        extra="ignore",
        nested_model_default_partial_update=True,
    )

    api: ApiSettings = Field(default_factory=ApiSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    _config_path: ClassVar[Path] = DEFAULT_CONFIG_PATH

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Apply precedence: init > env > yaml > model defaults."""
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(
                settings_cls,
                yaml_file=cls._config_path,
                yaml_file_encoding="utf-8",
            ),
        )

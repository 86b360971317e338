"""Runtime configuration primitives for TODO API clients."""

from __future__ import annotations

from dataclasses import dataclass

from packages.todo_shared.config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    TodoSettings,
)

TODOS_PATH = "/todos"


@dataclass(frozen=True, slots=True)
class TodoSdkConfig:
    """Connection defaults for one TODO API client."""

    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_settings(cls, settings: TodoSettings) -> TodoSdkConfig:
        """Build client config from resolved runtime settings."""
        return cls(
            base_url=settings.api.base_url,
            timeout_seconds=settings.api.timeout_seconds,
            user_agent=settings.api.user_agent,
        )

    def default_headers(self) -> dict[str, str]:
        """Return headers sent with every request."""
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }

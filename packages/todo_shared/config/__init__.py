"""Public API for shared TODO client configuration utilities."""

from .loader import load_settings
from .models import (
    DEFAULT_BASE_URL,
    DEFAULT_CONFIG_PATH,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    ApiSettings,
    LoggingSettings,
    TodoSettings,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_USER_AGENT",
    "ApiSettings",
    "LoggingSettings",
    "TodoSettings",
    "load_settings",
]

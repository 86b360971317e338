"""Canonical logging field names for the TODO client packages.

These constants define a stable key set for structured logs and context
propagation, so the SDK, the CLI and tests agree on one vocabulary.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EVENT = "event"

# API operation fields.
OPERATION = "operation"
HTTP_METHOD = "http_method"
URL = "url"
STATUS_CODE = "status_code"
OUTCOME = "outcome"
ERROR_KIND = "error_kind"
DURATION_MS = "duration_ms"
REQUEST_EVENT = "api_request"
COMPLETION_EVENT = "api_completion"

# Common process-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"

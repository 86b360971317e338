"""Shared fixtures for TODO SDK tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def fixture_body() -> Callable[[str], bytes]:
    """Return a loader for stub response bodies stored under ``fixtures/``."""

    def _load(name: str) -> bytes:
        return (FIXTURES / f"{name}.json").read_bytes()

    return _load

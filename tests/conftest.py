"""Pytest bootstrap: test environment, app client and async backend."""

from __future__ import annotations

import os

import pytest
from fastapi.testclient import TestClient

os.environ["SECRET_KEY"] = "test-secret-key"  # noqa: S105
os.environ["API_BASE_URL"] = ""


@pytest.fixture()
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture()
def client() -> TestClient:
    """Return FastAPI TestClient bound to app."""
    from src.authdemo.main import app

    return TestClient(app)

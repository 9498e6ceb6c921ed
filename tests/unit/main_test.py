"""Unit tests for the application shell: health and page routes."""

from __future__ import annotations

import importlib
from http import HTTPStatus

from fastapi.testclient import TestClient


def test_app_creation() -> None:
    """Application object is created with right title."""
    from src.authdemo.main import app

    assert app.title == "Auth Demo"


def test_health_endpoint(client: TestClient) -> None:
    """GET /health returns ok + timestamp."""
    resp = client.get("/health")
    assert resp.status_code == HTTPStatus.OK
    data = resp.json()
    assert data["status"] == "ok"
    assert "ts" in data


def test_home_redirects_to_auth(client: TestClient) -> None:
    resp = client.get("/", follow_redirects=False)
    assert resp.status_code == HTTPStatus.SEE_OTHER
    assert resp.headers["location"] == "/auth"


def test_auth_page_defaults_to_sign_in(client: TestClient) -> None:
    resp = client.get("/auth")
    assert resp.status_code == HTTPStatus.OK
    assert "Sign in to your account" in resp.text
    assert 'id="login-form"' in resp.text


def test_auth_page_signup_mode(client: TestClient) -> None:
    resp = client.get("/auth", params={"mode": "signup"})
    assert resp.status_code == HTTPStatus.OK
    assert "Create your account" in resp.text
    assert 'id="confirm-password"' in resp.text


def test_login_and_signup_pages(client: TestClient) -> None:
    for route, marker in (("/login", "login-form"), ("/signup", "signup-form")):
        resp = client.get(route)
        assert resp.status_code == HTTPStatus.OK, route
        assert marker in resp.text


def test_pages_render_without_errors_or_focus(client: TestClient) -> None:
    resp = client.get("/login")
    assert 'role="alert"' not in resp.text
    assert "autofocus" not in resp.text


def test_static_assets_cached(client: TestClient) -> None:
    resp = client.get("/static/js/forms.js")
    assert resp.status_code == HTTPStatus.OK
    assert resp.headers["cache-control"] == "public, max-age=600"


def test_basic_import_module() -> None:
    """Smoke test that the root entrypoint can be imported."""
    mod = importlib.import_module("main")
    assert hasattr(mod, "app")

"""End-to-end form flows: HTMX fragments, redirects and the session token."""

from __future__ import annotations

from http import HTTPStatus
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from src.authdemo.api.routes.api_auth import get_demo_auth_service
from src.authdemo.main import app

HX_HEADERS = {"HX-Request": "true"}

DEMO_LOGIN = {"email": "test@example.com", "password": "password123"}


@pytest.fixture()
def broken_auth_service():
    service = MagicMock()
    service.process_login.side_effect = RuntimeError("boom")
    app.dependency_overrides[get_demo_auth_service] = lambda: service
    yield service
    app.dependency_overrides.pop(get_demo_auth_service, None)


class TestLoginForm:
    def test_empty_submit_shows_inline_errors(self, client: TestClient) -> None:
        resp = client.post("/auth/login", data={}, headers=HX_HEADERS)
        assert resp.status_code == HTTPStatus.OK
        assert "Email is required" in resp.text
        assert "Password is required" in resp.text
        assert 'id="email-error"' in resp.text
        assert "autofocus" in resp.text
        assert "data-redirect" not in resp.text

    def test_values_persist_after_failed_validation(self, client: TestClient) -> None:
        resp = client.post(
            "/auth/login", data={"email": "test@example.com", "password": ""}, headers=HX_HEADERS
        )
        assert 'value="test@example.com"' in resp.text
        assert "Password is required" in resp.text

    def test_invalid_email(self, client: TestClient) -> None:
        resp = client.post(
            "/auth/login",
            data={"email": "invalid-email", "password": "password123"},
            headers=HX_HEADERS,
        )
        assert "Please enter a valid email" in resp.text

    def test_htmx_success_notifies_and_schedules_redirect(self, client: TestClient) -> None:
        resp = client.post("/auth/login", data=DEMO_LOGIN, headers=HX_HEADERS)
        assert resp.status_code == HTTPStatus.OK
        assert "Login successful!" in resp.text
        assert 'data-redirect="/dashboard"' in resp.text

        dashboard = client.get("/dashboard", follow_redirects=False)
        assert dashboard.status_code == HTTPStatus.OK
        assert "Welcome!" in dashboard.text

    def test_plain_post_success_redirects(self, client: TestClient) -> None:
        resp = client.post("/auth/login", data=DEMO_LOGIN, follow_redirects=False)
        assert resp.status_code == HTTPStatus.SEE_OTHER
        assert resp.headers["location"] == "/dashboard"

    def test_rejected_credentials(self, client: TestClient) -> None:
        resp = client.post(
            "/auth/login", data={"email": "a@b.com", "password": "wrong"}, headers=HX_HEADERS
        )
        assert "Invalid email or password" in resp.text
        assert "notification-error" in resp.text
        assert "data-redirect" not in resp.text

        dashboard = client.get("/dashboard", follow_redirects=False)
        assert dashboard.status_code == HTTPStatus.SEE_OTHER

    def test_plain_post_failure_renders_page(self, client: TestClient) -> None:
        resp = client.post("/auth/login", data={"email": "a@b.com", "password": "wrong"})
        assert resp.status_code == HTTPStatus.OK
        assert "Sign in to your account" in resp.text
        assert "Invalid email or password" in resp.text

    def test_api_crash_shows_network_error(
        self, client: TestClient, broken_auth_service: MagicMock
    ) -> None:
        resp = client.post("/auth/login", data=DEMO_LOGIN, headers=HX_HEADERS)
        assert resp.status_code == HTTPStatus.OK
        assert "A network error occurred. Please try again." in resp.text
        assert "data-redirect" not in resp.text
        broken_auth_service.process_login.assert_called_once()

    def test_session_cookie_not_secure_by_default(self, client: TestClient) -> None:
        resp = client.post("/auth/login", data=DEMO_LOGIN, headers=HX_HEADERS)
        cookie = resp.headers["set-cookie"].lower()
        assert "httponly" in cookie
        assert "secure" not in cookie

    def test_error_markup_is_cleared_client_side(self, client: TestClient) -> None:
        resp = client.post("/auth/login", data={"password": "x"}, headers=HX_HEADERS)
        assert 'aria-invalid="true"' in resp.text
        assert 'aria-describedby="email-error"' in resp.text

        script = client.get("/static/js/forms.js").text
        assert "input[aria-invalid='true']" in script
        assert 'input.id + "-error"' in script


class TestSignupForm:
    def test_empty_submit(self, client: TestClient) -> None:
        resp = client.post("/auth/signup", data={}, headers=HX_HEADERS)
        assert "Email is required" in resp.text
        assert "Password is required" in resp.text
        assert "Please confirm your password" in resp.text

    def test_mismatch(self, client: TestClient) -> None:
        resp = client.post(
            "/auth/signup",
            data={
                "email": "test@example.com",
                "password": "password123",
                "confirm_password": "differentpassword",
            },
            headers=HX_HEADERS,
        )
        assert "Passwords do not match" in resp.text
        assert 'id="confirm-password-error"' in resp.text

    def test_existing_email(self, client: TestClient) -> None:
        resp = client.post(
            "/auth/signup",
            data={
                "email": "existing@example.com",
                "password": "password123",
                "confirm_password": "password123",
            },
            headers=HX_HEADERS,
        )
        assert "Email already exists" in resp.text
        assert "data-redirect" not in resp.text

    def test_success_redirects_to_login(self, client: TestClient) -> None:
        resp = client.post(
            "/auth/signup",
            data={
                "email": "newuser@example.com",
                "password": "password123",
                "confirm_password": "password123",
            },
            headers=HX_HEADERS,
        )
        assert "Account created successfully" in resp.text
        assert 'data-redirect="/login"' in resp.text

    def test_strength_shown_with_form(self, client: TestClient) -> None:
        resp = client.post(
            "/auth/signup",
            data={"email": "", "password": "abc", "confirm_password": ""},
            headers=HX_HEADERS,
        )
        assert "Weak" in resp.text


class TestPasswordStrength:
    def test_meter_fragment(self, client: TestClient) -> None:
        resp = client.post("/auth/password-strength", data={"password": "abcdefghij"})
        assert resp.status_code == HTTPStatus.OK
        assert "Strong" in resp.text
        assert "strength-3" in resp.text

    def test_empty_password_renders_nothing(self, client: TestClient) -> None:
        resp = client.post("/auth/password-strength", data={"password": ""})
        assert resp.text.strip() == ""


class TestDashboardAndLogout:
    def test_dashboard_requires_token(self, client: TestClient) -> None:
        resp = client.get("/dashboard", follow_redirects=False)
        assert resp.status_code == HTTPStatus.SEE_OTHER
        assert resp.headers["location"] == "/auth"

    def test_logout_clears_token(self, client: TestClient) -> None:
        client.post("/auth/login", data=DEMO_LOGIN, headers=HX_HEADERS)
        assert client.get("/dashboard", follow_redirects=False).status_code == HTTPStatus.OK

        resp = client.post("/auth/logout", follow_redirects=False)
        assert resp.status_code == HTTPStatus.SEE_OTHER
        assert resp.headers["location"] == "/auth"

        assert client.get("/dashboard", follow_redirects=False).status_code == HTTPStatus.SEE_OTHER

    def test_htmx_logout(self, client: TestClient) -> None:
        resp = client.post("/auth/logout", headers=HX_HEADERS)
        assert resp.headers["HX-Redirect"] == "/auth"

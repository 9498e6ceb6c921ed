"""Sign-in form controller."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from src.authdemo.core.config import DASHBOARD_ROUTE
from src.authdemo.forms.base import CredentialController, Navigator, validate_email
from src.authdemo.forms.models import (
    EMAIL,
    PASSWORD,
    FormState,
    Notification,
    ValidationErrors,
)

if TYPE_CHECKING:
    from src.authdemo.auth.session import SessionStore
    from src.authdemo.client.remote import AuthResponse, RemoteAuthClient

LOGIN_SUCCESS = "Login successful!"


class LoginCredentialController(CredentialController):
    fields = (EMAIL, PASSWORD)
    field_ids = {EMAIL: "email", PASSWORD: "password"}
    failure_message = "Invalid email or password"

    def __init__(
        self,
        client: RemoteAuthClient,
        navigator: Navigator,
        session: SessionStore,
        dashboard_route: str = DASHBOARD_ROUTE,
    ) -> None:
        super().__init__(client, navigator)
        self.session = session
        self.dashboard_route = dashboard_route

    def validate(self, state: Mapping[str, str]) -> ValidationErrors:
        errors = ValidationErrors()
        validate_email(state, errors)
        if not state.get(PASSWORD):
            errors.add(PASSWORD, "Password is required")
        return errors

    async def _send(self, state: FormState) -> AuthResponse:
        return await self.client.login(state[EMAIL], state[PASSWORD])

    def _on_success(self, response: AuthResponse) -> None:
        self.notification = Notification.success(LOGIN_SUCCESS)
        if response.token:
            self.session.save(response.token)
        self.navigator.push(self.dashboard_route)

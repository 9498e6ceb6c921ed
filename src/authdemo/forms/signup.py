"""Sign-up form controller with password strength feedback."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from src.authdemo.core.config import LOGIN_ROUTE
from src.authdemo.forms.base import CredentialController, Navigator, validate_email
from src.authdemo.forms.models import (
    CONFIRM_PASSWORD,
    EMAIL,
    PASSWORD,
    FormState,
    Notification,
    PasswordStrength,
    ValidationErrors,
)

if TYPE_CHECKING:
    from src.authdemo.client.remote import AuthResponse, RemoteAuthClient

MIN_PASSWORD_LENGTH = 6
STRONG_PASSWORD_LENGTH = 10

SIGNUP_SUCCESS = "Account created successfully!"


def password_strength(password: str) -> PasswordStrength:
    """Length-based hint shown under the password input; never blocks submit."""
    if not password:
        return PasswordStrength.NONE
    if len(password) < MIN_PASSWORD_LENGTH:
        return PasswordStrength.WEAK
    if len(password) < STRONG_PASSWORD_LENGTH:
        return PasswordStrength.MEDIUM
    return PasswordStrength.STRONG


class SignupCredentialController(CredentialController):
    fields = (EMAIL, PASSWORD, CONFIRM_PASSWORD)
    field_ids = {
        EMAIL: "signup-email",
        PASSWORD: "signup-password",
        CONFIRM_PASSWORD: "confirm-password",
    }
    failure_message = "Failed to create account"

    def __init__(
        self,
        client: RemoteAuthClient,
        navigator: Navigator,
        login_route: str = LOGIN_ROUTE,
    ) -> None:
        super().__init__(client, navigator)
        self.login_route = login_route

    @property
    def strength(self) -> PasswordStrength:
        return password_strength(self.state[PASSWORD])

    def validate(self, state: Mapping[str, str]) -> ValidationErrors:
        errors = ValidationErrors()
        validate_email(state, errors)

        password = state.get(PASSWORD, "")
        if not password:
            errors.add(PASSWORD, "Password is required")
        elif len(password) < MIN_PASSWORD_LENGTH:
            errors.add(PASSWORD, f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

        confirm = state.get(CONFIRM_PASSWORD, "")
        if not confirm:
            errors.add(CONFIRM_PASSWORD, "Please confirm your password")
        elif confirm != password:
            errors.add(CONFIRM_PASSWORD, "Passwords do not match")
        return errors

    async def _send(self, state: FormState) -> AuthResponse:
        # confirm_password stays local
        return await self.client.signup(state[EMAIL], state[PASSWORD])

    def _on_success(self, response: AuthResponse) -> None:
        self.notification = Notification.success(response.message or SIGNUP_SUCCESS)
        self.navigator.push(self.login_route)

"""Shared submission flow for the credential form controllers."""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, ClassVar, Protocol

from src.authdemo.client.remote import TransportError
from src.authdemo.forms.models import (
    EMAIL,
    FormState,
    Notification,
    ValidationErrors,
)

if TYPE_CHECKING:
    from src.authdemo.client.remote import AuthResponse, RemoteAuthClient

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")

NETWORK_ERROR = "A network error occurred. Please try again."


class Navigator(Protocol):
    def push(self, route: str) -> None: ...


def validate_email(state: Mapping[str, str], errors: ValidationErrors) -> None:
    """Apply the email rules common to both forms."""
    email = state.get(EMAIL, "")
    if not email:
        errors.add(EMAIL, "Email is required")
    elif not EMAIL_PATTERN.search(email):
        errors.add(EMAIL, "Please enter a valid email")


class CredentialController(ABC):
    """Holds one form's state and runs validate -> call -> notify -> navigate."""

    fields: ClassVar[tuple[str, ...]]
    # DOM ids of the inputs, for focus placement.
    field_ids: ClassVar[dict[str, str]]
    failure_message: ClassVar[str]

    def __init__(self, client: RemoteAuthClient, navigator: Navigator) -> None:
        self.client = client
        self.navigator = navigator
        self.state: FormState = dict.fromkeys(self.fields, "")
        self.errors = ValidationErrors()
        self.notification: Notification | None = None
        self.loading = False

    @abstractmethod
    def validate(self, state: Mapping[str, str]) -> ValidationErrors:
        """Return every field error for ``state`` in form order."""

    @abstractmethod
    async def _send(self, state: FormState) -> AuthResponse:
        """Issue the network call for a valid form."""

    @abstractmethod
    def _on_success(self, response: AuthResponse) -> None:
        """Set the success notification and navigate."""

    @property
    def focus_field_id(self) -> str | None:
        """DOM id of the input that should take focus after a failed submit."""
        name = self.errors.first_invalid_field
        return self.field_ids.get(name) if name else None

    def load(self, values: Mapping[str, str]) -> None:
        """Replace form values wholesale, e.g. from a posted form."""
        for name in self.fields:
            self.state[name] = values.get(name) or ""

    def change(self, name: str, value: str) -> None:
        """Record an edit and drop the error shown for that field."""
        if name not in self.fields:
            raise KeyError(name)
        self.state[name] = value
        self.errors.discard(name)

    def reset(self) -> None:
        self.state = dict.fromkeys(self.fields, "")
        self.errors = ValidationErrors()
        self.notification = None

    async def submit(self, state: Mapping[str, str] | None = None) -> bool:
        """Validate and, when clean, send the form.

        Returns True only when the server accepted the credentials.
        """
        if self.loading:
            logger.debug("%s: submit ignored while a request is in flight", type(self).__name__)
            return False
        if state is not None:
            self.load(state)

        self.errors = self.validate(self.state)
        if self.errors:
            return False

        self.loading = True
        self.notification = None
        try:
            response = await self._send(self.state)
        except TransportError:
            self.notification = Notification.error(NETWORK_ERROR)
            return False
        finally:
            self.loading = False

        if response.accepted:
            self._on_success(response)
            return True

        self.notification = Notification.error(response.message or self.failure_message)
        return False

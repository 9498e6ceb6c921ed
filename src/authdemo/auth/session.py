"""Explicit holder for the mock auth token."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

TOKEN_KEY = "auth_token"


class SessionStore:
    """Token store over a mutable mapping, normally ``request.session``."""

    def __init__(self, backing: MutableMapping[str, Any]) -> None:
        self._backing = backing

    def init(self) -> SessionStore:
        """Drop a blank or malformed token left behind by an earlier session."""
        value = self._backing.get(TOKEN_KEY)
        if value is not None and (not isinstance(value, str) or not value):
            self._backing.pop(TOKEN_KEY, None)
        return self

    @property
    def token(self) -> str | None:
        return self._backing.get(TOKEN_KEY)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def save(self, token: str) -> None:
        self._backing[TOKEN_KEY] = token

    def clear(self) -> None:
        self._backing.pop(TOKEN_KEY, None)

"""HTTP client for the auth API used by the form controllers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from src.authdemo.core.config import API_TIMEOUT

logger = logging.getLogger(__name__)

LOGIN_PATH = "/api/auth/login"
SIGNUP_PATH = "/api/auth/signup"


class TransportError(Exception):
    """The auth API could not be reached or answered with a non-JSON body."""


@dataclass(frozen=True)
class AuthResponse:
    ok: bool
    status_code: int
    success: bool = False
    message: str | None = None
    user: dict[str, Any] | None = None
    token: str | None = None

    @property
    def accepted(self) -> bool:
        """True when both the HTTP status and the payload report success."""
        return self.ok and self.success


class RemoteAuthClient:
    """Posts credentials as JSON to the auth endpoints.

    Wraps an ``httpx.AsyncClient``; the owner is responsible for closing it
    (``aclose`` or ``async with``).
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = API_TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            transport=transport,
            timeout=timeout,
        )

    async def __aenter__(self) -> RemoteAuthClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def login(self, email: str, password: str) -> AuthResponse:
        return await self._post(LOGIN_PATH, {"email": email, "password": password})

    async def signup(self, email: str, password: str) -> AuthResponse:
        return await self._post(SIGNUP_PATH, {"email": email, "password": password})

    async def _post(self, path: str, body: dict[str, str]) -> AuthResponse:
        try:
            response = await self._client.post(path, json=body)
        except httpx.HTTPError as e:
            logger.warning("Auth API request to %s failed: %s", path, e)
            raise TransportError(str(e)) from e

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(f"Non-JSON response from {path}") from e
        if not isinstance(data, dict):
            raise TransportError(f"Unexpected payload from {path}")

        return AuthResponse(
            ok=response.is_success,
            status_code=response.status_code,
            success=data.get("success") is True,
            message=data.get("message"),
            user=data.get("user"),
            token=data.get("token"),
        )

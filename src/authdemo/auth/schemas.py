"""Pydantic schemas for the demo auth API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, field_validator

# Request payloads

class CredentialsRequest(BaseModel):
    """JSON payload for login and signup.

    Fields are optional so that missing values reach the handler and get
    the API's own 400 message instead of a framework 422.
    """

    email: str | None = None
    password: str | None = None

    @field_validator("email", "password", mode="before")
    @classmethod
    def _coerce_scalar(cls, value: Any) -> str | None:
        """Stringify non-string JSON values; empty ones count as missing."""
        if value is None or isinstance(value, str):
            return value
        if not value:
            return None
        return str(value)


# Response models

class DemoUser(BaseModel):
    """Public info about the signed-in demo user."""

    id: str
    email: str


class LoginResponse(BaseModel):
    """Successful login payload with a mock token."""

    success: bool = True
    user: DemoUser
    token: str


class SignupResponse(BaseModel):
    """Successful signup payload."""

    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Rejected request payload."""

    success: bool = False
    message: str

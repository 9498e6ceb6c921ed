from __future__ import annotations

from typing import Final

from decouple import config


def _optional_str(name: str) -> str | None:
    """Return env var as stripped string, or None if unset/blank."""
    value = config(name, default="", cast=str).strip()
    return value or None


ENVIRONMENT: Final[str] = config("ENVIRONMENT", default="production")

SECRET_KEY: Final[str] = config("SECRET_KEY", default="super-secret-dev-key")

APP_VERSION: Final[str] = config("APP_VERSION", default="dev")

LOG_LEVEL: Final[str] = config("LOG_LEVEL", default="INFO").upper()

# Marks the session cookie Secure; enable when served over HTTPS.
SESSION_HTTPS_ONLY: Final[bool] = config("SESSION_HTTPS_ONLY", default=False, cast=bool)

# --- Remote auth API ---
# Unset means the forms call this same application in-process.
API_BASE_URL: Final[str | None] = _optional_str("API_BASE_URL")
API_TIMEOUT: Final[float] = config("API_TIMEOUT", default=10.0, cast=float)

# --- Demo credentials ---
DEMO_LOGIN_EMAIL: Final[str] = config("DEMO_LOGIN_EMAIL", default="test@example.com")
DEMO_LOGIN_PASSWORD: Final[str] = config("DEMO_LOGIN_PASSWORD", default="password123")
DEMO_EXISTING_EMAIL: Final[str] = config(
    "DEMO_EXISTING_EMAIL", default="existing@example.com"
)

# --- Post-submit navigation ---
DASHBOARD_ROUTE: Final[str] = config("DASHBOARD_ROUTE", default="/dashboard")
LOGIN_ROUTE: Final[str] = config("LOGIN_ROUTE", default="/login")
AUTH_ROUTE: Final[str] = config("AUTH_ROUTE", default="/auth")

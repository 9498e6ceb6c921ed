"""Demo authentication logic (Pure Python).

Credentials are checked against fixed configured values; nothing is stored
and no password is hashed.
"""

from __future__ import annotations

import logging
import re
import time

from src.authdemo.auth.schemas import DemoUser, LoginResponse, SignupResponse
from src.authdemo.core import config as settings
from src.authdemo.core.result import ServiceResult

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
MIN_PASSWORD_LENGTH = 6

DEMO_USER_ID = "1"
TOKEN_PREFIX = "demo-jwt-token-"

MISSING_FIELDS = "Email and password are required"
INVALID_EMAIL = "Invalid email format"
INVALID_CREDENTIALS = "Invalid email or password"
PASSWORD_TOO_SHORT = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
EMAIL_EXISTS = "Email already exists"
ACCOUNT_CREATED = "Account created successfully"


def validate_email_format(email: str) -> ServiceResult[str]:
    """Validate email format and return it unchanged."""
    if EMAIL_RE.fullmatch(email):
        return ServiceResult.ok(email)
    return ServiceResult.fail(INVALID_EMAIL)


def issue_demo_token() -> str:
    """Return a mock token stamped with the current epoch milliseconds."""
    return f"{TOKEN_PREFIX}{int(time.time() * 1000)}"


class DemoAuthService:
    """Encapsulates the demo credential checks to keep routers clean."""

    def __init__(
        self,
        login_email: str = settings.DEMO_LOGIN_EMAIL,
        login_password: str = settings.DEMO_LOGIN_PASSWORD,
        existing_email: str = settings.DEMO_EXISTING_EMAIL,
    ) -> None:
        self.login_email = login_email
        self.login_password = login_password
        self.existing_email = existing_email

    def _check_credentials(
        self, email: str | None, password: str | None
    ) -> ServiceResult[str]:
        if not email or not password:
            return ServiceResult.fail(MISSING_FIELDS)
        return validate_email_format(email)

    def process_login(
        self, email: str | None, password: str | None
    ) -> ServiceResult[LoginResponse]:
        """Check the fixed demo login and issue a mock token."""
        checked = self._check_credentials(email, password)
        if not checked.success:
            return ServiceResult.fail(checked.error)

        if email != self.login_email or password != self.login_password:
            logger.info("Rejected demo login for %s", email)
            return ServiceResult.fail(INVALID_CREDENTIALS, status_code=401)

        return ServiceResult.ok(
            LoginResponse(
                user=DemoUser(id=DEMO_USER_ID, email=email),
                token=issue_demo_token(),
            )
        )

    def process_signup(
        self, email: str | None, password: str | None
    ) -> ServiceResult[SignupResponse]:
        """Pretend to create an account; only the reserved email collides."""
        checked = self._check_credentials(email, password)
        if not checked.success:
            return ServiceResult.fail(checked.error)

        if len(password) < MIN_PASSWORD_LENGTH:
            return ServiceResult.fail(PASSWORD_TOO_SHORT)

        if email == self.existing_email:
            return ServiceResult.fail(EMAIL_EXISTS, status_code=409)

        return ServiceResult.ok(SignupResponse(message=ACCOUNT_CREATED))

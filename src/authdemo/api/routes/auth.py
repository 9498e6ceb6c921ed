"""HTMX form routes: sign-in, sign-up, strength meter and logout."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from typing import Annotated

import httpx
from fastapi import APIRouter, Depends, Form, Request, Response
from fastapi.responses import HTMLResponse, RedirectResponse

from src.authdemo.auth.session import SessionStore
from src.authdemo.auth.views import FormRenderer, HtmxNavigator, is_hx, templates
from src.authdemo.client.remote import RemoteAuthClient
from src.authdemo.core.config import API_BASE_URL, AUTH_ROUTE
from src.authdemo.forms.login import LoginCredentialController
from src.authdemo.forms.models import CONFIRM_PASSWORD, EMAIL, PASSWORD
from src.authdemo.forms.signup import SignupCredentialController, password_strength

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

# Host used when the forms call this same app through the ASGI transport.
IN_PROCESS_BASE_URL = "http://authdemo.internal"

# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------


async def get_remote_auth_client(request: Request) -> AsyncGenerator[RemoteAuthClient, None]:
    """Yield a client for the auth API, remote when configured."""
    if API_BASE_URL:
        client = RemoteAuthClient(API_BASE_URL)
    else:
        client = RemoteAuthClient(
            IN_PROCESS_BASE_URL,
            transport=httpx.ASGITransport(app=request.app, raise_app_exceptions=False),
        )
    async with client:
        yield client


def get_session_store(request: Request) -> SessionStore:
    return SessionStore(request.session).init()


# ---------------------------------------------------------------------------
# Form submissions
# ---------------------------------------------------------------------------


@router.post("/login", response_class=HTMLResponse)
async def login(
    request: Request,
    client: Annotated[RemoteAuthClient, Depends(get_remote_auth_client)],
    session: Annotated[SessionStore, Depends(get_session_store)],
    email: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
) -> Response:
    """Validate the sign-in form and forward it to the auth API."""
    navigator = HtmxNavigator()
    controller = LoginCredentialController(client, navigator, session)

    await controller.submit({EMAIL: email, PASSWORD: password})
    if controller.errors:
        logger.debug("Login form rejected locally: %s", list(controller.errors))

    renderer = FormRenderer(request, "login").with_controller(controller)
    return renderer.render_submission(navigator)


@router.post("/signup", response_class=HTMLResponse)
async def signup(
    request: Request,
    client: Annotated[RemoteAuthClient, Depends(get_remote_auth_client)],
    email: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
    confirm_password: Annotated[str, Form()] = "",
) -> Response:
    """Validate the sign-up form and forward email and password to the auth API."""
    navigator = HtmxNavigator()
    controller = SignupCredentialController(client, navigator)

    await controller.submit(
        {EMAIL: email, PASSWORD: password, CONFIRM_PASSWORD: confirm_password}
    )

    renderer = FormRenderer(request, "signup").with_controller(controller)
    return renderer.render_submission(navigator)


@router.post("/password-strength", response_class=HTMLResponse)
async def strength_meter(
    request: Request,
    password: Annotated[str, Form()] = "",
) -> HTMLResponse:
    """Render the strength meter fragment shown under the sign-up password."""
    ctx = {"strength": password_strength(password)}
    return templates.TemplateResponse(request, "_password_strength.html", ctx)


@router.post("/logout")
async def logout(
    request: Request,
    session: Annotated[SessionStore, Depends(get_session_store)],
) -> Response:
    """Forget the stored token and go back to the sign-in page."""
    session.clear()
    if is_hx(request):
        return Response(status_code=200, headers={"HX-Redirect": AUTH_ROUTE})
    return RedirectResponse(url=AUTH_ROUTE, status_code=303)

"""Presentation layer: Handles HTML generation and Response building."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from fastapi import Request, Response
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates

from src.authdemo.core.config import APP_VERSION, ENVIRONMENT

if TYPE_CHECKING:
    from src.authdemo.forms.base import CredentialController

# Setup Templates
BASE_DIR = Path(__file__).resolve().parents[1]
templates = Jinja2Templates(directory=str(BASE_DIR / "web" / "templates"))

templates.env.globals["STATIC_VERSION"] = APP_VERSION
templates.env.globals["ENVIRONMENT"] = ENVIRONMENT

FORM_TEMPLATES = {"login": "_login_form.html", "signup": "_signup_form.html"}


def is_hx(request: Request) -> bool:
    """Return True if the request came from HTMX (HX-Request: true)."""
    return request.headers.get("HX-Request", "").lower() == "true"


class HtmxNavigator:
    """Records where a controller wants to go; the renderer acts on it."""

    def __init__(self) -> None:
        self.location: str | None = None

    def push(self, route: str) -> None:
        self.location = route


class FormRenderer:
    """Builder pattern for auth form pages and HTMX fragments."""

    def __init__(self, request: Request, mode: str) -> None:
        self.request = request
        self.mode = mode
        self._context: dict[str, Any] = {"mode": mode, "active_tab": mode}

    def with_controller(self, controller: CredentialController) -> FormRenderer:
        self._context.update(
            {
                "form": controller.state,
                "errors": controller.errors,
                "notification": controller.notification,
                "focus_id": controller.focus_field_id,
            }
        )
        strength = getattr(controller, "strength", None)
        if strength is not None:
            self._context["strength"] = strength
        return self

    def with_redirect(self, url: str) -> FormRenderer:
        self._context["redirect_url"] = url
        return self

    def render_page(self, status_code: int = 200) -> Response:
        return templates.TemplateResponse(
            self.request, "auth.html", self._context, status_code=status_code
        )

    def render_form(self) -> Response:
        """Render the form fragment HTMX swaps in place of the old one."""
        return templates.TemplateResponse(
            self.request, FORM_TEMPLATES[self.mode], self._context
        )

    def render_submission(self, navigator: HtmxNavigator) -> Response:
        """Answer a form post: fragment for HTMX, page or 303 otherwise."""
        if navigator.location:
            if not is_hx(self.request):
                return RedirectResponse(url=navigator.location, status_code=303)
            self.with_redirect(navigator.location)
        if is_hx(self.request):
            return self.render_form()
        return self.render_page()

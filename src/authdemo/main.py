"""authdemo ASGI entrypoint (FastAPI + HTMX)."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Annotated

from fastapi import Depends, FastAPI, Request, Response
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from starlette.middleware.base import RequestResponseEndpoint
from starlette.middleware.sessions import SessionMiddleware

from src.authdemo.api.routes.api_auth import router as api_auth_router
from src.authdemo.api.routes.auth import get_session_store
from src.authdemo.api.routes.auth import router as auth_router
from src.authdemo.auth.session import SessionStore
from src.authdemo.auth.views import FormRenderer, templates
from src.authdemo.core.config import AUTH_ROUTE, SECRET_KEY, SESSION_HTTPS_ONLY

logger = logging.getLogger(__name__)

app = FastAPI(title="Auth Demo")

app.add_middleware(
    SessionMiddleware,
    secret_key=SECRET_KEY,
    https_only=SESSION_HTTPS_ONLY,
)
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(TrustedHostMiddleware, allowed_hosts=["*"])

BASE_DIR = Path(__file__).resolve().parent
STATIC_DIR = BASE_DIR / "web" / "static"

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


@app.middleware("http")
async def add_cache_headers(
    request: Request,
    call_next: RequestResponseEndpoint,
) -> Response:
    response = await call_next(request)
    if request.url.path.startswith("/static/"):
        response.headers["Cache-Control"] = "public, max-age=600"
    return response


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "ts": datetime.now(UTC).isoformat()}


@app.get("/")
async def home() -> RedirectResponse:
    return RedirectResponse(url=AUTH_ROUTE, status_code=303)


@app.get("/auth", response_class=HTMLResponse, name="auth")
async def auth_page(request: Request, mode: str = "login") -> Response:
    if mode not in ("login", "signup"):
        mode = "login"
    return FormRenderer(request, mode).render_page()


@app.get("/login", response_class=HTMLResponse, name="login")
async def login_page(request: Request) -> Response:
    return FormRenderer(request, "login").render_page()


@app.get("/signup", response_class=HTMLResponse, name="signup")
async def signup_page(request: Request) -> Response:
    return FormRenderer(request, "signup").render_page()


@app.get("/dashboard", response_class=HTMLResponse, name="dashboard")
async def dashboard_page(
    request: Request,
    session: Annotated[SessionStore, Depends(get_session_store)],
) -> Response:
    if not session.is_authenticated:
        logger.info("Dashboard requested without a token, redirecting")
        return RedirectResponse(url=AUTH_ROUTE, status_code=303)
    return templates.TemplateResponse(
        request, "dashboard.html", {"active_tab": "dashboard"}
    )


app.include_router(api_auth_router)
app.include_router(auth_router)

"""Demo auth JSON API: login and signup against fixed credentials."""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.authdemo.auth.schemas import CredentialsRequest, ErrorResponse
from src.authdemo.auth.service import DemoAuthService
from src.authdemo.core.result import ServiceResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["api"])

INTERNAL_ERROR = "Internal server error"


def get_demo_auth_service() -> DemoAuthService:
    return DemoAuthService()


async def _read_credentials(request: Request) -> CredentialsRequest:
    """Parse the JSON body; raises ValueError on malformed input."""
    return CredentialsRequest.model_validate(await request.json())


def _to_response(result: ServiceResult[Any]) -> JSONResponse:
    if not result.success:
        body = ErrorResponse(message=result.error)
        return JSONResponse(body.model_dump(), status_code=result.status_code)
    data: BaseModel = result.data
    return JSONResponse(data.model_dump(exclude_none=True))


def _internal_error() -> JSONResponse:
    body = ErrorResponse(message=INTERNAL_ERROR)
    return JSONResponse(body.model_dump(), status_code=500)


@router.post("/login")
async def login(
    request: Request,
    service: Annotated[DemoAuthService, Depends(get_demo_auth_service)],
) -> JSONResponse:
    """Validate demo credentials and return a mock token."""
    try:
        payload = await _read_credentials(request)
        result = service.process_login(payload.email, payload.password)
    except ValueError:
        logger.exception("Login error")
        return _internal_error()
    return _to_response(result)


@router.post("/signup")
async def signup(
    request: Request,
    service: Annotated[DemoAuthService, Depends(get_demo_auth_service)],
) -> JSONResponse:
    """Validate a signup request; no account is stored."""
    try:
        payload = await _read_credentials(request)
        result = service.process_signup(payload.email, payload.password)
    except ValueError:
        logger.exception("Signup error")
        return _internal_error()
    return _to_response(result)

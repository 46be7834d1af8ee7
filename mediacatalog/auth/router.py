"""
Credential service: HTTP routes.

Only HTTP concerns live here: route declarations, status codes,
response models, dependency injection and forwarding to the controller.
"""
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from mediacatalog.auth.controller import (
    login as login_controller,
    register as register_controller,
)
from mediacatalog.auth.schemas import (
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    TokenResponse,
)
from mediacatalog.database import get_db
from mediacatalog.rate_limit import limiter, login_limit, register_limit
from mediacatalog.shared.auth.config import AuthSettings
from mediacatalog.shared.auth.dependencies import get_auth_settings

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_200_OK,
    summary="Register a new account",
)
@limiter.limit(register_limit)
async def register(
    request: Request,
    body: RegisterRequest,
    session: AsyncSession = Depends(get_db),
) -> RegisterResponse:
    return await register_controller(session, body)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login with email + password",
)
@limiter.limit(login_limit)
async def login(
    request: Request,
    body: LoginRequest,
    session: AsyncSession = Depends(get_db),
    auth_settings: AuthSettings = Depends(get_auth_settings),
) -> TokenResponse:
    return await login_controller(session, body, auth_settings)

"""
Credential service: controller (request orchestration layer).

Receives validated input from the router, calls the service, composes the
response model. No business logic and no framework validation here.
"""
from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from mediacatalog.auth.schemas import (
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    TokenResponse,
    UserResponse,
)
from mediacatalog.auth.service import (
    authenticate_user,
    create_access_token,
    register_user,
)
from mediacatalog.exceptions import InvalidCredentials
from mediacatalog.shared.auth.config import AuthSettings

logger = logging.getLogger(__name__)


async def register(session: AsyncSession, body: RegisterRequest) -> RegisterResponse:
    user = await register_user(
        session,
        name=body.name,
        email=body.email,
        password=body.password,
    )
    logger.info("Registered user %s", user.id)
    return RegisterResponse(
        message="User registered successfully",
        user=UserResponse.model_validate(user),
    )


async def login(
    session: AsyncSession,
    body: LoginRequest,
    auth_settings: AuthSettings,
) -> TokenResponse:
    try:
        user = await authenticate_user(session, body.email, body.password)
    except InvalidCredentials:
        logger.info("Failed login for %s", body.email)
        raise

    token = create_access_token(user.id, user.email, auth_settings)
    logger.info("User %s logged in", user.id)
    return TokenResponse(
        message="Login successful",
        token=token,
        expires_in=auth_settings.expire_seconds,
    )

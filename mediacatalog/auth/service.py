"""
Credential service: pure business logic.

Rules:
  - Zero FastAPI routing; errors are the preset exceptions from
    mediacatalog.exceptions.
  - Only the SQLAlchemy async session passed in is touched.
  - Emails are stored lower-cased, so the unique index on users.email is
    also the case-insensitive uniqueness guarantee.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from jose import jwt
from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from mediacatalog.auth.models import User
from mediacatalog.exceptions import InvalidCredentials, UserAlreadyExists
from mediacatalog.shared.auth.config import AuthSettings

logger = logging.getLogger(__name__)

password_context = CryptContext(schemes=["argon2"], deprecated="auto")


def normalize_email(email: str) -> str:
    return email.strip().lower()


async def get_user_by_email(session: AsyncSession, email: str) -> User | None:
    result = await session.execute(
        select(User).where(User.email == normalize_email(email))
    )
    return result.scalar_one_or_none()


async def register_user(
    session: AsyncSession,
    *,
    name: str,
    email: str,
    password: str,
) -> User:
    """
    Create a new account.

    Uses flush() so the caller can read user.id without committing; the
    request-scoped session commits once the response is ready. A concurrent
    registration of the same address that slips past the lookup is caught by
    the unique index and reported the same way.
    """
    email = normalize_email(email)
    if await get_user_by_email(session, email) is not None:
        raise UserAlreadyExists()

    user = User(
        name=name,
        email=email,
        password_hash=password_context.hash(password),
    )
    session.add(user)
    try:
        await session.flush()
    except IntegrityError:
        logger.info("Concurrent registration for %s lost the race", email)
        raise UserAlreadyExists()
    await session.refresh(user)
    return user


async def authenticate_user(session: AsyncSession, email: str, password: str) -> User:
    """Verify credentials and return the User; unknown email and bad password look the same."""
    user = await get_user_by_email(session, email)
    if user is None:
        raise InvalidCredentials()
    if not password_context.verify(password, user.password_hash):
        raise InvalidCredentials()
    return user


def create_access_token(
    user_id: int,
    email: str,
    settings: AuthSettings,
    *,
    now: datetime | None = None,
) -> str:
    now = now or datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "email": email,
        "iat": now,
        "exp": now + timedelta(seconds=settings.expire_seconds),
        "iss": settings.issuer,
        "aud": settings.audience,
    }
    return jwt.encode(payload, settings.secret, algorithm=settings.algorithm)

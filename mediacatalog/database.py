from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from mediacatalog.shared.database import AsyncSessionFactory, get_session


def get_session_factory(request: Request) -> AsyncSessionFactory:
    factory = getattr(request.app.state, "session_factory", None)
    if factory is None:
        raise RuntimeError("Database not initialized")
    return factory


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """One session per request: commit on success, roll back on error."""
    async for session in get_session(get_session_factory(request)):
        yield session

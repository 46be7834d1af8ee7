from mediacatalog.shared.database.engine import (
    AsyncSessionFactory,
    Base,
    create_schema,
    dispose,
    get_async_session_factory,
    get_session,
)

__all__ = [
    "AsyncSessionFactory",
    "Base",
    "create_schema",
    "dispose",
    "get_async_session_factory",
    "get_session",
]

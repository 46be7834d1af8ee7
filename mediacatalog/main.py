import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from mediacatalog import __version__
from mediacatalog.auth.router import router as auth_router
from mediacatalog.config import Settings, get_settings
from mediacatalog.media.router import router as media_router
from mediacatalog.rate_limit import configure_limiter
from mediacatalog.shared.database import (
    AsyncSessionFactory,
    create_schema,
    dispose,
    get_async_session_factory,
)
from mediacatalog.shared.middleware import (
    error_envelope_middleware,
    http_exception_handler,
    rate_limit_exceeded_handler,
    request_id_middleware,
    validation_exception_handler,
)
from mediacatalog.storage import ensure_upload_dir

logger = logging.getLogger(__name__)


# ── OpenAPI metadata ──────────────────────────────────────────────────────────

_DESCRIPTION = """
## Media Catalog API

A private list of movies and shows per user.

* **Auth**: register with name, email and password; log in to receive a
  24-hour bearer token.
* **Media**: create, list, view, update and delete your own entries, with an
  optional poster image uploaded as multipart form data.

### Authentication
All `/api/media` endpoints require:
```
Authorization: Bearer <token>
```

### Error shape
All errors return a consistent JSON envelope:
```json
{ "error": "Human-readable message", "code": "not_found", "request_id": "..." }
```
"""

_TAGS_METADATA = [
    {
        "name": "auth",
        "description": "Registration and login (email + password).",
    },
    {
        "name": "media",
        "description": (
            "Owner-scoped CRUD on media entries. Entries owned by another user "
            "behave exactly like entries that do not exist (404)."
        ),
    },
]


# ── Health schema ─────────────────────────────────────────────────────────────

class HealthResponse(BaseModel):
    status: str
    service: str


# ── App factory ───────────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    owns_factory = app.state.session_factory is None
    if owns_factory:
        app.state.session_factory = get_async_session_factory(settings.database_url)
    if settings.database_auto_create:
        await create_schema(app.state.session_factory)
    logger.info("Media catalog started (env=%s)", settings.env_name)
    yield
    if owns_factory:
        await dispose(app.state.session_factory)
        app.state.session_factory = None


def create_app(
    settings: Settings | None = None,
    session_factory: AsyncSessionFactory | None = None,
) -> FastAPI:
    """
    Build the ASGI app.

    ``session_factory`` is the store handle; when omitted, the lifespan
    builds one from ``settings.database_url`` and disposes it on shutdown.
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(levelname)s:%(name)s: %(message)s",
    )

    app = FastAPI(
        title="Media Catalog",
        version=__version__,
        description=_DESCRIPTION,
        openapi_tags=_TAGS_METADATA,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.auth_settings = settings.auth
    app.state.session_factory = session_factory

    # Attach rate limiter state before middleware
    app.state.limiter = configure_limiter(settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Middleware is applied in reverse-registration order (last added = outermost).
    # CORS must be outermost so every response, errors included, carries CORS headers.
    app.add_middleware(SlowAPIMiddleware)
    app.middleware("http")(error_envelope_middleware)
    app.middleware("http")(request_id_middleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=600,
    )

    app.include_router(auth_router, prefix="/api")
    app.include_router(media_router, prefix="/api")

    app.mount(
        settings.upload_url_prefix,
        StaticFiles(directory=ensure_upload_dir(settings)),
        name="uploads",
    )

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", service="mediacatalog")

    return app

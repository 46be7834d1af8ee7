from collections.abc import AsyncGenerator, Generator
from datetime import datetime, timedelta, timezone

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

from mediacatalog.auth.models import User  # noqa: F401 - register with Base
from mediacatalog.auth.service import create_access_token
from mediacatalog.client import AuthSession, CatalogClient
from mediacatalog.config import Settings
from mediacatalog.main import create_app
from mediacatalog.media.models import MediaEntry  # noqa: F401 - register with Base
from mediacatalog.shared.database import create_schema, dispose, get_async_session_factory

TEST_JWT_SECRET = "test-secret"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}",
        database_auto_create=True,
        upload_dir=str(tmp_path / "uploads"),
        jwt_secret=TEST_JWT_SECRET,
        rate_limit_enabled=False,
        log_level="WARNING",
    )


@pytest.fixture
def client(settings: Settings) -> Generator[TestClient, None, None]:
    with TestClient(create_app(settings)) as c:
        yield c


@pytest_asyncio.fixture
async def session_factory(settings: Settings):
    factory = get_async_session_factory(settings.database_url)
    await create_schema(factory)
    yield factory
    await dispose(factory)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def api_client(settings: Settings, session_factory) -> AsyncGenerator[CatalogClient, None]:
    """Client library wired to the app in-process, sharing the test loop."""
    app = create_app(settings, session_factory=session_factory)
    transport = httpx.ASGITransport(app=app)
    async with CatalogClient("http://test", AuthSession(), transport=transport) as c:
        yield c


def register(client: TestClient, email: str, password: str = "pw1", name: str = "Tester") -> dict:
    resp = client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password},
    )
    assert resp.status_code == 200, resp.text
    return resp.json()["user"]


def login_headers(client: TestClient, email: str, password: str = "pw1") -> dict[str, str]:
    resp = client.post("/api/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture
def auth_headers(client: TestClient) -> dict[str, str]:
    register(client, "owner@example.com")
    return login_headers(client, "owner@example.com")


@pytest.fixture
def other_headers(client: TestClient) -> dict[str, str]:
    register(client, "other@example.com")
    return login_headers(client, "other@example.com")


def make_token(settings: Settings, user_id: int = 1, email: str = "a@x.com", *, age: timedelta = timedelta()) -> str:
    issued = datetime.now(timezone.utc) - age
    return create_access_token(user_id, email, settings.auth, now=issued)

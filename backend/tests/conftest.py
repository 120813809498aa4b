"""
Portfolio Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test that touches the database gets a fresh in-memory SQLite
       database (StaticPool keeps the single connection alive for the
       test). Endpoint tests run the real app over ASGITransport with
       get_db_session overridden to use that database.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── db_engine: in-memory aiosqlite engine with the schema created
    ├── db_session: AsyncSession bound to db_engine
    ├── mock_db_session: AsyncMock session for error-path unit tests
    ├── admin_secret: configures ADMIN_SECRET_KEY for the test
    ├── auth_headers: Authorization header carrying that secret
    └── test_client: HTTPX AsyncClient against the FastAPI app
"""

import os

# Override settings for testing BEFORE any portfolio imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["AUTO_CREATE_SCHEMA"] = "false"
os.environ["ADMIN_SECRET_KEY"] = ""
os.environ["AQICN_API_TOKEN"] = ""
os.environ["RESEND_API_KEY"] = ""
os.environ["RATE_LIMIT_REQUESTS"] = "10000"
os.environ["RETRY_MAX_ATTEMPTS"] = "3"
os.environ["STATIC_DIR"] = "./does-not-exist"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import AsyncGenerator  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from portfolio.config import settings  # noqa: E402
from portfolio.database import (  # noqa: E402
    create_schema,
    enable_sqlite_foreign_keys,
    get_db_session,
)

TEST_ADMIN_SECRET = "test-admin-secret"


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(engine)
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """A session on the per-test database; tests flush, nothing is committed."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception())
        with pytest.raises(DatabaseError):
            await skill_service.list_skills(mock_db_session)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.get = AsyncMock()
    session.delete = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# Admin Gate Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def admin_secret(monkeypatch):
    monkeypatch.setattr(settings, "admin_secret_key", TEST_ADMIN_SECRET)
    return TEST_ADMIN_SECRET


@pytest.fixture
def auth_headers(admin_secret):
    return {"Authorization": f"Bearer {admin_secret}"}


# ══════════════════════════════════════════════════════════════════════════
# API Client
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    HTTPX AsyncClient wired to the app, with every request using the
    per-test database.

    Usage:
        async def test_skills(test_client):
            response = await test_client.get("/api/skills")
            assert response.status_code == 200
    """
    from portfolio.main import app
    from portfolio.services.contact_service import contact_service

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    contact_service.limiter.reset()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()

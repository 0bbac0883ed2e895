"""
Birdwatch API — Test Configuration (conftest.py)
==================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── seeded_store: InMemoryBirdStore holding the four reference birds
    ├── app / test_client: app built around seeded_store + HTTPX AsyncClient
    ├── sql_engine: aiosqlite in-memory engine with the birds table created
    ├── sql_session / seeded_sql_session: AsyncSession on that engine
    └── sql_client: HTTPX client whose requests read from seeded_sql_session
"""

import os

# Override settings for testing BEFORE any birdwatch imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["STORE_BACKEND"] = "sql"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["SEED_ON_STARTUP"] = "false"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from birdwatch.database import create_tables
from birdwatch.dependencies import get_bird_store
from birdwatch.main import create_app
from birdwatch.seed import SEED_BIRDS, seed_birds
from birdwatch.services.memory_store import InMemoryBirdStore
from birdwatch.services.sql_store import SqlBirdStore


# ══════════════════════════════════════════════════════════════════════════
# In-Memory Store Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def seeded_store():
    """Black-Capped Chickadee (1), Grackle (2), Common Starling (3), Mourning Dove (4)."""
    return InMemoryBirdStore.from_records(SEED_BIRDS)


@pytest.fixture
def app(seeded_store):
    return create_app(store=seeded_store)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient talking to the app through ASGITransport.

    Usage:
        async def test_index(test_client):
            response = await test_client.get("/birds")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# ══════════════════════════════════════════════════════════════════════════
# SQL Store Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def sql_engine():
    """Fresh in-memory SQLite database per test; StaticPool keeps it on one connection."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    await create_tables(bind=engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def sql_session(sql_engine):
    factory = async_sessionmaker(sql_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def seeded_sql_session(sql_session):
    await seed_birds(sql_session)
    await sql_session.commit()
    return sql_session


@pytest_asyncio.fixture
async def sql_client(seeded_sql_session):
    """Client for an app using the SQL store path, pointed at the test database."""
    sql_app = create_app()

    async def override_store():
        yield SqlBirdStore(seeded_sql_session)

    sql_app.dependency_overrides[get_bird_store] = override_store
    transport = ASGITransport(app=sql_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

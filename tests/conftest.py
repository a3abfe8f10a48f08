"""Shared pytest fixtures for the EatMore service tests."""

import os
import tempfile

# Must be set before anything under app/ is imported: settings and the engine
# are built at import time.
_DB_DIR = tempfile.mkdtemp(prefix="eatmore-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_DIR}/eatmore.db"
os.environ["TRACING_ENABLED"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.database import Base  # noqa: E402
from app.graphql.context import GraphQLContext  # noqa: E402
from app.services.restaurant_repository import RestaurantRepository  # noqa: E402
from app.services.seeding import seed_restaurants  # noqa: E402


@pytest_asyncio.fixture
async def session_factory():
    """Empty in-memory SQLite store with all tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield async_sessionmaker(engine, expire_on_commit=False)
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def seeded_session_factory(session_factory):
    await seed_restaurants(session_factory)
    return session_factory


@pytest_asyncio.fixture
async def repository(seeded_session_factory):
    async with seeded_session_factory() as session:
        yield RestaurantRepository(session)


@pytest.fixture
def context(repository) -> GraphQLContext:
    return GraphQLContext(restaurants=repository, request_id="test-request")


@pytest.fixture
def client():
    """FastAPI test client running the full lifespan (tables + seed)."""
    from fastapi.testclient import TestClient

    from app.main import app

    with TestClient(app) as c:
        yield c

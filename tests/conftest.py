"""
Pytest fixtures for the Encore test suite.

Every test gets its own SQLite database file (aiosqlite) with the schema
created from the ORM metadata. The API is exercised in-process through
httpx.AsyncClient + ASGITransport with get_db overridden to use the test
database.

Usage:
    @pytest.mark.asyncio
    async def test_add(membership_service, collection, items):
        await membership_service.add_to_collection(collection.id, items[0].id)

    @pytest.mark.asyncio
    async def test_route(client):
        response = await client.get("/collections")
"""

import os
import tempfile

# Settings are read at import time, so configure before importing encore
os.environ["DATABASE_URL"] = (
    f"sqlite+aiosqlite:///{os.path.join(tempfile.gettempdir(), 'encore-test.db')}"
)
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from encore.api.dependencies.database import get_db
from encore.api.main import app
from encore.shared.db import build_engine, build_session_factory
from encore.shared.models import Base
from encore.shared.services import CollectionService, ItemService, MembershipService


@pytest_asyncio.fixture
async def engine(tmp_path):
    """Per-test SQLite database with all tables created."""
    test_engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'encore.db'}")
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest_asyncio.fixture
async def session(session_factory):
    """A session for service and repository tests. Tests commit explicitly if needed."""
    async with session_factory() as db_session:
        yield db_session
        await db_session.rollback()


@pytest.fixture
def item_service(session):
    return ItemService(session)


@pytest.fixture
def collection_service(session):
    return CollectionService(session)


@pytest.fixture
def membership_service(session):
    return MembershipService(session)


@pytest_asyncio.fixture
async def collection(collection_service):
    """An empty collection named 'Friday Gig'."""
    row = await collection_service.create_collection("Friday Gig")
    return row["collection"]


@pytest_asyncio.fixture
async def items(item_service):
    """Three catalog items: A, B, C (in creation order)."""
    return [
        await item_service.create_item(title=title, body=f"{title} lyrics")
        for title in ("A", "B", "C")
    ]


@pytest_asyncio.fixture
async def client(session_factory):
    """HTTP client against the app, backed by the per-test database."""

    async def override_get_db():
        async with session_factory() as db_session:
            try:
                yield db_session
                await db_session.commit()
            except Exception:
                await db_session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()

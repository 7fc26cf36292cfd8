"""
Health endpoint and database connectivity tests.
"""

import pytest

from encore.api.handlers import health_handler
from encore.shared.core.exceptions import ServiceUnavailableError
from encore.shared.db import build_engine, ping_db


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "encore"


@pytest.mark.asyncio
async def test_live(client):
    response = await client.get("/live")

    assert response.status_code == 200
    assert response.json() == {"status": "alive"}


@pytest.mark.asyncio
async def test_ready(client):
    response = await client.get("/ready")

    assert response.status_code == 200
    assert response.json() == {"status": "ready"}


@pytest.mark.asyncio
async def test_ready_database_down(client, monkeypatch):
    async def failing_ping():
        raise ServiceUnavailableError("Database unavailable")

    monkeypatch.setattr(health_handler, "ping_db", failing_ping)

    response = await client.get("/ready")

    assert response.status_code == 503
    assert response.json()["error"]["code"] == "SERVICE_UNAVAILABLE"


@pytest.mark.asyncio
async def test_ping_db_ok(engine):
    await ping_db(engine)


@pytest.mark.asyncio
async def test_ping_db_unreachable(tmp_path):
    broken = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'nested' / 'db.sqlite'}")
    try:
        with pytest.raises(ServiceUnavailableError):
            await ping_db(broken)
    finally:
        await broken.dispose()

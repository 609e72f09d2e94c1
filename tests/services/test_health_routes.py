"""Health Routes — liveness always 200, readiness follows the database."""

import app.infrastructure.database as db_module


async def test_liveness_returns_healthy(client):
    res = await client.get("/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/v1/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}


async def test_readiness_without_database_returns_503(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"

"""Health & Readiness — liveness always up, readiness gated on restore and storage."""

from campushub.config import Settings
from campushub.services.session_store import SessionStore


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_ready_with_memory_backend(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"] == {"storage": "memory"}


async def test_not_ready_while_loading(client, kv_store):
    from campushub.api.dependencies import get_session_store
    from campushub.main import app

    app.dependency_overrides[get_session_store] = lambda: SessionStore(kv_store)
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "session_loading"


async def test_ready_with_database_backend(client, db_manager, monkeypatch):
    monkeypatch.setattr(
        "campushub.api.routes.health.get_settings",
        lambda: Settings(session_backend="database"),
    )
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"] == {"database": "healthy"}


async def test_not_ready_without_database(client, monkeypatch):
    monkeypatch.setattr(
        "campushub.api.routes.health.get_settings",
        lambda: Settings(session_backend="database"),
    )
    monkeypatch.setattr("campushub.infrastructure.database.db_manager", None)
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"

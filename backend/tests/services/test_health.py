"""Health checks - liveness always up, readiness follows the database."""


async def test_liveness(client):
    resp = await client.get("/api/v1/health/")

    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"
    assert resp.json()["civil_utc_offset_hours"] == 8


async def test_readiness_with_database(client):
    resp = await client.get("/api/v1/health/ready")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ready", "checks": {"database": "healthy"}}


async def test_readiness_without_database(client, monkeypatch):
    import smoketrack.infrastructure.database as db_module

    async def unhealthy():
        return False

    monkeypatch.setattr(db_module.db_manager, "health_check", unhealthy)

    resp = await client.get("/api/v1/health/ready")

    assert resp.status_code == 503
    assert resp.json()["reason"] == "database_unavailable"


async def test_readiness_before_startup(client, monkeypatch):
    import smoketrack.infrastructure.database as db_module

    monkeypatch.setattr(db_module, "db_manager", None)

    resp = await client.get("/api/v1/health/ready")

    assert resp.status_code == 503
    assert resp.json()["reason"] == "database_not_initialized"

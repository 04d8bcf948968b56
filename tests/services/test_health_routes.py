"""Banner & Health Routes — liveness, readiness, and unknown-route envelopes."""

import blog_api.infrastructure.database as db_module


async def test_banner(client):
    res = await client.get("/")
    assert res.status_code == 200
    assert res.json()["status"] == "success"
    assert res.json()["message"] == "Simple Blog API is running"
    assert res.json()["version"] == "1.0.0"


async def test_liveness(client):
    res = await client.get("/health/")
    assert res.status_code == 200
    assert res.json()["data"]["service"] == "blog-api"


async def test_readiness_with_database(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json()["data"]["checks"]["database"] == "healthy"


async def test_readiness_without_database(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/health/ready")
    assert res.status_code == 503
    assert res.json() == {"status": "error", "message": "Database unavailable"}


async def test_unknown_route_uses_error_envelope(client):
    res = await client.get("/nowhere")
    assert res.status_code == 404
    assert res.json() == {"status": "error", "message": "Not Found"}


async def test_wrong_method_uses_error_envelope(client):
    res = await client.patch("/posts")
    assert res.status_code == 405
    assert res.json()["status"] == "error"

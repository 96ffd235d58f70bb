"""Health Probes — liveness always up, readiness follows store connectivity."""


async def test_liveness_returns_200(client):
    res = await client.get("/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_returns_200_when_store_healthy(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}


async def test_readiness_returns_503_when_store_unreachable(client, fake_store):
    fake_store.healthy = False

    res = await client.get("/health/ready")

    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_readiness_returns_503_without_store(client, test_app):
    test_app.state.predictor_store = None

    res = await client.get("/health/ready")

    assert res.status_code == 503

"""Health probes — liveness always 200, readiness follows the database ping."""

from todo_api import __version__


async def test_liveness_returns_200(client):
    res = await client.get("/api/health/")
    assert res.status_code == 200
    assert res.json() == {
        "status": "healthy", "service": "todo-api", "version": __version__,
    }


async def test_readiness_ok_when_ping_succeeds(client, store, monkeypatch):
    async def ping():
        return True
    monkeypatch.setattr(store, "ping", ping)

    res = await client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"] == {"database": "healthy"}


async def test_readiness_503_when_ping_fails(client, store, monkeypatch):
    async def ping():
        return False
    monkeypatch.setattr(store, "ping", ping)

    res = await client.get("/api/health/ready")
    assert res.status_code == 503
    assert res.json() == {"status": "not_ready", "reason": "database_unavailable"}

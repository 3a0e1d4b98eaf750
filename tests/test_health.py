"""
Tests for liveness and health endpoints.
"""

from main import app


class StubStore:
    def __init__(self, error=None):
        self.error = error

    async def ping(self):
        if self.error:
            raise self.error
        return {"ok": 1.0}


class TestHealth:

    def test_root_liveness_text(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.text == "job-seeker is running"
        assert response.headers["content-type"].startswith("text/plain")

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_detailed_health_store_up(self, client, monkeypatch):
        monkeypatch.setattr(app.state, "store", StubStore(), raising=False)

        data = client.get("/health/detailed").json()

        assert data["status"] == "healthy"
        assert data["checks"]["database"]["status"] == "healthy"

    def test_detailed_health_store_down(self, client, monkeypatch):
        monkeypatch.setattr(app.state, "store", StubStore(ConnectionError("no route")), raising=False)

        response = client.get("/health/detailed")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "unhealthy"
        assert "no route" in data["checks"]["database"]["message"]

"""Tests for application wiring: health endpoints, CORS and table creation."""

from fastapi.testclient import TestClient

from peakrank import __version__
from peakrank.main import create_app


def test_root_reports_backend_running(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"status": "Backend running"}


def test_health(client):
    body = client.get("/health").json()

    assert body["status"] == "healthy"
    assert body["version"] == __version__
    assert body["riot_api_key_loaded"] is True


def test_cors_allows_any_origin(client):
    response = client.get("/", headers={"Origin": "http://localhost:5173"})

    assert response.headers["access-control-allow-origin"] in ("*", "http://localhost:5173")


def test_startup_creates_accounts_table(settings, tmp_path):
    with TestClient(create_app(settings)) as client:
        assert client.get("/accounts").json() == {"success": True, "data": []}

    assert (tmp_path / "test.db").exists()

"""Shared fixtures: isolated settings, a temp SQLite store and a fake Riot API."""

from typing import Callable, Dict, List, Tuple

import httpx
import pytest
from fastapi.testclient import TestClient

from peakrank.core.config import Settings
from peakrank.core.dependencies import get_riot_client
from peakrank.core.riot_api import RiotAPIClient
from peakrank.main import create_app


class FakeRiotAPI:
    """Routes URLs to canned (status, body) responses and records requests."""

    def __init__(self) -> None:
        self.routes: Dict[str, Tuple[int, object]] = {}
        self.requests: List[httpx.Request] = []
        self.raise_for: Dict[str, Exception] = {}

    def add(self, url: str, status_code: int, body: object) -> None:
        self.routes[url] = (status_code, body)

    def fail(self, url: str, error: Exception) -> None:
        self.raise_for[url] = error

    @property
    def requested_urls(self) -> List[str]:
        return [str(request.url) for request in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url)
        if url in self.raise_for:
            raise self.raise_for[url]
        if url not in self.routes:
            return httpx.Response(404, json={"status": {"status_code": 404}})
        status_code, body = self.routes[url]
        if isinstance(body, str):
            return httpx.Response(status_code, text=body)
        return httpx.Response(status_code, json=body)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def sample_account_data():
    """Sample account-v1 response."""
    return {"puuid": "test-puuid-123", "gameName": "TestPlayer", "tagLine": "EUW"}


@pytest.fixture
def sample_league_entries():
    """Sample league-v4 entries with both ranked queues."""
    return [
        {
            "leagueId": "flex-league",
            "queueType": "RANKED_FLEX_SR",
            "tier": "SILVER",
            "rank": "I",
            "puuid": "test-puuid-123",
            "leaguePoints": 12,
            "wins": 10,
            "losses": 9,
        },
        {
            "leagueId": "solo-league",
            "queueType": "RANKED_SOLO_5x5",
            "tier": "GOLD",
            "rank": "II",
            "puuid": "test-puuid-123",
            "leaguePoints": 57,
            "wins": 40,
            "losses": 35,
        },
    ]


@pytest.fixture
def fake_riot():
    return FakeRiotAPI()


@pytest.fixture
def settings(tmp_path):
    """Settings isolated from the developer's .env and database file."""
    return Settings(
        _env_file=None,
        riot_api_key="RGAPI-test-key",
        riot_region="europe",
        riot_request_timeout=2.0,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        cors_origins="*",
    )


@pytest.fixture
def riot_client_factory(settings, fake_riot) -> Callable[[], RiotAPIClient]:
    def factory() -> RiotAPIClient:
        return RiotAPIClient(settings.riot_api_config(), transport=fake_riot.transport())

    return factory


@pytest.fixture
def app(settings, riot_client_factory):
    app = create_app(settings)

    async def override_riot_client():
        client = riot_client_factory()
        try:
            yield client
        finally:
            await client.close()

    app.dependency_overrides[get_riot_client] = override_riot_client
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client

"""Tests for settings loading."""

import dataclasses

import pytest

from peakrank.core.config import RiotAPIConfig, Settings


def test_defaults(monkeypatch):
    for name in ["RIOT_API_KEY", "RIOT_REGION", "PORT", "DATABASE_URL", "CORS_ORIGINS"]:
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.port == 3000
    assert settings.riot_region == "europe"
    assert settings.riot_api_key_loaded is False
    assert settings.database_url.startswith("sqlite+aiosqlite://")
    assert settings.cors_origins_list == ["*"]


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("RIOT_API_KEY", "RGAPI-from-env")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("RIOT_REGION", " EUROPE ")

    settings = Settings(_env_file=None)

    assert settings.riot_api_key == "RGAPI-from-env"
    assert settings.port == 8080
    assert settings.riot_region == "europe"


def test_riot_api_config_is_immutable():
    settings = Settings(
        _env_file=None, riot_api_key=" RGAPI-key ", riot_request_timeout=4.0
    )

    config = settings.riot_api_config()

    assert config == RiotAPIConfig(api_key="RGAPI-key", region="europe", timeout=4.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.api_key = "other"  # type: ignore[misc]


def test_cors_origins_list():
    settings = Settings(
        _env_file=None, cors_origins="http://localhost:5173, http://127.0.0.1:5173,"
    )

    assert settings.cors_origins_list == [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

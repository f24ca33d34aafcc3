"""Tests for Riot API endpoint URL building."""

from peakrank.core.riot_api.constants import Platform, Region
from peakrank.core.riot_api.endpoints import RiotAPIEndpoints


def test_account_url_uses_routing_region():
    endpoints = RiotAPIEndpoints(Region.EUROPE)

    assert endpoints.account_by_riot_id("TestPlayer", "EUW") == (
        "https://europe.api.riotgames.com/riot/account/v1/accounts/by-riot-id/TestPlayer/EUW"
    )


def test_account_url_percent_encodes_segments():
    endpoints = RiotAPIEndpoints("europe")

    url = endpoints.account_by_riot_id("Test Player/x", "ÄÖ?1")

    assert url.endswith("/by-riot-id/Test%20Player%2Fx/%C3%84%C3%96%3F1")


def test_league_url_uses_platform():
    endpoints = RiotAPIEndpoints(Region.EUROPE)

    assert endpoints.league_entries_by_puuid("abc-123", Platform.EUN1) == (
        "https://eun1.api.riotgames.com/lol/league/v4/entries/by-puuid/abc-123"
    )
    assert endpoints.league_entries_by_puuid("abc-123", "euw1").startswith(
        "https://euw1.api.riotgames.com/"
    )

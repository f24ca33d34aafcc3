"""Riot API endpoint definitions and routing information."""

from typing import Union
from urllib.parse import quote

from .constants import Platform, Region


def _segment(value: str) -> str:
    """Percent-encode a single URL path segment."""
    return quote(value, safe="")


class RiotAPIEndpoints:
    """Riot API endpoint definitions and routing."""

    def __init__(self, region: Union[Region, str] = Region.EUROPE):
        """
        Initialize endpoint configuration.

        Args:
            region: Routing region for regional (account) endpoints
        """
        self.region = region

    def get_base_url(self) -> str:
        """Get base URL for regional endpoints."""
        region_str = (
            self.region.value if isinstance(self.region, Region) else self.region
        )
        return f"https://{region_str}.api.riotgames.com"

    @staticmethod
    def get_platform_url(platform: Union[Platform, str]) -> str:
        """Get base URL for platform endpoints."""
        platform_str = platform.value if isinstance(platform, Platform) else platform
        return f"https://{platform_str}.api.riotgames.com"

    # Account endpoints (Regional)
    def account_by_riot_id(self, game_name: str, tag_line: str) -> str:
        """Get account by Riot ID endpoint."""
        return (
            f"{self.get_base_url()}/riot/account/v1/accounts/by-riot-id/"
            f"{_segment(game_name)}/{_segment(tag_line)}"
        )

    # League endpoints (Platform)
    def league_entries_by_puuid(
        self, puuid: str, platform: Union[Platform, str]
    ) -> str:
        """Get league entries by PUUID endpoint."""
        platform_url = self.get_platform_url(platform)
        return f"{platform_url}/lol/league/v4/entries/by-puuid/{_segment(puuid)}"

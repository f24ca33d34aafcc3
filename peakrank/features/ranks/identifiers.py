"""Riot ID and server label parsing.

Pure functions: nothing here touches the network, and nothing is
URL-encoded until the endpoint URLs are built.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from peakrank.core.exceptions import ValidationError
from peakrank.core.riot_api.constants import SERVER_PLATFORMS, Platform

RIOT_ID_SEPARATOR = "#"


@dataclass(frozen=True)
class RiotIdentifier:
    """A validated Riot ID together with the platform to query."""

    game_name: str
    tag_line: str
    platform: Platform

    @property
    def riot_id(self) -> str:
        return f"{self.game_name}{RIOT_ID_SEPARATOR}{self.tag_line}"


def split_riot_id(riot_id: str) -> Tuple[str, str]:
    """Split ``name#tag`` into ``(name, tag)``.

    Exactly one separator and two non-blank parts are required. The parts are
    returned unchanged.

    :raises ValidationError: If the identifier is not in name#tag form
    """
    parts = riot_id.split(RIOT_ID_SEPARATOR)
    if len(parts) != 2 or not parts[0].strip() or not parts[1].strip():
        raise ValidationError(
            "Invalid Riot ID format",
            operation="split_riot_id",
            field="riotId",
            value=riot_id,
        )
    return parts[0], parts[1]


def platform_for_server(server: Optional[str]) -> Platform:
    """Map a user-facing server label to the provider platform code.

    :raises ValidationError: If the label is not a supported server
    """
    platform = SERVER_PLATFORMS.get(server or "")
    if platform is None:
        raise ValidationError(
            "Invalid server",
            operation="platform_for_server",
            field="server",
            value=server,
        )
    return platform


def parse_rank_query(riot_id: Optional[str], server: Optional[str]) -> RiotIdentifier:
    """Validate the ``/rank`` query parameters.

    :raises ValidationError: If a parameter is missing or invalid
    """
    if not riot_id or not server:
        raise ValidationError("Missing riotId or server", operation="parse_rank_query")

    platform = platform_for_server(server)
    game_name, tag_line = split_riot_id(riot_id)
    return RiotIdentifier(game_name=game_name, tag_line=tag_line, platform=platform)

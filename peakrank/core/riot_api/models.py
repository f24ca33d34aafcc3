"""Pydantic models for Riot API response data."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AccountDTO(BaseModel):
    """Riot Account information."""

    puuid: str = Field(..., min_length=1)
    game_name: Optional[str] = Field(None, alias="gameName")
    tag_line: Optional[str] = Field(None, alias="tagLine")

    model_config = ConfigDict(populate_by_name=True)


class LeagueEntryDTO(BaseModel):
    """League entry information from league-v4 entries/by-puuid."""

    queue_type: str = Field(..., alias="queueType")
    tier: Optional[str] = None
    # Division; apex tiers may omit it
    rank: Optional[str] = None
    league_points: Optional[int] = Field(None, alias="leaguePoints")
    wins: int = 0
    losses: int = 0
    league_id: Optional[str] = Field(None, alias="leagueId")
    puuid: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)

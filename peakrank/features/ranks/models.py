"""Domain models for rank resolution."""

from dataclasses import dataclass
from typing import Optional, Union

from pydantic import BaseModel

from peakrank.core.exceptions import UpstreamFailure


class RankSummary(BaseModel):
    """Solo-queue standing of a player at the moment of the lookup."""

    ranked: bool
    tier: Optional[str] = None
    # Apex tiers may come back without a division; None is kept as is
    division: Optional[str] = None
    league_points: Optional[int] = None

    @classmethod
    def unranked(cls) -> "RankSummary":
        return cls(ranked=False)


@dataclass(frozen=True)
class RankOk:
    summary: RankSummary


@dataclass(frozen=True)
class RankErr:
    failure: UpstreamFailure


RankResult = Union[RankOk, RankErr]

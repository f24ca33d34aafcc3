"""Pydantic schemas for the rank endpoints."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from .models import RankSummary


class RankResponse(BaseModel):
    """Body of ``GET /rank``.

    Serialized with ``exclude_unset`` so an unranked player is just
    ``{"ranked": false}`` while a null division stays in the payload.
    """

    ranked: bool
    tier: Optional[str] = Field(None, description="Rank tier, e.g. GOLD")
    rank: Optional[str] = Field(None, description="Division, null for apex tiers")
    lp: Optional[int] = Field(None, description="League points")

    @classmethod
    def from_summary(cls, summary: RankSummary) -> "RankResponse":
        if not summary.ranked:
            return cls(ranked=False)
        return cls(
            ranked=True,
            tier=summary.tier,
            rank=summary.division,
            lp=summary.league_points,
        )


class AccountLookupResponse(BaseModel):
    """Body of ``GET /test-account``."""

    success: bool = True
    data: Dict[str, Any]

"""Pydantic schemas for stored accounts.

Wire names are camelCase (``riotId``, ``peakLP``); attributes are snake_case.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AccountCreate(BaseModel):
    """Body of ``POST /accounts``.

    Required fields are optional here so that a missing one is reported by
    the service as "Missing required fields" instead of a schema error.
    """

    player: Optional[str] = Field(None, description="Display name of the owner")
    riot_id: Optional[str] = Field(None, alias="riotId", description="name#tag")
    server: Optional[str] = Field(None, description="Server label (euw, eune)")
    peak_rank: Optional[str] = Field(None, alias="peakRank", description="Peak tier")
    peak_division: Optional[str] = Field(
        None, alias="peakDivision", description="Peak division"
    )
    peak_lp: Optional[int] = Field(None, alias="peakLP", description="Peak LP")

    model_config = ConfigDict(populate_by_name=True)


class AccountResponse(BaseModel):
    """A stored account as returned to clients."""

    id: int
    player: str
    riot_id: str = Field(..., alias="riotId")
    server: str
    peak_rank: Optional[str] = Field(None, alias="peakRank")
    peak_division: Optional[str] = Field(None, alias="peakDivision")
    peak_lp: Optional[int] = Field(None, alias="peakLP")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class AccountListResponse(BaseModel):
    """Envelope for ``GET /accounts``."""

    success: bool = True
    data: List[AccountResponse]


class SuccessResponse(BaseModel):
    """Envelope for mutations that return no data."""

    success: bool = True

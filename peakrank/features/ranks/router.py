"""Rank API endpoints."""

from typing import Annotated, Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from peakrank.core.exceptions import UpstreamFailure, ValidationError
from .dependencies import RankResolverDep
from .identifiers import RiotIdentifier, parse_rank_query, split_riot_id
from .models import RankErr
from .schemas import AccountLookupResponse, RankResponse

router = APIRouter(tags=["ranks"])


def rank_query(
    riot_id: Optional[str] = Query(None, alias="riotId", description="name#tag"),
    server: Optional[str] = Query(None, description="Server label (euw, eune)"),
) -> RiotIdentifier:
    """Validate query params before any Riot API client is created."""
    return parse_rank_query(riot_id, server)


def riot_id_query(
    riot_id: Optional[str] = Query(None, alias="riotId", description="name#tag"),
) -> tuple[str, str]:
    if not riot_id:
        raise ValidationError("Missing riotId", operation="test_account")
    return split_riot_id(riot_id)


@router.get("/rank", response_model=RankResponse, response_model_exclude_unset=True)
async def get_rank(
    identifier: Annotated[RiotIdentifier, Depends(rank_query)],
    resolver: RankResolverDep,
) -> RankResponse:
    """
    Current solo-queue rank of a Riot ID.

    Returns `{"ranked": false}` when the player has no solo-queue entry,
    otherwise `{"ranked": true, "tier", "rank", "lp"}`.

    Examples:
        GET /rank?riotId=Faker%23KR1&server=euw
    """
    result = await resolver.resolve(identifier)
    if isinstance(result, RankErr):
        raise result.failure
    return RankResponse.from_summary(result.summary)


@router.get("/test-account", response_model=AccountLookupResponse)
async def test_account(
    riot_id: Annotated[tuple[str, str], Depends(riot_id_query)],
    resolver: RankResolverDep,
):
    """Look up only the Riot account behind a Riot ID (API key check)."""
    game_name, tag_line = riot_id

    try:
        account = await resolver.lookup_account(game_name, tag_line)
    except UpstreamFailure as failure:
        content: Dict[str, Any] = {"step": "ACCOUNT"}
        if failure.upstream_status is not None:
            content["status"] = failure.upstream_status
        if failure.upstream_data is not None:
            content["data"] = failure.upstream_data
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content
        )

    return AccountLookupResponse(data=account.model_dump(by_alias=True))

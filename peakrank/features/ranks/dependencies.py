"""Dependencies for the ranks feature."""

from typing import Annotated

from fastapi import Depends

from peakrank.core.dependencies import RiotClientDep
from .resolver import RankResolver


async def get_rank_resolver(riot_client: RiotClientDep) -> RankResolver:
    """Get a rank resolver bound to the per-request Riot API client.

    :param riot_client: Riot API client
    :returns: Rank resolver
    """
    return RankResolver(riot_client)


RankResolverDep = Annotated[RankResolver, Depends(get_rank_resolver)]

__all__ = ["get_rank_resolver", "RankResolverDep"]

"""
Rank resolver - translates Riot API lookups into a rank summary.

Resolution is a two-step dependent chain:

1. account-v1 by Riot ID, yielding the player's ``puuid``;
2. league-v4 entries by ``puuid`` on the player's platform.

The second step runs only when the first succeeds. A failure at either
step is returned as ``RankErr`` tagged with the step; it is never reported
as "not ranked".
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

import structlog

from peakrank.core.exceptions import LookupStep, UpstreamFailure
from peakrank.core.riot_api.constants import RankedQueue
from peakrank.core.riot_api.errors import RiotAPIError
from peakrank.core.riot_api.models import AccountDTO, LeagueEntryDTO
from .identifiers import RiotIdentifier
from .models import RankErr, RankOk, RankResult, RankSummary

if TYPE_CHECKING:
    from peakrank.core.riot_api.client import RiotAPIClient

logger = structlog.get_logger(__name__)


def summarize_entries(entries: Iterable[LeagueEntryDTO]) -> RankSummary:
    """Reduce league entries to the solo-queue summary.

    No solo-queue entry means the player is unranked; that is a result,
    not an error.
    """
    solo = next(
        (e for e in entries if e.queue_type == RankedQueue.RANKED_SOLO_5X5.value),
        None,
    )
    if solo is None:
        return RankSummary.unranked()

    return RankSummary(
        ranked=True,
        tier=solo.tier,
        division=solo.rank,
        league_points=solo.league_points,
    )


def _upstream_failure(step: LookupStep, error: RiotAPIError) -> UpstreamFailure:
    logger.error(
        "Riot API lookup failed",
        step=step.value,
        status=error.status_code,
        data=error.response_data,
        error_message=error.message,
    )
    return UpstreamFailure(
        message=error.message,
        step=step,
        upstream_status=error.status_code,
        upstream_data=error.response_data,
        service="RankResolver",
        operation=f"lookup_{step.value}",
        original_error=error,
    )


class RankResolver:
    """Resolves a parsed Riot ID into a ``RankResult``."""

    def __init__(self, riot_api_client: "RiotAPIClient"):
        """
        :param riot_api_client: Low-level Riot API client
        """
        self._client = riot_api_client

    async def lookup_account(self, game_name: str, tag_line: str) -> AccountDTO:
        """Run only the account lookup.

        :raises UpstreamFailure: Tagged with the account step
        """
        try:
            return await self._client.get_account_by_riot_id(game_name, tag_line)
        except RiotAPIError as e:
            raise _upstream_failure(LookupStep.ACCOUNT, e) from e

    async def resolve(self, identifier: RiotIdentifier) -> RankResult:
        """Resolve the solo-queue rank of ``identifier``."""
        logger.debug(
            "Resolving rank",
            riot_id=identifier.riot_id,
            platform=identifier.platform.value,
        )

        try:
            account = await self.lookup_account(
                identifier.game_name, identifier.tag_line
            )
        except UpstreamFailure as failure:
            return RankErr(failure)

        try:
            entries = await self._client.get_league_entries_by_puuid(
                account.puuid, identifier.platform
            )
        except RiotAPIError as e:
            return RankErr(_upstream_failure(LookupStep.LEAGUE, e))

        summary = summarize_entries(entries)
        logger.info(
            "Rank resolved",
            riot_id=identifier.riot_id,
            platform=identifier.platform.value,
            ranked=summary.ranked,
            tier=summary.tier,
        )
        return RankOk(summary)

"""Account service: thin orchestration over the account repository."""

from typing import List

import structlog

from peakrank.core.decorators import service_error_handler
from peakrank.core.exceptions import ValidationError
from peakrank.core.validation import missing_required_fields
from .orm_models import AccountORM
from .repository import AccountRepositoryInterface
from .schemas import AccountCreate, AccountResponse

logger = structlog.get_logger(__name__)

REQUIRED_ACCOUNT_FIELDS = ["player", "riot_id", "server"]


class AccountService:
    """Service for listing, adding and deleting stored accounts.

    Validates input before the store is touched and leaves SQL to the
    repository.
    """

    def __init__(self, repository: AccountRepositoryInterface):
        self.repository = repository

    @service_error_handler("AccountService")
    async def list_accounts(self) -> List[AccountResponse]:
        accounts = await self.repository.list_accounts()
        return [AccountResponse.model_validate(account) for account in accounts]

    @service_error_handler("AccountService")
    async def add_account(self, payload: AccountCreate) -> AccountResponse:
        """Store a new account.

        :raises ValidationError: If player, riotId or server is missing or empty
        :raises StoreFailure: If the insert fails
        """
        missing = missing_required_fields(
            payload.model_dump(), REQUIRED_ACCOUNT_FIELDS, context_name="account"
        )
        if missing:
            raise ValidationError(
                "Missing required fields",
                service="AccountService",
                operation="add_account",
                context={"missing": missing},
            )

        account = await self.repository.create(
            AccountORM(
                player=payload.player,
                riot_id=payload.riot_id,
                server=payload.server,
                peak_rank=payload.peak_rank,
                peak_division=payload.peak_division,
                peak_lp=payload.peak_lp,
            )
        )

        logger.info(
            "Account added",
            account_id=account.id,
            player=account.player,
            server=account.server,
        )
        return AccountResponse.model_validate(account)

    @service_error_handler("AccountService")
    async def delete_account(self, account_id: int) -> int:
        deleted = await self.repository.delete_by_id(account_id)
        logger.info("Account deleted", account_id=account_id, deleted=deleted)
        return deleted

    @service_error_handler("AccountService")
    async def delete_player_accounts(self, player: str) -> int:
        deleted = await self.repository.delete_by_player(player)
        logger.info("Player accounts deleted", player=player, deleted=deleted)
        return deleted

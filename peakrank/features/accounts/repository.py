"""Repository pattern implementation for the accounts feature.

Provides collection-like access to stored accounts. Every write commits its
own single-statement transaction.
"""

from typing import List, Protocol

import structlog
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from .orm_models import AccountORM

logger = structlog.get_logger(__name__)


class AccountRepositoryInterface(Protocol):
    """Repository interface for account data operations"""

    async def list_accounts(self) -> List[AccountORM]:
        """Return every stored account ordered by id"""
        ...

    async def create(self, account: AccountORM) -> AccountORM:
        """Persist a new account and return it with its generated id"""
        ...

    async def delete_by_id(self, account_id: int) -> int:
        """Delete one account; returns the number of rows removed"""
        ...

    async def delete_by_player(self, player: str) -> int:
        """Delete all accounts owned by a player; returns rows removed"""
        ...


class SQLAlchemyAccountRepository:
    """SQLAlchemy implementation of the account repository"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_accounts(self) -> List[AccountORM]:
        result = await self.db.execute(select(AccountORM).order_by(AccountORM.id))
        return list(result.scalars().all())

    async def create(self, account: AccountORM) -> AccountORM:
        self.db.add(account)
        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        await self.db.refresh(account)

        logger.debug("Account stored", account_id=account.id, player=account.player)
        return account

    async def delete_by_id(self, account_id: int) -> int:
        return await self._delete(delete(AccountORM).where(AccountORM.id == account_id))

    async def delete_by_player(self, player: str) -> int:
        return await self._delete(delete(AccountORM).where(AccountORM.player == player))

    async def _delete(self, stmt) -> int:
        try:
            result = await self.db.execute(stmt)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        return result.rowcount or 0

"""Dependencies for the accounts feature.

Injects the repository into the service following dependency inversion.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from peakrank.core.database import get_db
from .repository import AccountRepositoryInterface, SQLAlchemyAccountRepository
from .service import AccountService

# Database dependency
DatabaseDep = Annotated[AsyncSession, Depends(get_db)]


def get_account_repository(db: DatabaseDep) -> AccountRepositoryInterface:
    return SQLAlchemyAccountRepository(db)


AccountRepositoryDep = Annotated[
    AccountRepositoryInterface, Depends(get_account_repository)
]


def get_account_service(repository: AccountRepositoryDep) -> AccountService:
    return AccountService(repository)


AccountServiceDep = Annotated[AccountService, Depends(get_account_service)]

__all__ = [
    "get_account_repository",
    "get_account_service",
    "AccountRepositoryDep",
    "AccountServiceDep",
]

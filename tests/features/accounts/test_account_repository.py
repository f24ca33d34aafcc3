"""Tests for the SQLAlchemy account repository against a temp SQLite file."""

import pytest

from peakrank.core.database import DatabaseManager
from peakrank.features.accounts.orm_models import AccountORM
from peakrank.features.accounts.repository import SQLAlchemyAccountRepository


@pytest.fixture
async def db_manager(settings):
    manager = DatabaseManager(settings.database_url)
    await manager.init_db()
    yield manager
    await manager.close()


@pytest.fixture
async def repository(db_manager):
    async with db_manager.get_session() as session:
        yield SQLAlchemyAccountRepository(session)


def _account(player: str, riot_id: str, **kwargs) -> AccountORM:
    return AccountORM(player=player, riot_id=riot_id, server="euw", **kwargs)


async def test_create_assigns_id(repository):
    account = await repository.create(
        _account("A", "X#1", peak_rank="GOLD", peak_division="II", peak_lp=40)
    )

    assert account.id is not None
    assert account.peak_lp == 40


async def test_list_accounts_in_insert_order(repository):
    await repository.create(_account("A", "X#1"))
    await repository.create(_account("B", "Y#2"))

    accounts = await repository.list_accounts()

    assert [a.riot_id for a in accounts] == ["X#1", "Y#2"]
    assert accounts[0].peak_rank is None


async def test_delete_by_id_removes_only_that_account(repository):
    first = await repository.create(_account("A", "X#1"))
    second = await repository.create(_account("A", "X#2"))

    deleted = await repository.delete_by_id(first.id)

    assert deleted == 1
    remaining = await repository.list_accounts()
    assert [a.id for a in remaining] == [second.id]


async def test_delete_missing_id_is_noop(repository):
    await repository.create(_account("A", "X#1"))

    assert await repository.delete_by_id(9999) == 0
    assert len(await repository.list_accounts()) == 1


async def test_delete_by_player(repository):
    await repository.create(_account("A", "X#1"))
    await repository.create(_account("A", "X#2"))
    await repository.create(_account("B", "Y#1"))

    deleted = await repository.delete_by_player("A")

    assert deleted == 2
    remaining = await repository.list_accounts()
    assert [a.player for a in remaining] == ["B"]

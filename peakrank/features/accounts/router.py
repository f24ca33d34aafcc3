"""Account API endpoints."""

from fastapi import APIRouter, Response, status

from .dependencies import AccountServiceDep
from .schemas import AccountCreate, AccountListResponse, SuccessResponse

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.get("", response_model=AccountListResponse)
async def list_accounts(service: AccountServiceDep) -> AccountListResponse:
    """List every stored account."""
    accounts = await service.list_accounts()
    return AccountListResponse(data=accounts)


@router.post("", response_model=SuccessResponse)
async def add_account(
    payload: AccountCreate, service: AccountServiceDep
) -> SuccessResponse:
    """
    Store a new account.

    `player`, `riotId` and `server` are required; `peakRank`, `peakDivision`
    and `peakLP` are optional and stored as given.
    """
    await service.add_account(payload)
    return SuccessResponse()


@router.delete(
    "/player/{player}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_player_accounts(player: str, service: AccountServiceDep) -> Response:
    """Delete every account owned by a player."""
    await service.delete_player_accounts(player)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{account_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_account(account_id: int, service: AccountServiceDep) -> Response:
    """Delete one account by id."""
    await service.delete_account(account_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

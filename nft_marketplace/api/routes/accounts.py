from fastapi import APIRouter, Depends

from nft_marketplace.api.dependencies import get_context, get_fund_account_use_case
from nft_marketplace.api.errors import invalid_address
from nft_marketplace.api.schemas.requests import FundAccountRequest
from nft_marketplace.api.schemas.responses import AccountResponse
from nft_marketplace.application.context import MarketplaceContext
from nft_marketplace.application.use_cases.fund_account import FundAccount, FundAccountInput
from nft_marketplace.config import settings
from nft_marketplace.domain.value_objects.address import normalize_address

router = APIRouter(prefix="/accounts", tags=["accounts"])


def _normalize(address: str) -> str:
    try:
        return normalize_address(address)
    except ValueError as exc:
        raise invalid_address(exc)


@router.get("/{address}", response_model=AccountResponse)
async def get_account(
    address: str,
    context: MarketplaceContext = Depends(get_context),
) -> AccountResponse:
    address = _normalize(address)
    return AccountResponse(address=address, balance=context.balances.balance_of(address))


@router.post("/{address}/fund", response_model=AccountResponse)
async def fund_account(
    address: str,
    body: FundAccountRequest,
    use_case: FundAccount = Depends(get_fund_account_use_case),
) -> AccountResponse:
    """Development faucet: credit native currency to an account."""
    amount = body.amount if body.amount is not None else settings.initial_account_balance_wei
    result = use_case.execute(FundAccountInput(address=_normalize(address), amount=amount))
    return AccountResponse(address=result.address, balance=result.balance)

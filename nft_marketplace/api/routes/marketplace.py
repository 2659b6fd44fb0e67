from fastapi import APIRouter, Depends, Query, status

from nft_marketplace.api.dependencies import (
    get_context,
    get_item_use_case,
    get_make_item_use_case,
    get_purchase_item_use_case,
)
from nft_marketplace.api.errors import to_http_exception
from nft_marketplace.api.schemas.requests import MakeItemRequest, PurchaseRequest
from nft_marketplace.api.schemas.responses import (
    ListingResponse,
    ListingsResponse,
    MarketplaceResponse,
    PurchaseResponse,
    TotalPriceResponse,
)
from nft_marketplace.application.context import MarketplaceContext
from nft_marketplace.application.use_cases.get_item import GetItem
from nft_marketplace.application.use_cases.make_item import MakeItem, MakeItemInput
from nft_marketplace.application.use_cases.purchase_item import PurchaseItem, PurchaseItemInput
from nft_marketplace.domain.entities.listing import Listing
from nft_marketplace.domain.errors import MarketplaceError

router = APIRouter(prefix="/marketplace", tags=["marketplace"])


def _listing_to_response(listing: Listing, total_price: int) -> ListingResponse:
    return ListingResponse(
        item_id=listing.item_id,
        nft=listing.asset_contract,
        token_id=listing.token_id,
        price=listing.price,
        total_price=total_price,
        seller=listing.seller,
        sold=listing.sold,
        state=listing.state,
        buyer=listing.buyer,
        created_at=listing.created_at,
        sold_at=listing.sold_at,
    )


@router.get("", response_model=MarketplaceResponse)
async def get_marketplace(
    context: MarketplaceContext = Depends(get_context),
) -> MarketplaceResponse:
    marketplace = context.marketplace
    return MarketplaceResponse(
        address=marketplace.address,
        fee_account=marketplace.fee_account,
        fee_percent=marketplace.fee_percent,
        item_count=marketplace.item_count,
        balance=context.balances.balance_of(marketplace.address),
    )


@router.get("/items", response_model=ListingsResponse)
async def list_items(
    unsold_only: bool = Query(default=False),
    use_case: GetItem = Depends(get_item_use_case),
) -> ListingsResponse:
    results = use_case.list_all(unsold_only=unsold_only)
    return ListingsResponse(
        items=[_listing_to_response(r.listing, r.total_price) for r in results],
        total=len(results),
    )


@router.post("/items", status_code=status.HTTP_201_CREATED, response_model=ListingResponse)
async def make_item(
    body: MakeItemRequest,
    use_case: MakeItem = Depends(get_make_item_use_case),
    context: MarketplaceContext = Depends(get_context),
) -> ListingResponse:
    try:
        result = await use_case.execute(
            MakeItemInput(
                nft=body.nft, token_id=body.token_id, price=body.price, caller=body.caller
            )
        )
    except MarketplaceError as exc:
        raise to_http_exception(exc)
    listing = result.listing
    return _listing_to_response(listing, context.marketplace.total_price_for(listing.price))


@router.get("/items/{item_id}", response_model=ListingResponse)
async def get_item(
    item_id: int,
    use_case: GetItem = Depends(get_item_use_case),
) -> ListingResponse:
    try:
        result = use_case.execute(item_id)
    except MarketplaceError as exc:
        raise to_http_exception(exc)
    return _listing_to_response(result.listing, result.total_price)


@router.get("/items/{item_id}/total-price", response_model=TotalPriceResponse)
async def get_total_price(
    item_id: int,
    use_case: GetItem = Depends(get_item_use_case),
) -> TotalPriceResponse:
    try:
        result = use_case.execute(item_id)
    except MarketplaceError as exc:
        raise to_http_exception(exc)
    return TotalPriceResponse(
        item_id=item_id,
        price=result.listing.price,
        fee=result.total_price - result.listing.price,
        total_price=result.total_price,
    )


@router.post("/items/{item_id}/purchase", response_model=PurchaseResponse)
async def purchase_item(
    item_id: int,
    body: PurchaseRequest,
    use_case: PurchaseItem = Depends(get_purchase_item_use_case),
) -> PurchaseResponse:
    try:
        result = await use_case.execute(
            PurchaseItemInput(item_id=item_id, value=body.value, caller=body.caller)
        )
    except MarketplaceError as exc:
        raise to_http_exception(exc)
    return PurchaseResponse(
        listing=_listing_to_response(result.listing, result.total_price),
        fee=result.fee,
    )

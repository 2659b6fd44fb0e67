from fastapi import APIRouter, Depends, status

from nft_marketplace.api.dependencies import (
    get_approve_token_use_case,
    get_context,
    get_deploy_collection_use_case,
    get_mint_token_use_case,
    get_set_approval_for_all_use_case,
)
from nft_marketplace.api.errors import invalid_address, to_http_exception
from nft_marketplace.api.schemas.requests import (
    ApproveTokenRequest,
    DeployCollectionRequest,
    MintRequest,
    SetApprovalForAllRequest,
)
from nft_marketplace.api.schemas.responses import (
    ApprovalResponse,
    CollectionResponse,
    MintResponse,
    OwnerBalanceResponse,
    TokenResponse,
)
from nft_marketplace.application.context import MarketplaceContext
from nft_marketplace.application.use_cases.approve_transfers import (
    ApproveToken,
    ApproveTokenInput,
    SetApprovalForAll,
    SetApprovalForAllInput,
)
from nft_marketplace.application.use_cases.deploy_collection import (
    DeployCollection,
    DeployCollectionInput,
)
from nft_marketplace.application.use_cases.mint_token import MintToken, MintTokenInput
from nft_marketplace.domain.entities.token_registry import TokenRegistry
from nft_marketplace.domain.errors import MarketplaceError
from nft_marketplace.domain.value_objects.address import normalize_address

router = APIRouter(prefix="/collections", tags=["collections"])


def _collection_to_response(collection: TokenRegistry) -> CollectionResponse:
    return CollectionResponse(
        address=collection.address,
        name=collection.name,
        symbol=collection.symbol,
        token_count=collection.token_count,
    )


def _resolve(context: MarketplaceContext, address: str) -> TokenRegistry:
    try:
        return context.get_collection(address)
    except ValueError as exc:
        raise invalid_address(exc)
    except MarketplaceError as exc:
        raise to_http_exception(exc)


@router.get("", response_model=list[CollectionResponse])
async def list_collections(
    context: MarketplaceContext = Depends(get_context),
) -> list[CollectionResponse]:
    return [_collection_to_response(c) for c in context.collections.list_all()]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CollectionResponse)
async def deploy_collection(
    body: DeployCollectionRequest,
    use_case: DeployCollection = Depends(get_deploy_collection_use_case),
    context: MarketplaceContext = Depends(get_context),
) -> CollectionResponse:
    result = use_case.execute(DeployCollectionInput(name=body.name, symbol=body.symbol))
    return _collection_to_response(context.get_collection(result.address))


@router.get("/{address}", response_model=CollectionResponse)
async def get_collection(
    address: str,
    context: MarketplaceContext = Depends(get_context),
) -> CollectionResponse:
    return _collection_to_response(_resolve(context, address))


@router.post(
    "/{address}/tokens", status_code=status.HTTP_201_CREATED, response_model=MintResponse
)
async def mint_token(
    address: str,
    body: MintRequest,
    use_case: MintToken = Depends(get_mint_token_use_case),
    context: MarketplaceContext = Depends(get_context),
) -> MintResponse:
    collection = _resolve(context, address)
    result = await use_case.execute(
        MintTokenInput(collection=collection.address, token_uri=body.token_uri, caller=body.caller)
    )
    return MintResponse(collection=result.collection, token_id=result.token_id, owner=result.owner)


@router.get("/{address}/tokens/{token_id}", response_model=TokenResponse)
async def get_token(
    address: str,
    token_id: int,
    context: MarketplaceContext = Depends(get_context),
) -> TokenResponse:
    collection = _resolve(context, address)
    try:
        return TokenResponse(
            collection=collection.address,
            token_id=token_id,
            owner=collection.owner_of(token_id),
            token_uri=collection.token_uri(token_id),
            approved=collection.get_approved(token_id),
        )
    except MarketplaceError as exc:
        raise to_http_exception(exc)


@router.get("/{address}/owners/{owner}", response_model=OwnerBalanceResponse)
async def get_owner_balance(
    address: str,
    owner: str,
    context: MarketplaceContext = Depends(get_context),
) -> OwnerBalanceResponse:
    collection = _resolve(context, address)
    try:
        owner = normalize_address(owner)
    except ValueError as exc:
        raise invalid_address(exc)
    return OwnerBalanceResponse(
        collection=collection.address, owner=owner, balance=collection.balance_of(owner)
    )


@router.post("/{address}/approvals", response_model=ApprovalResponse)
async def set_approval_for_all(
    address: str,
    body: SetApprovalForAllRequest,
    use_case: SetApprovalForAll = Depends(get_set_approval_for_all_use_case),
    context: MarketplaceContext = Depends(get_context),
) -> ApprovalResponse:
    collection = _resolve(context, address)
    try:
        await use_case.execute(
            SetApprovalForAllInput(
                collection=collection.address,
                operator=body.operator,
                approved=body.approved,
                caller=body.caller,
            )
        )
    except MarketplaceError as exc:
        raise to_http_exception(exc)
    return ApprovalResponse(
        collection=collection.address,
        owner=body.caller,
        operator=body.operator,
        approved=collection.is_approved_for_all(body.caller, body.operator),
    )


@router.post("/{address}/tokens/{token_id}/approve", response_model=TokenResponse)
async def approve_token(
    address: str,
    token_id: int,
    body: ApproveTokenRequest,
    use_case: ApproveToken = Depends(get_approve_token_use_case),
    context: MarketplaceContext = Depends(get_context),
) -> TokenResponse:
    collection = _resolve(context, address)
    try:
        await use_case.execute(
            ApproveTokenInput(
                collection=collection.address, token_id=token_id, to=body.to, caller=body.caller
            )
        )
    except MarketplaceError as exc:
        raise to_http_exception(exc)
    return TokenResponse(
        collection=collection.address,
        token_id=token_id,
        owner=collection.owner_of(token_id),
        token_uri=collection.token_uri(token_id),
        approved=collection.get_approved(token_id),
    )

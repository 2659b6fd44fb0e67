from datetime import datetime
from typing import Any

from pydantic import BaseModel

from nft_marketplace.domain.enums.listing_state import ListingState


class CollectionResponse(BaseModel):
    address: str
    name: str
    symbol: str
    token_count: int


class TokenResponse(BaseModel):
    collection: str
    token_id: int
    owner: str
    token_uri: str
    approved: str


class MintResponse(BaseModel):
    collection: str
    token_id: int
    owner: str


class OwnerBalanceResponse(BaseModel):
    collection: str
    owner: str
    balance: int


class ApprovalResponse(BaseModel):
    collection: str
    owner: str
    operator: str
    approved: bool


class MarketplaceResponse(BaseModel):
    address: str
    fee_account: str
    fee_percent: int
    item_count: int
    balance: int


class ListingResponse(BaseModel):
    item_id: int
    nft: str
    token_id: int
    price: int
    total_price: int
    seller: str
    sold: bool
    state: ListingState
    buyer: str | None = None
    created_at: datetime
    sold_at: datetime | None = None


class ListingsResponse(BaseModel):
    items: list[ListingResponse]
    total: int


class TotalPriceResponse(BaseModel):
    item_id: int
    price: int
    fee: int
    total_price: int


class PurchaseResponse(BaseModel):
    listing: ListingResponse
    fee: int


class AccountResponse(BaseModel):
    address: str
    balance: int


class EventResponse(BaseModel):
    event_type: str
    event_id: str
    occurred_at: str
    data: dict[str, Any]


class EventsResponse(BaseModel):
    events: list[EventResponse]

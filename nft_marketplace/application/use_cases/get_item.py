from dataclasses import dataclass

from nft_marketplace.application.context import MarketplaceContext
from nft_marketplace.domain.entities.listing import Listing


@dataclass
class GetItemOutput:
    listing: Listing
    total_price: int


class GetItem:
    """Use case: look up a listing together with its fee-inclusive price."""

    def __init__(self, context: MarketplaceContext) -> None:
        self._context = context

    def execute(self, item_id: int) -> GetItemOutput:
        marketplace = self._context.marketplace
        listing = marketplace.get_item(item_id)
        return GetItemOutput(listing=listing, total_price=marketplace.get_total_price(item_id))

    def list_all(self, *, unsold_only: bool = False) -> list[GetItemOutput]:
        marketplace = self._context.marketplace
        return [
            GetItemOutput(listing=listing, total_price=marketplace.total_price_for(listing.price))
            for listing in marketplace.items(unsold_only=unsold_only)
        ]

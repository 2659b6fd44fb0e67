from dataclasses import dataclass

import structlog

from nft_marketplace.application.context import MarketplaceContext
from nft_marketplace.application.interfaces.event_publisher import EventPublisher
from nft_marketplace.domain.entities.listing import Listing

logger = structlog.get_logger(__name__)


@dataclass
class PurchaseItemInput:
    item_id: int
    value: int
    caller: str


@dataclass
class PurchaseItemOutput:
    listing: Listing
    total_price: int
    fee: int


class PurchaseItem:
    """
    Use case: buy a listed item.

    Payment is drawn from the caller's balance; the seller receives the list
    price, the fee account receives the fee and the caller receives the token.
    """

    def __init__(self, context: MarketplaceContext, event_publisher: EventPublisher) -> None:
        self._context = context
        self._event_publisher = event_publisher

    async def execute(self, input_data: PurchaseItemInput) -> PurchaseItemOutput:
        marketplace = self._context.marketplace

        marketplace.purchase_item(input_data.item_id, input_data.value, caller=input_data.caller)

        listing = marketplace.get_item(input_data.item_id)
        total_price = marketplace.total_price_for(listing.price)

        events = listing.nft.collect_events() + marketplace.collect_events()
        await self._event_publisher.publish_many(events)

        logger.info(
            "item_bought",
            item_id=listing.item_id,
            nft=listing.asset_contract,
            token_id=listing.token_id,
            price=listing.price,
            fee=total_price - listing.price,
            overpaid=input_data.value - total_price,
            seller=listing.seller,
            buyer=input_data.caller,
        )
        return PurchaseItemOutput(
            listing=listing, total_price=total_price, fee=total_price - listing.price
        )

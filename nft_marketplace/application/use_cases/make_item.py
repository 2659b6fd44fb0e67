from dataclasses import dataclass

import structlog

from nft_marketplace.application.context import MarketplaceContext
from nft_marketplace.application.interfaces.event_publisher import EventPublisher
from nft_marketplace.domain.entities.listing import Listing

logger = structlog.get_logger(__name__)


@dataclass
class MakeItemInput:
    nft: str
    token_id: int
    price: int
    caller: str


@dataclass
class MakeItemOutput:
    listing: Listing


class MakeItem:
    """
    Use case: list a token on the marketplace.

    The seller must already have approved the marketplace on the token's
    collection; custody moves to the marketplace as part of the listing.
    """

    def __init__(self, context: MarketplaceContext, event_publisher: EventPublisher) -> None:
        self._context = context
        self._event_publisher = event_publisher

    async def execute(self, input_data: MakeItemInput) -> MakeItemOutput:
        collection = self._context.get_collection(input_data.nft)
        marketplace = self._context.marketplace

        # Domain errors propagate to the caller with nothing committed
        item_id = marketplace.make_item(
            collection, input_data.token_id, input_data.price, caller=input_data.caller
        )

        events = collection.collect_events() + marketplace.collect_events()
        await self._event_publisher.publish_many(events)

        logger.info(
            "item_offered",
            item_id=item_id,
            nft=collection.address,
            token_id=input_data.token_id,
            price=input_data.price,
            seller=input_data.caller,
        )
        return MakeItemOutput(listing=marketplace.get_item(item_id))

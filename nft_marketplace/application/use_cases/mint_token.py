from dataclasses import dataclass

import structlog

from nft_marketplace.application.context import MarketplaceContext
from nft_marketplace.application.interfaces.event_publisher import EventPublisher

logger = structlog.get_logger(__name__)


@dataclass
class MintTokenInput:
    collection: str
    token_uri: str
    caller: str


@dataclass
class MintTokenOutput:
    collection: str
    token_id: int
    owner: str


class MintToken:
    """Use case: mint the next token of a collection to the caller."""

    def __init__(self, context: MarketplaceContext, event_publisher: EventPublisher) -> None:
        self._context = context
        self._event_publisher = event_publisher

    async def execute(self, input_data: MintTokenInput) -> MintTokenOutput:
        collection = self._context.get_collection(input_data.collection)
        token_id = collection.mint(input_data.token_uri, caller=input_data.caller)

        await self._event_publisher.publish_many(collection.collect_events())

        logger.info(
            "token_minted",
            collection=collection.address,
            token_id=token_id,
            owner=input_data.caller,
        )
        return MintTokenOutput(
            collection=collection.address, token_id=token_id, owner=input_data.caller
        )

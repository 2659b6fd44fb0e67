from dataclasses import dataclass

import structlog

from nft_marketplace.application.context import MarketplaceContext
from nft_marketplace.application.interfaces.event_publisher import EventPublisher

logger = structlog.get_logger(__name__)


@dataclass
class SetApprovalForAllInput:
    collection: str
    operator: str
    approved: bool
    caller: str


@dataclass
class ApproveTokenInput:
    collection: str
    token_id: int
    to: str
    caller: str


class SetApprovalForAll:
    """Use case: let an operator (usually the marketplace) move all of the caller's tokens."""

    def __init__(self, context: MarketplaceContext, event_publisher: EventPublisher) -> None:
        self._context = context
        self._event_publisher = event_publisher

    async def execute(self, input_data: SetApprovalForAllInput) -> None:
        collection = self._context.get_collection(input_data.collection)
        collection.set_approval_for_all(
            input_data.operator, input_data.approved, caller=input_data.caller
        )

        await self._event_publisher.publish_many(collection.collect_events())

        logger.info(
            "approval_for_all_set",
            collection=collection.address,
            owner=input_data.caller,
            operator=input_data.operator,
            approved=input_data.approved,
        )


class ApproveToken:
    """Use case: approve a single address to move one token."""

    def __init__(self, context: MarketplaceContext, event_publisher: EventPublisher) -> None:
        self._context = context
        self._event_publisher = event_publisher

    async def execute(self, input_data: ApproveTokenInput) -> None:
        collection = self._context.get_collection(input_data.collection)
        collection.approve(input_data.to, input_data.token_id, caller=input_data.caller)

        await self._event_publisher.publish_many(collection.collect_events())

        logger.info(
            "token_approved",
            collection=collection.address,
            token_id=input_data.token_id,
            approved=input_data.to,
        )

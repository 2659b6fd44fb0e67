from dataclasses import dataclass

import structlog

from nft_marketplace.application.context import MarketplaceContext
from nft_marketplace.domain.entities.token_registry import TokenRegistry

logger = structlog.get_logger(__name__)


@dataclass
class DeployCollectionInput:
    name: str
    symbol: str


@dataclass
class DeployCollectionOutput:
    address: str
    name: str
    symbol: str


class DeployCollection:
    """Use case: create a new, empty NFT collection and register it."""

    def __init__(self, context: MarketplaceContext) -> None:
        self._context = context

    def execute(self, input_data: DeployCollectionInput) -> DeployCollectionOutput:
        collection = TokenRegistry(name=input_data.name, symbol=input_data.symbol)
        self._context.collections.add(collection)

        logger.info(
            "collection_deployed",
            address=collection.address,
            name=collection.name,
            symbol=collection.symbol,
        )
        return DeployCollectionOutput(
            address=collection.address, name=collection.name, symbol=collection.symbol
        )

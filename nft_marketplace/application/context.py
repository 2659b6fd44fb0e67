from dataclasses import dataclass

from nft_marketplace.application.interfaces.collection_directory import CollectionDirectory
from nft_marketplace.domain.entities.balance_book import BalanceBook
from nft_marketplace.domain.entities.marketplace import Marketplace
from nft_marketplace.domain.entities.token_registry import TokenRegistry
from nft_marketplace.domain.errors import CollectionNotFoundError
from nft_marketplace.domain.value_objects.address import normalize_address


@dataclass
class MarketplaceContext:
    """Everything a running marketplace owns: balances, collections and the ledger."""

    balances: BalanceBook
    collections: CollectionDirectory
    marketplace: Marketplace
    deployer: str

    def get_collection(self, address: str) -> TokenRegistry:
        collection = self.collections.get(normalize_address(address))
        if collection is None:
            raise CollectionNotFoundError(address)
        return collection

from nft_marketplace.application.interfaces.collection_directory import CollectionDirectory
from nft_marketplace.domain.entities.token_registry import TokenRegistry


class InMemoryCollectionDirectory(CollectionDirectory):
    """Keeps deployed collections in a dict keyed by lower-cased address."""

    def __init__(self) -> None:
        self._collections: dict[str, TokenRegistry] = {}

    def add(self, collection: TokenRegistry) -> None:
        self._collections[collection.address.lower()] = collection

    def get(self, address: str) -> TokenRegistry | None:
        return self._collections.get(address.lower())

    def list_all(self) -> list[TokenRegistry]:
        return list(self._collections.values())

from abc import ABC, abstractmethod

from nft_marketplace.domain.entities.token_registry import TokenRegistry


class CollectionDirectory(ABC):
    """Port for looking up deployed NFT collections by address."""

    @abstractmethod
    def add(self, collection: TokenRegistry) -> None:
        ...

    @abstractmethod
    def get(self, address: str) -> TokenRegistry | None:
        ...

    @abstractmethod
    def list_all(self) -> list[TokenRegistry]:
        ...

from dataclasses import dataclass, field
from datetime import datetime, timezone

from nft_marketplace.domain.entities.token_registry import TokenRegistry
from nft_marketplace.domain.enums.listing_state import ListingState
from nft_marketplace.domain.state_machine.listing_state_machine import ListingStateMachine

_state_machine = ListingStateMachine()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Listing:
    """
    A single marketplace item: one token offered for sale at a fixed price.

    The price is what the seller receives; the marketplace fee is charged on
    top of it at purchase time.
    """

    item_id: int
    nft: TokenRegistry = field(repr=False)
    token_id: int
    price: int
    seller: str

    state: ListingState = ListingState.ACTIVE
    buyer: str | None = None

    created_at: datetime = field(default_factory=_utcnow)
    sold_at: datetime | None = None

    @property
    def asset_contract(self) -> str:
        return self.nft.address

    @property
    def sold(self) -> bool:
        return self.state is ListingState.SOLD

    def mark_sold(self, buyer: str) -> None:
        """Flip the listing to SOLD. Raises InvalidStateTransitionError if already sold."""
        _state_machine.validate_transition(self.state, ListingState.SOLD)
        self.state = ListingState.SOLD
        self.buyer = buyer
        self.sold_at = _utcnow()

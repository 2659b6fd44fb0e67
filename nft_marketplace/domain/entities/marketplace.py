from dataclasses import dataclass, field

from nft_marketplace.domain.entities.balance_book import BalanceBook
from nft_marketplace.domain.entities.listing import Listing
from nft_marketplace.domain.entities.token_registry import TokenRegistry
from nft_marketplace.domain.errors import (
    AlreadySoldError,
    InsufficientPaymentError,
    InvalidFeePercentError,
    InvalidPriceError,
    ListingNotFoundError,
    TransferNotAuthorizedError,
)
from nft_marketplace.domain.events.domain_events import (
    BoughtEvent,
    DomainEvent,
    OfferedEvent,
)
from nft_marketplace.domain.value_objects.address import new_address


@dataclass
class Marketplace:
    """
    The listing ledger.

    Holds custody of every listed token under its own address, and settles
    purchases by splitting the buyer's payment between the seller and the
    fee account. Listings are append-only: ids start at 1 and are never reused.

    fee_account and fee_percent are fixed at construction.
    """

    fee_account: str
    fee_percent: int
    balances: BalanceBook = field(repr=False)
    address: str = field(default_factory=new_address)

    item_count: int = field(default=0, init=False)
    _items: dict[int, Listing] = field(default_factory=dict, init=False, repr=False)

    _events: list[DomainEvent] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if not 0 <= self.fee_percent <= 100:
            raise InvalidFeePercentError(self.fee_percent)

    # -------------------------------------------------------------------------
    # Listing
    # -------------------------------------------------------------------------

    def make_item(self, nft: TokenRegistry, token_id: int, price: int, caller: str) -> int:
        """List token_id at price and take custody of it. Returns the new item id."""
        if price <= 0:
            raise InvalidPriceError(price)
        if caller == self.address:
            raise TransferNotAuthorizedError("marketplace cannot list tokens it holds in custody")

        # Registry errors propagate before the counter moves.
        nft.transfer_from(caller, self.address, token_id, caller=self.address)

        self.item_count += 1
        item_id = self.item_count
        self._items[item_id] = Listing(
            item_id=item_id,
            nft=nft,
            token_id=token_id,
            price=price,
            seller=caller,
        )
        self._events.append(
            OfferedEvent(
                item_id=item_id,
                nft=nft.address,
                token_id=token_id,
                price=price,
                seller=caller,
            )
        )
        return item_id

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_item(self, item_id: int) -> Listing:
        if not 1 <= item_id <= self.item_count:
            raise ListingNotFoundError(item_id)
        return self._items[item_id]

    def items(self, *, unsold_only: bool = False) -> list[Listing]:
        listings = [self._items[i] for i in range(1, self.item_count + 1)]
        if unsold_only:
            return [listing for listing in listings if not listing.sold]
        return listings

    def get_total_price(self, item_id: int) -> int:
        """Price plus the marketplace fee, truncated to whole wei."""
        return self.total_price_for(self.get_item(item_id).price)

    def total_price_for(self, price: int) -> int:
        return price * (100 + self.fee_percent) // 100

    # -------------------------------------------------------------------------
    # Purchase
    # -------------------------------------------------------------------------

    def purchase_item(self, item_id: int, payment: int, caller: str) -> None:
        """Buy item_id for payment wei drawn from caller's balance.

        Any payment above the total price stays with the marketplace.
        """
        if not 1 <= item_id <= self.item_count:
            raise ListingNotFoundError(item_id)
        listing = self._items[item_id]
        total_price = self.total_price_for(listing.price)
        if payment < total_price:
            raise InsufficientPaymentError(item_id, total_price, payment)
        if listing.sold:
            raise AlreadySoldError(item_id)
        if caller == self.address:
            raise TransferNotAuthorizedError("marketplace cannot buy its own items")

        snapshot = self.balances.snapshot()
        try:
            self.balances.transfer(caller, self.address, payment)
            self.balances.transfer(self.address, listing.seller, listing.price)
            self.balances.transfer(self.address, self.fee_account, total_price - listing.price)
            listing.nft.transfer_from(self.address, caller, listing.token_id, caller=self.address)
        except Exception:
            self.balances.restore(snapshot)
            raise

        listing.mark_sold(caller)
        self._events.append(
            BoughtEvent(
                item_id=item_id,
                nft=listing.asset_contract,
                token_id=listing.token_id,
                price=listing.price,
                seller=listing.seller,
                buyer=caller,
            )
        )

    # -------------------------------------------------------------------------
    # Event collection
    # -------------------------------------------------------------------------

    def collect_events(self) -> list[DomainEvent]:
        """Return pending events and clear the internal buffer."""
        events = list(self._events)
        self._events.clear()
        return events

from dataclasses import dataclass, field

from nft_marketplace.domain.errors import (
    NotOwnerError,
    TokenNotFoundError,
    TransferNotAuthorizedError,
)
from nft_marketplace.domain.events.domain_events import (
    ApprovalEvent,
    ApprovalForAllEvent,
    DomainEvent,
    TransferEvent,
)
from nft_marketplace.domain.value_objects.address import ZERO_ADDRESS, new_address


@dataclass
class TokenRegistry:
    """
    An NFT collection: mints sequentially numbered tokens, stores a URI for
    each one and tracks ownership and transfer approvals.

    Emits domain events on every mutation; callers are responsible for
    collecting and publishing them.
    """

    name: str = "Ultras"
    symbol: str = "ULTRA"
    address: str = field(default_factory=new_address)

    token_count: int = 0

    _owners: dict[int, str] = field(default_factory=dict, repr=False)
    _token_uris: dict[int, str] = field(default_factory=dict, repr=False)
    _balances: dict[str, int] = field(default_factory=dict, repr=False)
    _token_approvals: dict[int, str] = field(default_factory=dict, repr=False)
    _operator_approvals: dict[tuple[str, str], bool] = field(default_factory=dict, repr=False)

    _events: list[DomainEvent] = field(default_factory=list, repr=False, compare=False)

    # -------------------------------------------------------------------------
    # Minting
    # -------------------------------------------------------------------------

    def mint(self, token_uri: str, caller: str) -> int:
        """Mint the next token to caller and return its id."""
        self.token_count += 1
        token_id = self.token_count
        self._owners[token_id] = caller
        self._balances[caller] = self.balance_of(caller) + 1
        self._token_uris[token_id] = token_uri
        self._events.append(
            TransferEvent(
                contract=self.address,
                from_address=ZERO_ADDRESS,
                to_address=caller,
                token_id=token_id,
            )
        )
        return token_id

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def owner_of(self, token_id: int) -> str:
        try:
            return self._owners[token_id]
        except KeyError:
            raise TokenNotFoundError(token_id) from None

    def token_uri(self, token_id: int) -> str:
        self.owner_of(token_id)
        return self._token_uris[token_id]

    def balance_of(self, owner: str) -> int:
        return self._balances.get(owner, 0)

    def get_approved(self, token_id: int) -> str:
        self.owner_of(token_id)
        return self._token_approvals.get(token_id, ZERO_ADDRESS)

    def is_approved_for_all(self, owner: str, operator: str) -> bool:
        return self._operator_approvals.get((owner, operator), False)

    def is_approved_or_owner(self, spender: str, token_id: int) -> bool:
        owner = self.owner_of(token_id)
        return (
            spender == owner
            or self.get_approved(token_id) == spender
            or self.is_approved_for_all(owner, spender)
        )

    # -------------------------------------------------------------------------
    # Approvals
    # -------------------------------------------------------------------------

    def set_approval_for_all(self, operator: str, approved: bool, caller: str) -> None:
        if operator == caller:
            raise TransferNotAuthorizedError("approve to caller")
        self._operator_approvals[(caller, operator)] = approved
        self._events.append(
            ApprovalForAllEvent(
                contract=self.address,
                owner=caller,
                operator=operator,
                approved=approved,
            )
        )

    def approve(self, to: str, token_id: int, caller: str) -> None:
        owner = self.owner_of(token_id)
        if to == owner:
            raise TransferNotAuthorizedError("approval to current owner")
        if caller != owner and not self.is_approved_for_all(owner, caller):
            raise TransferNotAuthorizedError(
                "approve caller is not token owner or approved for all"
            )
        self._token_approvals[token_id] = to
        self._events.append(
            ApprovalEvent(contract=self.address, owner=owner, approved=to, token_id=token_id)
        )

    # -------------------------------------------------------------------------
    # Transfers
    # -------------------------------------------------------------------------

    def transfer_from(self, from_address: str, to_address: str, token_id: int, caller: str) -> None:
        """Move token_id from from_address to to_address on behalf of caller.

        All checks run before any state changes, so a failed transfer leaves the
        registry untouched.
        """
        owner = self.owner_of(token_id)
        if not self.is_approved_or_owner(caller, token_id):
            raise TransferNotAuthorizedError("caller is not token owner or approved")
        if owner != from_address:
            raise NotOwnerError(token_id, from_address)
        if to_address == ZERO_ADDRESS:
            raise TransferNotAuthorizedError("transfer to the zero address")

        self._token_approvals.pop(token_id, None)
        self._balances[from_address] -= 1
        self._balances[to_address] = self.balance_of(to_address) + 1
        self._owners[token_id] = to_address

        self._events.append(
            TransferEvent(
                contract=self.address,
                from_address=from_address,
                to_address=to_address,
                token_id=token_id,
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

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from nft_marketplace.domain.value_objects.address import ZERO_ADDRESS


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class DomainEvent:
    """Base class for all domain events."""

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=_utcnow)


@dataclass(frozen=True)
class TransferEvent(DomainEvent):
    """Published whenever a token changes owner, including mints (from the zero address)."""

    contract: str = ZERO_ADDRESS
    from_address: str = ZERO_ADDRESS
    to_address: str = ZERO_ADDRESS
    token_id: int = 0


@dataclass(frozen=True)
class ApprovalEvent(DomainEvent):
    """Published when an owner approves a single address for one token."""

    contract: str = ZERO_ADDRESS
    owner: str = ZERO_ADDRESS
    approved: str = ZERO_ADDRESS
    token_id: int = 0


@dataclass(frozen=True)
class ApprovalForAllEvent(DomainEvent):
    """Published when an owner grants or revokes an operator for all their tokens."""

    contract: str = ZERO_ADDRESS
    owner: str = ZERO_ADDRESS
    operator: str = ZERO_ADDRESS
    approved: bool = False


@dataclass(frozen=True)
class OfferedEvent(DomainEvent):
    """Published when a new item is listed on the marketplace."""

    item_id: int = 0
    nft: str = ZERO_ADDRESS
    token_id: int = 0
    price: int = 0
    seller: str = ZERO_ADDRESS


@dataclass(frozen=True)
class BoughtEvent(DomainEvent):
    """Published when a listed item is purchased."""

    item_id: int = 0
    nft: str = ZERO_ADDRESS
    token_id: int = 0
    price: int = 0
    seller: str = ZERO_ADDRESS
    buyer: str = ZERO_ADDRESS

"""Routing keys and JSON payloads for domain events."""
import json
from typing import Any

from nft_marketplace.domain.events.domain_events import (
    ApprovalEvent,
    ApprovalForAllEvent,
    BoughtEvent,
    DomainEvent,
    OfferedEvent,
    TransferEvent,
)


def event_to_routing_key(event: DomainEvent) -> str:
    if isinstance(event, OfferedEvent):
        return "marketplace.item.offered"
    if isinstance(event, BoughtEvent):
        return "marketplace.item.bought"
    if isinstance(event, TransferEvent):
        return "nft.transfer"
    if isinstance(event, ApprovalEvent):
        return "nft.approval"
    if isinstance(event, ApprovalForAllEvent):
        return "nft.approval_for_all"
    return "event.unknown"


def event_to_payload(event: DomainEvent) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "event_type": event_to_routing_key(event),
        "event_id": str(event.event_id),
        "occurred_at": event.occurred_at.isoformat(),
    }

    if isinstance(event, OfferedEvent):
        payload.update(
            {
                "item_id": event.item_id,
                "nft": event.nft,
                "token_id": event.token_id,
                "price": str(event.price),
                "seller": event.seller,
            }
        )
    elif isinstance(event, BoughtEvent):
        payload.update(
            {
                "item_id": event.item_id,
                "nft": event.nft,
                "token_id": event.token_id,
                "price": str(event.price),
                "seller": event.seller,
                "buyer": event.buyer,
            }
        )
    elif isinstance(event, TransferEvent):
        payload.update(
            {
                "contract": event.contract,
                "from": event.from_address,
                "to": event.to_address,
                "token_id": event.token_id,
            }
        )
    elif isinstance(event, ApprovalEvent):
        payload.update(
            {
                "contract": event.contract,
                "owner": event.owner,
                "approved": event.approved,
                "token_id": event.token_id,
            }
        )
    elif isinstance(event, ApprovalForAllEvent):
        payload.update(
            {
                "contract": event.contract,
                "owner": event.owner,
                "operator": event.operator,
                "approved": event.approved,
            }
        )

    return payload


def serialise_event(event: DomainEvent) -> str:
    return json.dumps(event_to_payload(event), default=str)

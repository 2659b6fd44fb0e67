from fastapi import APIRouter, Depends, Query

from nft_marketplace.api.dependencies import get_event_log
from nft_marketplace.api.schemas.responses import EventResponse, EventsResponse
from nft_marketplace.infrastructure.messaging.event_serialization import event_to_payload
from nft_marketplace.infrastructure.messaging.in_memory_event_log import InMemoryEventLog

router = APIRouter(prefix="/events", tags=["events"])

_ENVELOPE_KEYS = ("event_type", "event_id", "occurred_at")


@router.get("", response_model=EventsResponse)
async def list_events(
    event_type: str | None = Query(default=None),
    limit: int = Query(default=100, ge=1, le=1000),
    event_log: InMemoryEventLog = Depends(get_event_log),
) -> EventsResponse:
    """Published events, oldest first; filter with e.g. event_type=marketplace.item.bought."""
    responses = []
    for event in event_log.list_events(event_type=event_type, limit=limit):
        payload = event_to_payload(event)
        responses.append(
            EventResponse(
                event_type=payload["event_type"],
                event_id=payload["event_id"],
                occurred_at=payload["occurred_at"],
                data={k: v for k, v in payload.items() if k not in _ENVELOPE_KEYS},
            )
        )
    return EventsResponse(events=responses)

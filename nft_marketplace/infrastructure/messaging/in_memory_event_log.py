"""
In-memory event log.

Keeps every published event in order so the API can expose the
marketplace's history the way a chain exposes contract logs.
"""
from nft_marketplace.application.interfaces.event_publisher import EventPublisher
from nft_marketplace.domain.events.domain_events import DomainEvent
from nft_marketplace.infrastructure.messaging.event_serialization import event_to_routing_key


class InMemoryEventLog(EventPublisher):
    def __init__(self) -> None:
        self._events: list[DomainEvent] = []

    async def publish(self, event: DomainEvent) -> None:
        self._events.append(event)

    def list_events(self, *, event_type: str | None = None, limit: int = 100) -> list[DomainEvent]:
        """Return the most recent events, oldest first, optionally filtered by routing key."""
        events = self._events
        if event_type is not None:
            events = [e for e in events if event_to_routing_key(e) == event_type]
        return events[-limit:] if limit > 0 else []

from nft_marketplace.application.interfaces.event_publisher import EventPublisher
from nft_marketplace.domain.events.domain_events import DomainEvent


class FanOutEventPublisher(EventPublisher):
    """Forwards every event to each wrapped publisher in order."""

    def __init__(self, publishers: list[EventPublisher]) -> None:
        self._publishers = publishers

    async def publish(self, event: DomainEvent) -> None:
        for publisher in self._publishers:
            await publisher.publish(event)

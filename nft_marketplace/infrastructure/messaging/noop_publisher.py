"""
No-op event publisher, used when no message broker is configured.
"""
import structlog

from nft_marketplace.application.interfaces.event_publisher import EventPublisher
from nft_marketplace.domain.events.domain_events import DomainEvent

logger = structlog.get_logger(__name__)


class NoOpEventPublisher(EventPublisher):
    """Discards all events."""

    async def publish(self, event: DomainEvent) -> None:
        logger.debug("noop_event_discarded", event_type=type(event).__name__)

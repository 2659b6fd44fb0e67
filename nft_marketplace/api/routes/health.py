from fastapi import APIRouter, Depends

from nft_marketplace.api.dependencies import get_context
from nft_marketplace.application.context import MarketplaceContext
from nft_marketplace.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(context: MarketplaceContext = Depends(get_context)) -> dict:  # type: ignore[type-arg]
    """Liveness + broker health check."""
    rabbitmq_status = "disabled"
    if settings.rabbitmq_url:
        rabbitmq_status = "connected"
        try:
            import pika

            connection = pika.BlockingConnection(pika.URLParameters(settings.rabbitmq_url))
            connection.close()
        except Exception as exc:
            rabbitmq_status = f"error: {exc}"

    overall = "degraded" if rabbitmq_status.startswith("error") else "healthy"

    return {
        "status": overall,
        "marketplace": context.marketplace.address,
        "rabbitmq": rabbitmq_status,
    }

"""Builds a fresh marketplace context from settings."""
import structlog

from nft_marketplace.application.context import MarketplaceContext
from nft_marketplace.config import Settings
from nft_marketplace.domain.entities.balance_book import BalanceBook
from nft_marketplace.domain.entities.marketplace import Marketplace
from nft_marketplace.domain.entities.token_registry import TokenRegistry
from nft_marketplace.domain.value_objects.address import normalize_address
from nft_marketplace.infrastructure.collections.in_memory_directory import (
    InMemoryCollectionDirectory,
)

logger = structlog.get_logger(__name__)


def build_context(settings: Settings) -> MarketplaceContext:
    deployer = normalize_address(settings.deployer_address)
    fee_account = normalize_address(settings.fee_account) if settings.fee_account else deployer

    balances = BalanceBook()
    collections = InMemoryCollectionDirectory()
    collections.add(TokenRegistry(name=settings.collection_name, symbol=settings.collection_symbol))

    marketplace = Marketplace(
        fee_account=fee_account,
        fee_percent=settings.fee_percent,
        balances=balances,
    )

    logger.info(
        "marketplace_deployed",
        marketplace=marketplace.address,
        fee_account=fee_account,
        fee_percent=settings.fee_percent,
    )
    return MarketplaceContext(
        balances=balances,
        collections=collections,
        marketplace=marketplace,
        deployer=deployer,
    )

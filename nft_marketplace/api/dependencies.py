"""
FastAPI dependency injection wiring.

The marketplace context and event log live for the lifetime of the process;
use cases are built per request around them.
"""
from functools import lru_cache

from fastapi import Depends

from nft_marketplace.application.context import MarketplaceContext
from nft_marketplace.application.interfaces.event_publisher import EventPublisher
from nft_marketplace.application.use_cases.approve_transfers import (
    ApproveToken,
    SetApprovalForAll,
)
from nft_marketplace.application.use_cases.deploy_collection import DeployCollection
from nft_marketplace.application.use_cases.fund_account import FundAccount
from nft_marketplace.application.use_cases.get_item import GetItem
from nft_marketplace.application.use_cases.make_item import MakeItem
from nft_marketplace.application.use_cases.mint_token import MintToken
from nft_marketplace.application.use_cases.purchase_item import PurchaseItem
from nft_marketplace.bootstrap import build_context
from nft_marketplace.config import settings
from nft_marketplace.infrastructure.messaging.fan_out_publisher import FanOutEventPublisher
from nft_marketplace.infrastructure.messaging.in_memory_event_log import InMemoryEventLog
from nft_marketplace.infrastructure.messaging.noop_publisher import NoOpEventPublisher
from nft_marketplace.infrastructure.messaging.rabbitmq_publisher import RabbitMQPublisher


# ---- Process-wide state ----------------------------------------------------

@lru_cache
def get_context() -> MarketplaceContext:
    return build_context(settings)


@lru_cache
def get_event_log() -> InMemoryEventLog:
    return InMemoryEventLog()


def get_broker_publisher() -> EventPublisher:
    if settings.rabbitmq_url:
        return RabbitMQPublisher(settings.rabbitmq_url)
    return NoOpEventPublisher()


def get_event_publisher(
    event_log: InMemoryEventLog = Depends(get_event_log),
    broker: EventPublisher = Depends(get_broker_publisher),
) -> EventPublisher:
    return FanOutEventPublisher([event_log, broker])


# ---- Use-case dependencies -------------------------------------------------

def get_deploy_collection_use_case(
    context: MarketplaceContext = Depends(get_context),
) -> DeployCollection:
    return DeployCollection(context)


def get_mint_token_use_case(
    context: MarketplaceContext = Depends(get_context),
    event_publisher: EventPublisher = Depends(get_event_publisher),
) -> MintToken:
    return MintToken(context, event_publisher)


def get_set_approval_for_all_use_case(
    context: MarketplaceContext = Depends(get_context),
    event_publisher: EventPublisher = Depends(get_event_publisher),
) -> SetApprovalForAll:
    return SetApprovalForAll(context, event_publisher)


def get_approve_token_use_case(
    context: MarketplaceContext = Depends(get_context),
    event_publisher: EventPublisher = Depends(get_event_publisher),
) -> ApproveToken:
    return ApproveToken(context, event_publisher)


def get_make_item_use_case(
    context: MarketplaceContext = Depends(get_context),
    event_publisher: EventPublisher = Depends(get_event_publisher),
) -> MakeItem:
    return MakeItem(context, event_publisher)


def get_purchase_item_use_case(
    context: MarketplaceContext = Depends(get_context),
    event_publisher: EventPublisher = Depends(get_event_publisher),
) -> PurchaseItem:
    return PurchaseItem(context, event_publisher)


def get_item_use_case(context: MarketplaceContext = Depends(get_context)) -> GetItem:
    return GetItem(context)


def get_fund_account_use_case(context: MarketplaceContext = Depends(get_context)) -> FundAccount:
    return FundAccount(context)

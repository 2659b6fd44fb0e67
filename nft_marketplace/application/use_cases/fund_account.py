from dataclasses import dataclass

import structlog

from nft_marketplace.application.context import MarketplaceContext

logger = structlog.get_logger(__name__)


@dataclass
class FundAccountInput:
    address: str
    amount: int


@dataclass
class FundAccountOutput:
    address: str
    balance: int


class FundAccount:
    """Use case: credit native currency to an account (development faucet)."""

    def __init__(self, context: MarketplaceContext) -> None:
        self._context = context

    def execute(self, input_data: FundAccountInput) -> FundAccountOutput:
        balances = self._context.balances
        balances.credit(input_data.address, input_data.amount)
        balance = balances.balance_of(input_data.address)

        logger.info("account_funded", address=input_data.address, amount=input_data.amount)
        return FundAccountOutput(address=input_data.address, balance=balance)

"""Domain errors raised by the token registry, balance book and marketplace."""


class MarketplaceError(Exception):
    """Base class for all domain errors."""


class InvalidPriceError(MarketplaceError):
    def __init__(self, price: int) -> None:
        self.price = price
        super().__init__("Price cannot be zero")


class InvalidFeePercentError(MarketplaceError):
    def __init__(self, fee_percent: int) -> None:
        self.fee_percent = fee_percent
        super().__init__(f"Fee percent must be between 0 and 100, got {fee_percent}")


class ListingNotFoundError(MarketplaceError):
    def __init__(self, item_id: int) -> None:
        self.item_id = item_id
        super().__init__("item doesn't exist")


class InsufficientPaymentError(MarketplaceError):
    def __init__(self, item_id: int, required: int, offered: int) -> None:
        self.item_id = item_id
        self.required = required
        self.offered = offered
        super().__init__("not enough ether to cover item price and market fee")


class AlreadySoldError(MarketplaceError):
    def __init__(self, item_id: int) -> None:
        self.item_id = item_id
        super().__init__("item already sold")


class TokenNotFoundError(MarketplaceError):
    def __init__(self, token_id: int) -> None:
        self.token_id = token_id
        super().__init__(f"Token {token_id} does not exist")


class NotOwnerError(MarketplaceError):
    def __init__(self, token_id: int, address: str) -> None:
        self.token_id = token_id
        self.address = address
        super().__init__(f"{address} is not the owner of token {token_id}")


class TransferNotAuthorizedError(MarketplaceError):
    def __init__(self, message: str) -> None:
        super().__init__(message)


class InsufficientFundsError(MarketplaceError):
    def __init__(self, address: str, balance: int, amount: int) -> None:
        self.address = address
        self.balance = balance
        self.amount = amount
        super().__init__(f"{address} has {balance} wei, cannot pay {amount} wei")


class CollectionNotFoundError(MarketplaceError):
    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(f"No collection deployed at {address}")

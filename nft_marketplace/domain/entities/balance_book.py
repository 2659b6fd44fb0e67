from nft_marketplace.domain.errors import InsufficientFundsError


class BalanceBook:
    """
    Native-currency balances in wei, keyed by address.

    Purchases move funds through here; snapshot() / restore() let a caller
    undo a partially applied set of transfers.
    """

    def __init__(self) -> None:
        self._balances: dict[str, int] = {}

    def balance_of(self, address: str) -> int:
        return self._balances.get(address, 0)

    def credit(self, address: str, amount: int) -> None:
        if amount < 0:
            raise ValueError("Amount must not be negative")
        self._balances[address] = self.balance_of(address) + amount

    def transfer(self, from_address: str, to_address: str, amount: int) -> None:
        if amount < 0:
            raise ValueError("Amount must not be negative")
        balance = self.balance_of(from_address)
        if balance < amount:
            raise InsufficientFundsError(from_address, balance, amount)
        self._balances[from_address] = balance - amount
        self._balances[to_address] = self.balance_of(to_address) + amount

    def snapshot(self) -> dict[str, int]:
        return dict(self._balances)

    def restore(self, snapshot: dict[str, int]) -> None:
        self._balances = dict(snapshot)

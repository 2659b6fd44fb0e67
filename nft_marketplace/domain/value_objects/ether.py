"""
Fixed-point currency helpers.

All amounts inside the system are integers in wei; ether values only appear
at the edges (configuration, tests, display).
"""
from decimal import Decimal, Inexact, getcontext, localcontext

WEI_DECIMALS = 18
WEI_PER_ETHER = 10**WEI_DECIMALS


def _exact_context(value: Decimal):  # type: ignore[no-untyped-def]
    """A context wide enough to scale value by 10**18 without rounding, trapping Inexact."""
    ctx = getcontext().copy()
    ctx.prec = max(len(value.as_tuple().digits), 1) + WEI_DECIMALS + 2
    ctx.traps[Inexact] = True
    return localcontext(ctx)


def to_wei(ether: int | str | Decimal) -> int:
    """Convert an ether amount to wei, rejecting sub-wei precision."""
    value = Decimal(str(ether))
    with _exact_context(value):
        amount = value.scaleb(WEI_DECIMALS)
    if amount != amount.to_integral_value():
        raise ValueError(f"{ether} ether is not a whole number of wei")
    return int(amount)


def from_wei(wei: int) -> Decimal:
    value = Decimal(wei)
    with _exact_context(value):
        return value.scaleb(-WEI_DECIMALS)

"""Account and contract addresses."""
import re
import secrets

ZERO_ADDRESS = "0x" + "0" * 40

_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")


def new_address() -> str:
    """Return a fresh random address."""
    return "0x" + secrets.token_hex(20)


def is_address(value: str) -> bool:
    return bool(_ADDRESS_RE.match(value))


def normalize_address(value: str) -> str:
    """Lower-case an address so lookups are case-insensitive."""
    if not is_address(value):
        raise ValueError(f"Invalid address: {value!r}")
    return value.lower()

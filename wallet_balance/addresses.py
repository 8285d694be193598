"""
Wallet Address Validation Module

Syntactic validation of Solana wallet addresses. Only the base-58 alphabet
and the length bounds are checked; there is no checksum decoding and no
on-chain existence lookup.
"""

from dataclasses import dataclass
from typing import Any
import re

from .errors import InvalidAddressFormat

# Base-58 drops 0, O, I and l to avoid visually ambiguous characters
BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

MIN_ADDRESS_LENGTH = 32
MAX_ADDRESS_LENGTH = 44

ADDRESS_PATTERN = re.compile(r"[1-9A-HJ-NP-Za-km-z]+")


def _check_address(candidate: Any) -> None:
    """Raise InvalidAddressFormat unless candidate passes the length then alphabet checks"""
    if not isinstance(candidate, str):
        raise InvalidAddressFormat(candidate, f"expected a string, got {type(candidate).__name__}")

    if not candidate:
        raise InvalidAddressFormat(candidate, "address is empty")

    length = len(candidate)
    if length < MIN_ADDRESS_LENGTH or length > MAX_ADDRESS_LENGTH:
        raise InvalidAddressFormat(
            candidate,
            f"length {length} outside {MIN_ADDRESS_LENGTH}-{MAX_ADDRESS_LENGTH}"
        )

    if not ADDRESS_PATTERN.fullmatch(candidate):
        invalid = sorted({c for c in candidate if c not in BASE58_ALPHABET})
        raise InvalidAddressFormat(
            candidate,
            f"characters outside the base-58 alphabet: {''.join(invalid)!r}"
        )


@dataclass(frozen=True)
class WalletAddress:
    """
    Immutable, syntactically valid Solana wallet address.

    Construction runs the same checks as validate_address, so an unchecked
    string can never be wrapped.
    """
    value: str

    def __post_init__(self):
        _check_address(self.value)

    def truncated(self) -> str:
        """Shortened form for display, e.g. 'ALiCEq...Nqp3'"""
        return f"{self.value[:6]}...{self.value[-4:]}"

    def __str__(self) -> str:
        return self.value


def validate_address(candidate: Any) -> WalletAddress:
    """
    Validate a candidate wallet address

    Args:
        candidate: Address string from the caller

    Returns:
        WalletAddress wrapping the validated string

    Raises:
        InvalidAddressFormat: If the length or alphabet check fails
    """
    return WalletAddress(candidate)


def is_valid_address(candidate: Any) -> bool:
    """Check an address without raising"""
    try:
        _check_address(candidate)
    except InvalidAddressFormat:
        return False
    return True

"""Shared type definitions for SliSwap models.

These types are used across configuration, pools and quotes.
"""

import re
from enum import Enum
from typing import Any

# Endless account/object addresses are 32 bytes (64 hex chars after 0x)
ADDRESS_PATTERN = r"^0x[a-fA-F0-9]{64}$"

_ADDRESS_RE = re.compile(ADDRESS_PATTERN)

# Maximum u128 value (Move amounts and reserves are u128)
U128_MAX = 2**128 - 1


class Asset(str, Enum):
    """Assets tradable through the SliSwap pools."""

    USDT = "USDT"
    EDS = "EDS"
    VDEP = "VDEP"


def is_valid_address(address: str) -> bool:
    """Check if a string is a 0x-prefixed 32-byte hex address."""
    return bool(_ADDRESS_RE.match(address))


def normalize_address(address: str, *, validate: bool = False) -> str:
    """Normalize an Endless address to lowercase.

    Args:
        address: An address (with or without 0x prefix)
        validate: If True, raises ValueError for invalid addresses.

    Returns:
        Lowercase, 0x-prefixed address
    """
    normalized = address.lower()
    if not normalized.startswith("0x"):
        normalized = "0x" + normalized
    if validate and not is_valid_address(normalized):
        raise ValueError(f"Invalid address: {address} (must be 0x + 64 hex chars)")
    return normalized


def parse_u128(value: Any) -> int:
    """Parse an on-chain u128 amount (decimal string or int).

    Args:
        value: Value to parse

    Returns:
        The amount as an int

    Raises:
        ValueError: If value is not a non-negative integer within u128 range
    """
    # bool is an int subclass; never a valid amount
    if isinstance(value, bool):
        raise ValueError(f"U128 must be string or int, got {type(value).__name__}")

    if isinstance(value, int):
        int_value = value
    elif isinstance(value, str):
        if not value.isdigit():
            raise ValueError(f"U128 must be a decimal integer string: '{value}'")
        int_value = int(value)
    else:
        raise ValueError(f"U128 must be string or int, got {type(value).__name__}")

    if int_value < 0:
        raise ValueError(f"U128 cannot be negative: {value}")
    if int_value > U128_MAX:
        raise ValueError(f"U128 overflow: {value} > 2^128-1")
    return int_value


__all__ = [
    "ADDRESS_PATTERN",
    "U128_MAX",
    "Asset",
    "is_valid_address",
    "normalize_address",
    "parse_u128",
]

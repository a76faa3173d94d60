"""Data models for the SliSwap quote engine."""

from sliswap.models.quote import Quote
from sliswap.models.types import Asset, is_valid_address, normalize_address, parse_u128

__all__ = [
    "Asset",
    "Quote",
    "is_valid_address",
    "normalize_address",
    "parse_u128",
]

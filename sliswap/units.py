"""Fixed-point conversion between human amounts and atomic integers.

All conversions run in a 78-digit decimal context, enough for u256-sized
values, so large reserves of high-decimals assets keep every digit.
"""

from __future__ import annotations

import decimal
from decimal import Decimal

# 78 digits of precision — enough for uint256 values (up to ~10^77)
DECIMAL_HIGH_PREC_CONTEXT = decimal.Context(prec=78)


def to_decimal(amount: Decimal | int | float | str) -> Decimal:
    """Coerce an amount to Decimal.

    Floats go through str() so 0.1 means one tenth rather than its
    binary approximation.
    """
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, float):
        return Decimal(str(amount))
    return Decimal(amount)


def to_atomic(amount: Decimal | int | float | str, decimals: int) -> int:
    """Convert a human amount to atomic units, truncating toward zero.

    Never rounds up, so the caller is never quoted for more than it asked.

    Args:
        amount: Non-negative amount in the asset's human units
        decimals: Asset decimal precision

    Returns:
        floor(amount * 10**decimals)

    Raises:
        ValueError: If amount is negative or not finite
    """
    value = to_decimal(amount)
    if not value.is_finite():
        raise ValueError(f"Amount must be finite: {amount}")
    if value < 0:
        raise ValueError(f"Amount cannot be negative: {amount}")
    # Shift the exponent directly; scaleb would round inputs longer than the context
    sign, digits, exponent = value.as_tuple()
    scaled = Decimal((sign, digits, exponent + decimals))
    # Non-negative, so truncation is floor
    return int(scaled)


def from_atomic(amount: int, decimals: int) -> Decimal:
    """Convert atomic units to a human amount (amount / 10**decimals)."""
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        return Decimal(amount).scaleb(-decimals)


__all__ = [
    "DECIMAL_HIGH_PREC_CONTEXT",
    "from_atomic",
    "to_atomic",
    "to_decimal",
]

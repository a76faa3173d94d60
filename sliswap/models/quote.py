"""Quote model returned by the SliSwap quote engine.

Serialized with camelCase names (``marketExpected``, ``idealAmount``, ...).
All amounts are human-denominated decimals of the output asset; slippages
are signed percentages. JSON output encodes every value as a decimal string
so no digit is lost to float rounding.
"""

import decimal
from decimal import Decimal

from pydantic import BaseModel, Field

from sliswap.units import DECIMAL_HIGH_PREC_CONTEXT


class Quote(BaseModel):
    """Expected output and slippage for a swap.

    ``ideal_amount`` always equals ``market_expected`` and ``fee_slippage``
    always equals ``total_slippage``: fee-induced slippage is not separated
    from price-impact slippage.
    """

    market_expected: Decimal = Field(
        alias="marketExpected",
        description="Output at the reserve-implied price, ignoring price impact.",
    )
    ideal_amount: Decimal = Field(alias="idealAmount", description="Same as marketExpected.")
    actual_amount: Decimal = Field(
        alias="actualAmount",
        description="Output quoted by the pool contract(s) for this trade.",
    )
    total_slippage: Decimal = Field(
        alias="totalSlippage",
        description="(marketExpected - actualAmount) / marketExpected * 100.",
    )
    fee_slippage: Decimal = Field(alias="feeSlippage", description="Same as totalSlippage.")

    model_config = {"populate_by_name": True, "frozen": True}

    @classmethod
    def from_amounts(cls, market_expected: Decimal, actual_amount: Decimal) -> "Quote":
        """Build a quote, deriving slippage from the two amounts.

        Raises:
            ZeroDivisionError: If market_expected is zero
        """
        if market_expected == 0:
            raise ZeroDivisionError("market_expected is zero")
        with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
            total_slippage = (market_expected - actual_amount) / market_expected * 100
        return cls(
            market_expected=market_expected,
            ideal_amount=market_expected,
            actual_amount=actual_amount,
            total_slippage=total_slippage,
            fee_slippage=total_slippage,
        )


__all__ = ["Quote"]

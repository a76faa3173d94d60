"""Reserve-implied prices and slippage.

Prices here ignore the trade's own price impact: they are the marginal
rate of a constant-product pool, reserve_out / reserve_in, with each
reserve scaled by its own asset's decimals.
"""

from __future__ import annotations

import decimal
from decimal import Decimal
from typing import TYPE_CHECKING

from sliswap.errors import IlliquidPoolError
from sliswap.models.types import Asset
from sliswap.units import DECIMAL_HIGH_PREC_CONTEXT, from_atomic

if TYPE_CHECKING:
    from sliswap.config import QuoteConfig
    from sliswap.pools import Pool, PoolRegistry, Reserves


def reserve_price(
    registry: PoolRegistry,
    config: QuoteConfig,
    pool: Pool,
    reserves: Reserves,
    base: Asset,
    quote: Asset,
) -> Decimal:
    """Price of one unit of `base` in units of `quote` implied by reserves.

    Args:
        registry: Registry used to find each asset's reserve slot
        config: Supplies asset decimals
        pool: Pool holding both assets
        reserves: Snapshot of the pool's reserves
        base: Asset being priced
        quote: Asset the price is denominated in

    Returns:
        (reserve_quote / 10**dec_quote) / (reserve_base / 10**dec_base)

    Raises:
        UnknownPoolError: If either asset is not in the pool
        IlliquidPoolError: If either reserve is zero
    """
    reserve_base = reserves.for_slot(registry.slot_of(pool, base))
    reserve_quote = reserves.for_slot(registry.slot_of(pool, quote))
    if reserves.is_empty:
        raise IlliquidPoolError(
            f"Pool {pool.name} has an empty reserve "
            f"({reserves.reserve0}, {reserves.reserve1}); no market price"
        )
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        return from_atomic(reserve_quote, config.decimals(quote)) / from_atomic(
            reserve_base, config.decimals(base)
        )


__all__ = ["reserve_price"]

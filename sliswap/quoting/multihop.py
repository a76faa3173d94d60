"""Two-hop quotes through a shared intermediate asset."""

from __future__ import annotations

import asyncio
import decimal
from decimal import Decimal

import structlog

from sliswap.errors import IlliquidPoolError
from sliswap.models.quote import Quote
from sliswap.models.types import Asset
from sliswap.pools import Pool
from sliswap.quoting.direct import DirectQuoter
from sliswap.quoting.pricing import reserve_price
from sliswap.units import DECIMAL_HIGH_PREC_CONTEXT, to_decimal

logger = structlog.get_logger()


class MultihopQuoter:
    """Quotes a swap between two assets that share no pool.

    The realized output chains the legs' realized amounts: leg 2 sells what
    leg 1 actually returned. The market expectation is a cross price taken
    straight from both pools' reserves, so slippage measures the cumulative
    two-hop impact against the frictionless cross rate.
    """

    def __init__(self, direct: DirectQuoter) -> None:
        self.direct = direct

    async def quote(
        self,
        from_asset: Asset,
        to_asset: Asset,
        amount: Decimal | int | float | str,
    ) -> Quote | None:
        """Quote selling `amount` of from_asset for to_asset via the intermediate asset.

        Returns:
            Quote, or None if the pair has no two-hop route or a leg has no pool

        Raises:
            ValueError: If amount is not positive
            ReaderError: If the chain reader fails
            IlliquidPoolError: If either pool has an empty reserve
        """
        registry = self.direct.registry
        intermediate = registry.intermediate_for(from_asset, to_asset)
        if intermediate is None:
            return None
        pool_in = registry.resolve_pool(from_asset, intermediate)
        pool_out = registry.resolve_pool(intermediate, to_asset)
        if pool_in is None or pool_out is None:
            return None

        amount_dec = to_decimal(amount)
        leg1 = await self.direct.quote(from_asset, intermediate, amount_dec)
        if leg1 is None:
            return None

        if leg1.actual_amount > 0:
            leg2 = await self.direct.quote(intermediate, to_asset, leg1.actual_amount)
            if leg2 is None:
                return None
            actual_amount = leg2.actual_amount
        else:
            # Nothing reaches the second pool
            actual_amount = Decimal(0)

        market_expected = await self._cross_market_expected(
            pool_in, pool_out, from_asset, intermediate, to_asset, amount_dec
        )

        result = Quote.from_amounts(market_expected, actual_amount)
        logger.debug(
            "multihop_quote",
            from_asset=from_asset.value,
            via=intermediate.value,
            to_asset=to_asset.value,
            amount=str(amount_dec),
            intermediate_amount=str(leg1.actual_amount),
            actual_amount=str(actual_amount),
            total_slippage=str(result.total_slippage),
        )
        return result

    async def _cross_market_expected(
        self,
        pool_in: Pool,
        pool_out: Pool,
        from_asset: Asset,
        intermediate: Asset,
        to_asset: Asset,
        amount: Decimal,
    ) -> Decimal:
        """Expected output at the reserve-implied cross price.

        Both assets are priced in the intermediate asset from freshly read
        reserves rather than by composing the legs' market prices.
        """
        registry = self.direct.registry
        config = self.direct.config
        reader = self.direct.reader

        reserves_in, reserves_out = await asyncio.gather(
            reader.pool_reserves(pool_in.address),
            reader.pool_reserves(pool_out.address),
        )
        price_from = reserve_price(
            registry, config, pool_in, reserves_in, base=from_asset, quote=intermediate
        )
        price_to = reserve_price(
            registry, config, pool_out, reserves_out, base=to_asset, quote=intermediate
        )
        with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
            market_expected = amount * (price_from / price_to)
        if market_expected == 0:
            raise IlliquidPoolError(
                f"Cross price {from_asset.value}->{to_asset.value} via {intermediate.value} is zero"
            )
        return market_expected


__all__ = ["MultihopQuoter"]

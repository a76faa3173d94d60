"""Single-hop quotes against one pool."""

from __future__ import annotations

import asyncio
import decimal
from decimal import Decimal

import structlog

from sliswap.config import QuoteConfig
from sliswap.errors import IlliquidPoolError
from sliswap.models.quote import Quote
from sliswap.models.types import Asset
from sliswap.pools import PoolRegistry
from sliswap.quoting.pricing import reserve_price
from sliswap.reader import ChainReader
from sliswap.units import DECIMAL_HIGH_PREC_CONTEXT, from_atomic, to_atomic, to_decimal

logger = structlog.get_logger()


class DirectQuoter:
    """Quotes a swap through the single pool serving a pair.

    The realized output comes from the pool contract's own quote; the
    market expectation comes from the current reserves. Both reads are
    issued concurrently.
    """

    def __init__(self, reader: ChainReader, registry: PoolRegistry, config: QuoteConfig) -> None:
        self.reader = reader
        self.registry = registry
        self.config = config

    async def quote(
        self,
        from_asset: Asset,
        to_asset: Asset,
        amount: Decimal | int | float | str,
    ) -> Quote | None:
        """Quote selling `amount` of from_asset for to_asset.

        Args:
            from_asset: Asset sold
            to_asset: Asset bought
            amount: Positive amount of from_asset in human units

        Returns:
            Quote, or None if no pool serves the pair

        Raises:
            ValueError: If amount is not positive
            ReaderError: If the chain reader fails
            IlliquidPoolError: If the pool has an empty reserve
        """
        pool = self.registry.resolve_pool(from_asset, to_asset)
        if pool is None:
            return None

        amount_dec = to_decimal(amount)
        if amount_dec <= 0:
            raise ValueError(f"Amount must be positive: {amount}")

        amount_in = to_atomic(amount_dec, self.config.decimals(from_asset))
        amount_out, reserves = await asyncio.gather(
            self.reader.get_amount_out(pool.address, self.config.metadata(from_asset), amount_in),
            self.reader.pool_reserves(pool.address),
        )
        actual = from_atomic(amount_out, self.config.decimals(to_asset))

        market_price = reserve_price(
            self.registry, self.config, pool, reserves, base=from_asset, quote=to_asset
        )
        with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
            market_expected = amount_dec * market_price
        if market_expected == 0:
            raise IlliquidPoolError(f"Pool {pool.name} prices {amount} {from_asset.value} at zero")

        result = Quote.from_amounts(market_expected, actual)
        logger.debug(
            "direct_quote",
            pool=pool.name,
            from_asset=from_asset.value,
            to_asset=to_asset.value,
            amount_in=amount_in,
            amount_out=amount_out,
            reserve0=reserves.reserve0,
            reserve1=reserves.reserve1,
            total_slippage=str(result.total_slippage),
        )
        return result


__all__ = ["DirectQuoter"]

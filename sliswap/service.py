"""Quote facade selecting direct, multi-hop or no route.

QuoteService is the entry point of the quote engine. A None result means
"no quote available" for the pair; every other failure is raised.
"""

from __future__ import annotations

from decimal import Decimal

import structlog

from sliswap.config import DEFAULT_CONFIG, NODE_URL, QuoteConfig
from sliswap.models.quote import Quote
from sliswap.models.types import Asset
from sliswap.pools import PoolRegistry
from sliswap.quoting import DirectQuoter, MultihopQuoter
from sliswap.reader import ChainReader, EndlessViewReader

logger = structlog.get_logger()


class QuoteService:
    """Computes live swap quotes for the configured pools.

    Args:
        reader: Chain reader used for every calculation
        config: Asset and pool tables. Defaults to the mainnet deployment.
    """

    def __init__(self, reader: ChainReader, config: QuoteConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self.registry = PoolRegistry.from_config(config)
        self.direct = DirectQuoter(reader, self.registry, config)
        self.multihop = MultihopQuoter(self.direct)

    @property
    def reader(self) -> ChainReader:
        return self.direct.reader

    async def calculate_swap_live(
        self,
        from_asset: Asset,
        to_asset: Asset,
        amount: Decimal | int | float | str,
    ) -> Quote | None:
        """Quote selling `amount` of from_asset for to_asset at current reserves.

        Args:
            from_asset: Asset sold
            to_asset: Asset bought
            amount: Positive amount of from_asset in human units

        Returns:
            Quote, or None if from_asset == to_asset or no route serves the pair

        Raises:
            ValueError: If amount is not positive
            ReaderError: If the chain reader fails
            IlliquidPoolError: If a pool on the route has an empty reserve
        """
        if from_asset == to_asset:
            return None

        if self.registry.resolve_pool(from_asset, to_asset) is not None:
            return await self.direct.quote(from_asset, to_asset, amount)

        if self.registry.intermediate_for(from_asset, to_asset) is not None:
            return await self.multihop.quote(from_asset, to_asset, amount)

        logger.info("no_route", from_asset=from_asset.value, to_asset=to_asset.value)
        return None


_default_service: QuoteService | None = None


def get_default_service() -> QuoteService:
    """Get the process-wide service backed by the node at SLISWAP_NODE_URL."""
    global _default_service
    if _default_service is None:
        reader = EndlessViewReader.from_config(DEFAULT_CONFIG, node_url=NODE_URL)
        _default_service = QuoteService(reader, DEFAULT_CONFIG)
    return _default_service


async def close_default_service() -> None:
    """Release the default service's HTTP client, if one was created."""
    global _default_service
    if _default_service is None:
        return
    reader = _default_service.reader
    _default_service = None
    if isinstance(reader, EndlessViewReader):
        await reader.aclose()


async def calculate_swap_live(
    from_asset: Asset,
    to_asset: Asset,
    amount: Decimal | int | float | str,
    service: QuoteService | None = None,
) -> Quote | None:
    """Quote a swap with the given service, or the default one."""
    return await (service or get_default_service()).calculate_swap_live(
        from_asset, to_asset, amount
    )


__all__ = [
    "QuoteService",
    "calculate_swap_live",
    "close_default_service",
    "get_default_service",
]

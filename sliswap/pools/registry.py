"""Pool registry for routing swaps across the SliSwap pools.

Maps unordered asset pairs to the pool servicing them and tells which
reserve slot each asset occupies. Pools are static: the registry is built
once from a QuoteConfig and never changes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from sliswap.errors import UnknownPoolError
from sliswap.models.types import Asset, normalize_address
from sliswap.pools.types import Pool

if TYPE_CHECKING:
    from sliswap.config import QuoteConfig

logger = structlog.get_logger()


class PoolRegistry:
    """Registry of the deployed pools.

    Pools are keyed by the frozenset of their two assets, so lookups are
    order independent.
    """

    def __init__(self, pools: list[Pool] | tuple[Pool, ...] | None = None) -> None:
        """Initialize the registry with optional pools.

        Args:
            pools: Initial pools. If None, starts empty.
        """
        self._pools: dict[frozenset[Asset], Pool] = {}
        self._by_address: dict[str, Pool] = {}

        if pools:
            for pool in pools:
                self.add_pool(pool)

    @classmethod
    def from_config(cls, config: QuoteConfig) -> PoolRegistry:
        """Build a registry from a QuoteConfig's pool table."""
        return cls(config.pools)

    def add_pool(self, pool: Pool) -> None:
        """Add a pool to the registry.

        Args:
            pool: The pool to add. If a pool for this pair already exists,
                  it will be replaced.

        Raises:
            ValueError: If both slots hold the same asset
        """
        if pool.asset0 == pool.asset1:
            raise ValueError(f"Pool {pool.address} pairs {pool.asset0.value} with itself")

        pair_key = frozenset(pool.assets)
        existing = self._pools.get(pair_key)
        if existing is not None:
            logger.debug(
                "pool_replaced",
                pair=pool.name,
                old_pool=existing.address[-8:],
                new_pool=pool.address[-8:],
            )
            del self._by_address[normalize_address(existing.address)]
        self._pools[pair_key] = pool
        self._by_address[normalize_address(pool.address)] = pool

    def resolve_pool(self, asset_a: Asset, asset_b: Asset) -> Pool | None:
        """Get the pool for an asset pair (order independent).

        Returns:
            The pool, or None if no direct pool exists
        """
        if asset_a == asset_b:
            return None
        return self._pools.get(frozenset((asset_a, asset_b)))

    def slot_of(self, pool: Pool, asset: Asset) -> int:
        """Get the reserve slot (0 or 1) an asset occupies in a pool.

        Raises:
            UnknownPoolError: If the pool is not registered or does not hold the asset
        """
        self._require_registered(pool)
        if asset == pool.asset0:
            return 0
        if asset == pool.asset1:
            return 1
        raise UnknownPoolError(f"Asset {asset.value} is not in pool {pool.name} ({pool.address})")

    def token_out(self, pool: Pool, asset_in: Asset) -> Asset:
        """Get the asset received when selling asset_in into pool."""
        return pool.asset1 if self.slot_of(pool, asset_in) == 0 else pool.asset0

    def pools_with(self, asset: Asset) -> list[Pool]:
        """Get all pools holding an asset."""
        return [pool for pool in self._pools.values() if asset in pool.assets]

    def intermediate_for(self, asset_a: Asset, asset_b: Asset) -> Asset | None:
        """Find the shared asset routing a pair with no direct pool.

        Returns:
            The intermediate asset, or None if the pair has a direct pool,
            is degenerate, or no two-hop route exists
        """
        if asset_a == asset_b or self.resolve_pool(asset_a, asset_b) is not None:
            return None
        for pool in self.pools_with(asset_a):
            candidate = self.token_out(pool, asset_a)
            if self.resolve_pool(candidate, asset_b) is not None:
                return candidate
        return None

    def _require_registered(self, pool: Pool) -> None:
        if self._by_address.get(normalize_address(pool.address)) != pool:
            raise UnknownPoolError(f"Pool {pool.name} ({pool.address}) is not registered")


__all__ = ["PoolRegistry"]

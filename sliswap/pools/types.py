"""Pool type definitions."""

from __future__ import annotations

from dataclasses import dataclass

from sliswap.models.types import Asset


@dataclass(frozen=True)
class Pool:
    """A deployed two-asset constant-product pool.

    The slot order of the assets is fixed at deployment and matches the
    order of the reserves returned by ``pool_reserves``.
    """

    address: str
    asset0: Asset
    asset1: Asset

    @property
    def assets(self) -> tuple[Asset, Asset]:
        return self.asset0, self.asset1

    @property
    def name(self) -> str:
        """Human-readable pair name, e.g. "EDS/USDT"."""
        return f"{self.asset0.value}/{self.asset1.value}"


@dataclass(frozen=True)
class Reserves:
    """Atomic reserve snapshot of a pool, valid only at the instant queried."""

    reserve0: int
    reserve1: int

    def for_slot(self, slot: int) -> int:
        """Get the reserve held in slot 0 or 1."""
        if slot == 0:
            return self.reserve0
        if slot == 1:
            return self.reserve1
        raise ValueError(f"Invalid reserve slot: {slot}")

    @property
    def is_empty(self) -> bool:
        """True if either side of the pool holds nothing."""
        return self.reserve0 == 0 or self.reserve1 == 0


__all__ = ["Pool", "Reserves"]

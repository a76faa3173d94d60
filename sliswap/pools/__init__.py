"""Pool management package.

Provides PoolRegistry for routing swaps across the deployed pools.
"""

from .registry import PoolRegistry
from .types import Pool, Reserves

__all__ = [
    "PoolRegistry",
    "Pool",
    "Reserves",
]

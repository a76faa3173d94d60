"""Quote calculators.

Module structure:
- pricing.py: reserve-implied prices
- direct.py: DirectQuoter for pairs served by one pool
- multihop.py: MultihopQuoter for pairs routed through an intermediate asset
"""

from sliswap.quoting.direct import DirectQuoter
from sliswap.quoting.multihop import MultihopQuoter
from sliswap.quoting.pricing import reserve_price

__all__ = [
    "DirectQuoter",
    "MultihopQuoter",
    "reserve_price",
]

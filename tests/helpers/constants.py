"""Shared constants for tests.

Pool addresses are the mainnet ones so DEFAULT_CONFIG can be used directly.

Usage:
    from tests.helpers import EDS_USDT, USDT_VDEP
    # or
    from tests.helpers.constants import EDS_USDT, USDT_VDEP
"""

from sliswap.constants import (
    EDS_METADATA,
    EDS_USDT_POOL,
    USDT_METADATA,
    USDT_VDEP_POOL,
    VDEP_METADATA,
)

# =============================================================================
# Pools and asset metadata (mainnet)
# =============================================================================

EDS_USDT = EDS_USDT_POOL  # slot 0: EDS (8 decimals), slot 1: USDT (6 decimals)
USDT_VDEP = USDT_VDEP_POOL  # slot 0: USDT (6 decimals), slot 1: VDEP (8 decimals)

EDS = EDS_METADATA
USDT = USDT_METADATA
VDEP = VDEP_METADATA

# Address not registered anywhere
UNKNOWN_POOL = "0x" + "ab" * 32

# =============================================================================
# Reserve fixtures
# =============================================================================

# 1000 EDS / 2000 USDT -> 1 EDS = 2 USDT
EDS_USDT_RESERVES = (1_000 * 10**8, 2_000 * 10**6)

# 4000 USDT / 1000 VDEP -> 1 VDEP = 4 USDT
USDT_VDEP_RESERVES = (4_000 * 10**6, 1_000 * 10**8)

DEFAULT_RESERVES = {
    EDS_USDT: EDS_USDT_RESERVES,
    USDT_VDEP: USDT_VDEP_RESERVES,
}


__all__ = [
    "EDS_USDT",
    "USDT_VDEP",
    "EDS",
    "USDT",
    "VDEP",
    "UNKNOWN_POOL",
    "EDS_USDT_RESERVES",
    "USDT_VDEP_RESERVES",
    "DEFAULT_RESERVES",
]

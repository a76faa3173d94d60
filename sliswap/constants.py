"""Deployment constants for the SliSwap pools on Endless mainnet.

Centralizes pool addresses, asset metadata addresses and decimals.
"""

from sliswap.models.types import is_valid_address


def _validate_address(name: str, address: str) -> str:
    """Validate and return an on-chain address.

    Args:
        name: Name of the object (for error messages)
        address: The address to validate

    Returns:
        The validated address

    Raises:
        ValueError: If the address is invalid
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 64 hex chars)")
    return address


# Package publishing the liquidity_pool module (view functions live here)
SLISWAP_MODULE = _validate_address(
    "SLISWAP_MODULE", "0x4198e1871cf459faceccb3d3e86882d7337d17badb0626a33538674385f6e5f4"
)

# View functions called on the liquidity_pool module
GET_AMOUNT_OUT_FUNCTION = "liquidity_pool::get_amount_out"
POOL_RESERVES_FUNCTION = "liquidity_pool::pool_reserves"

# Fungible asset metadata objects
# All addresses are validated at import time to catch typos early
USDT_METADATA = _validate_address(
    "USDT", "0x0707313fc6e87b5bad0bb90b65dbfe13522fde9e71261e91ab76e93fff707934"
)
EDS_METADATA = _validate_address(
    "EDS", "0xc69712057e634bebc9ab02745d2d69ee738e3eb4f5d30189a9acbf8e08fb823e"
)
VDEP_METADATA = _validate_address(
    "VDEP", "0x073a178b234acfa232c3c44fd94a32076d4f8a53dba143d99f3bafc84a05620d"
)

USDT_DECIMALS = 6
EDS_DECIMALS = 8
VDEP_DECIMALS = 8

# Pool objects (slot 0 asset listed first)
EDS_USDT_POOL = _validate_address(
    "EDS/USDT pool", "0x52fe2d47e68de101b84826dce2a09d9d37e2fd2256aa8cda13931ba07cf33082"
)
USDT_VDEP_POOL = _validate_address(
    "USDT/VDEP pool", "0x947079020ff7a80396813db930dc2731182d7d7601c253a5f44248446287aaac"
)

"""Static configuration for the quote engine."""

from __future__ import annotations

import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from sliswap.constants import (
    EDS_DECIMALS,
    EDS_METADATA,
    EDS_USDT_POOL,
    GET_AMOUNT_OUT_FUNCTION,
    POOL_RESERVES_FUNCTION,
    SLISWAP_MODULE,
    USDT_DECIMALS,
    USDT_METADATA,
    USDT_VDEP_POOL,
    VDEP_DECIMALS,
    VDEP_METADATA,
)
from sliswap.models.types import Asset
from sliswap.pools.types import Pool

# Node REST API base (local full node by default)
DEFAULT_NODE_URL = "http://127.0.0.1:8080/v1"

NODE_URL = os.environ.get("SLISWAP_NODE_URL", DEFAULT_NODE_URL)
READER_TIMEOUT = float(os.environ.get("SLISWAP_READER_TIMEOUT", "10.0"))


@dataclass(frozen=True)
class AssetInfo:
    """Immutable on-chain attributes of an asset.

    Attributes:
        metadata: Fungible asset metadata address used to address the asset
        decimals: Fractional digits used for atomic scaling
    """

    metadata: str
    decimals: int


@dataclass(frozen=True)
class QuoteConfig:
    """Centralized configuration for quoting.

    Holds the asset table, the deployed pools and the module publishing the
    pool view functions. Calculators receive an instance instead of reading
    module globals, so tests can substitute alternate fixtures.

    Attributes:
        assets: Asset -> AssetInfo
        pools: Deployed pools; together they must form a connected path
        module_address: Address of the package publishing liquidity_pool
    """

    assets: Mapping[Asset, AssetInfo]
    pools: tuple[Pool, ...]
    module_address: str = SLISWAP_MODULE

    def __post_init__(self) -> None:
        # Freeze the asset table so a shared config cannot be mutated
        object.__setattr__(self, "assets", MappingProxyType(dict(self.assets)))
        for pool in self.pools:
            for asset in pool.assets:
                if asset not in self.assets:
                    raise ValueError(f"Pool {pool.name} references unconfigured asset {asset.value}")

    def decimals(self, asset: Asset) -> int:
        return self.assets[asset].decimals

    def metadata(self, asset: Asset) -> str:
        return self.assets[asset].metadata

    @property
    def get_amount_out_function(self) -> str:
        """Fully qualified get_amount_out view function."""
        return f"{self.module_address}::{GET_AMOUNT_OUT_FUNCTION}"

    @property
    def pool_reserves_function(self) -> str:
        """Fully qualified pool_reserves view function."""
        return f"{self.module_address}::{POOL_RESERVES_FUNCTION}"


# Mainnet deployment
DEFAULT_CONFIG = QuoteConfig(
    assets={
        Asset.USDT: AssetInfo(metadata=USDT_METADATA, decimals=USDT_DECIMALS),
        Asset.EDS: AssetInfo(metadata=EDS_METADATA, decimals=EDS_DECIMALS),
        Asset.VDEP: AssetInfo(metadata=VDEP_METADATA, decimals=VDEP_DECIMALS),
    },
    pools=(
        Pool(address=EDS_USDT_POOL, asset0=Asset.EDS, asset1=Asset.USDT),
        Pool(address=USDT_VDEP_POOL, asset0=Asset.USDT, asset1=Asset.VDEP),
    ),
)


__all__ = [
    "AssetInfo",
    "QuoteConfig",
    "DEFAULT_CONFIG",
    "DEFAULT_NODE_URL",
    "NODE_URL",
    "READER_TIMEOUT",
]

"""Pytest configuration and fixtures."""

import asyncio
from collections.abc import Coroutine
from typing import Any, TypeVar

import pytest

from sliswap.config import DEFAULT_CONFIG, AssetInfo, QuoteConfig
from sliswap.models.types import Asset
from sliswap.pools import Pool, PoolRegistry
from sliswap.quoting import DirectQuoter, MultihopQuoter
from sliswap.reader import InMemoryReader
from sliswap.service import QuoteService
from tests.helpers import make_reader, make_service

T = TypeVar("T")


def run(coro: Coroutine[Any, Any, T]) -> T:
    """Drive a coroutine to completion on a fresh event loop."""
    return asyncio.run(coro)


# =============================================================================
# Configuration fixtures
# =============================================================================


@pytest.fixture
def config() -> QuoteConfig:
    """The mainnet configuration."""
    return DEFAULT_CONFIG


@pytest.fixture
def registry(config: QuoteConfig) -> PoolRegistry:
    """Registry of the mainnet pools."""
    return PoolRegistry.from_config(config)


@pytest.fixture
def eds_usdt_only_config() -> QuoteConfig:
    """A deployment with only the EDS/USDT pool (VDEP is unroutable)."""
    return QuoteConfig(
        assets=DEFAULT_CONFIG.assets,
        pools=(DEFAULT_CONFIG.pools[0],),
    )


@pytest.fixture
def usdt_first_pool() -> Pool:
    """A pool with a 6-decimals asset in slot 0 and an 8-decimals asset in slot 1."""
    return Pool(address="0x" + "0a" * 32, asset0=Asset.USDT, asset1=Asset.EDS)


@pytest.fixture
def usdt_first_config(usdt_first_pool: Pool) -> QuoteConfig:
    """Single-pool configuration built around usdt_first_pool."""
    return QuoteConfig(
        assets={
            Asset.USDT: AssetInfo(metadata="0x" + "01" * 32, decimals=6),
            Asset.EDS: AssetInfo(metadata="0x" + "02" * 32, decimals=8),
            Asset.VDEP: AssetInfo(metadata="0x" + "03" * 32, decimals=8),
        },
        pools=(usdt_first_pool,),
    )


# =============================================================================
# Reader and calculator fixtures
# =============================================================================


@pytest.fixture
def reader() -> InMemoryReader:
    """In-memory reader over the default reserves, constant product quotes."""
    return make_reader()


@pytest.fixture
def direct(reader: InMemoryReader, registry: PoolRegistry, config: QuoteConfig) -> DirectQuoter:
    return DirectQuoter(reader, registry, config)


@pytest.fixture
def multihop(direct: DirectQuoter) -> MultihopQuoter:
    return MultihopQuoter(direct)


@pytest.fixture
def service(reader: InMemoryReader) -> QuoteService:
    """Quote service over the default in-memory reader."""
    return make_service(reader)

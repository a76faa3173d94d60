"""Chain reader implementations for querying pool state.

The quote engine only needs two read-only view functions of the
liquidity_pool module. ChainReader is the protocol the calculators depend
on; EndlessViewReader talks to a node's REST API and InMemoryReader serves
fixed data for tests and offline use.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

import httpx
import structlog

from sliswap.config import NODE_URL, READER_TIMEOUT
from sliswap.errors import ReaderError
from sliswap.models.types import normalize_address, parse_u128
from sliswap.pools.types import Reserves

if TYPE_CHECKING:
    from sliswap.config import QuoteConfig

logger = structlog.get_logger()


class ChainReader(Protocol):
    """Protocol for chain reader implementations.

    This allows swapping between a node-backed reader and an in-memory
    reader for testing. Implementations raise ReaderError on any failure.
    """

    async def get_amount_out(self, pool: str, asset_in: str, amount_in: int) -> int:
        """Get the pool's quoted output for an exact input.

        Args:
            pool: Pool address
            asset_in: Metadata address of the input asset
            amount_in: Atomic input amount

        Returns:
            Atomic output amount
        """
        ...

    async def pool_reserves(self, pool: str) -> Reserves:
        """Get the pool's current reserves in slot order."""
        ...


def parse_view_amounts(function: str, data: Any, expected: int) -> list[int]:
    """Validate a view function result as a list of u128 amounts.

    Raises:
        ReaderError: If the result is not a list of `expected` numeric strings
    """
    if not isinstance(data, list):
        raise ReaderError(f"{function} returned {type(data).__name__}, expected a list")
    if len(data) != expected:
        raise ReaderError(f"{function} returned {len(data)} values, expected {expected}")
    try:
        return [parse_u128(item) for item in data]
    except ValueError as e:
        raise ReaderError(f"{function} returned a malformed amount: {e}") from e


class EndlessViewReader:
    """Reader that calls view functions through a node's REST API.

    Each call is a POST to ``{node_url}/view``. Amounts travel as decimal
    strings. Use as an async context manager, or call aclose() when done.
    """

    def __init__(
        self,
        get_amount_out_function: str,
        pool_reserves_function: str,
        node_url: str = NODE_URL,
        timeout_seconds: float = READER_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the reader.

        Args:
            get_amount_out_function: Fully qualified get_amount_out view function
            pool_reserves_function: Fully qualified pool_reserves view function
            node_url: REST API base, e.g. "http://127.0.0.1:8080/v1"
            timeout_seconds: Per-request timeout for the owned client
            client: Optional client to use instead of creating one. A
                    client passed in is not closed by aclose().
        """
        self.get_amount_out_function = get_amount_out_function
        self.pool_reserves_function = pool_reserves_function
        self.node_url = node_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout_seconds)

    @classmethod
    def from_config(
        cls,
        config: QuoteConfig,
        node_url: str = NODE_URL,
        timeout_seconds: float = READER_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> EndlessViewReader:
        """Create a reader for the view functions of a QuoteConfig."""
        return cls(
            get_amount_out_function=config.get_amount_out_function,
            pool_reserves_function=config.pool_reserves_function,
            node_url=node_url,
            timeout_seconds=timeout_seconds,
            client=client,
        )

    async def get_amount_out(self, pool: str, asset_in: str, amount_in: int) -> int:
        data = await self._view(self.get_amount_out_function, [pool, asset_in, str(amount_in)])
        (amount_out,) = parse_view_amounts(self.get_amount_out_function, data, 1)
        return amount_out

    async def pool_reserves(self, pool: str) -> Reserves:
        data = await self._view(self.pool_reserves_function, [pool])
        reserve0, reserve1 = parse_view_amounts(self.pool_reserves_function, data, 2)
        return Reserves(reserve0=reserve0, reserve1=reserve1)

    async def _view(self, function: str, arguments: list[str]) -> Any:
        """Execute a view function and return the decoded JSON body."""
        payload = {"function": function, "type_arguments": [], "arguments": arguments}
        try:
            response = await self._client.post(f"{self.node_url}/view", json=payload)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "view_request_failed",
                function=function,
                status_code=e.response.status_code,
                body=e.response.text[:200],
            )
            raise ReaderError(f"{function} failed with HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.warning("view_request_failed", function=function, error=str(e))
            raise ReaderError(f"{function} request failed: {e}") from e
        except ValueError as e:
            # Body is not JSON
            raise ReaderError(f"{function} returned a non-JSON body") from e

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> EndlessViewReader:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


class InMemoryReader:
    """Reader serving fixed reserves and quotes without a node.

    Configure with reserves per pool and, optionally, exact quotes. Calls
    are tracked for assertions.
    """

    def __init__(
        self,
        reserves: Mapping[str, Reserves | tuple[int, int]],
        quotes: Mapping[tuple[str, str, int], int] | None = None,
        slots: Mapping[str, tuple[str, str]] | None = None,
        fee_bps: int = 30,
    ) -> None:
        """Initialize the reader.

        Args:
            reserves: Pool address -> reserves (or (reserve0, reserve1))
            quotes: (pool, asset_in metadata, amount_in) -> amount_out for
                    specific quotes
            slots: Pool address -> (asset0 metadata, asset1 metadata). If set,
                   unconfigured quotes use the constant product formula
                   against the stored reserves.
            fee_bps: Pool fee in basis points for the formula (30 = 0.3%)
        """
        self.reserves: dict[str, Reserves] = {}
        for pool, value in reserves.items():
            if not isinstance(value, Reserves):
                value = Reserves(reserve0=value[0], reserve1=value[1])
            self.reserves[normalize_address(pool)] = value
        self.quotes = {
            (normalize_address(pool), normalize_address(asset), amount): out
            for (pool, asset, amount), out in (quotes or {}).items()
        }
        self.slots = {
            normalize_address(pool): (normalize_address(m0), normalize_address(m1))
            for pool, (m0, m1) in (slots or {}).items()
        }
        self.fee_bps = fee_bps
        self.calls: list[tuple[str, ...]] = []  # (method, pool, ...)

    @classmethod
    def from_config(
        cls,
        config: QuoteConfig,
        reserves: Mapping[str, Reserves | tuple[int, int]],
        quotes: Mapping[tuple[str, str, int], int] | None = None,
        fee_bps: int = 30,
    ) -> InMemoryReader:
        """Create a reader whose formula knows the slot layout of config's pools."""
        slots = {
            pool.address: (config.metadata(pool.asset0), config.metadata(pool.asset1))
            for pool in config.pools
        }
        return cls(reserves=reserves, quotes=quotes, slots=slots, fee_bps=fee_bps)

    async def get_amount_out(self, pool: str, asset_in: str, amount_in: int) -> int:
        pool_key = normalize_address(pool)
        asset_key = normalize_address(asset_in)
        self.calls.append(("get_amount_out", pool_key, asset_key, str(amount_in)))

        key = (pool_key, asset_key, amount_in)
        if key in self.quotes:
            return self.quotes[key]

        if pool_key not in self.slots:
            raise ReaderError(f"No quote configured for {key}")
        reserves = self._reserves(pool_key)
        metadata0, metadata1 = self.slots[pool_key]
        if asset_key == metadata0:
            reserve_in, reserve_out = reserves.reserve0, reserves.reserve1
        elif asset_key == metadata1:
            reserve_in, reserve_out = reserves.reserve1, reserves.reserve0
        else:
            raise ReaderError(f"Asset {asset_in} is not in pool {pool}")
        return self._constant_product_out(amount_in, reserve_in, reserve_out)

    async def pool_reserves(self, pool: str) -> Reserves:
        pool_key = normalize_address(pool)
        self.calls.append(("pool_reserves", pool_key))
        return self._reserves(pool_key)

    def _reserves(self, pool_key: str) -> Reserves:
        if pool_key not in self.reserves:
            raise ReaderError(f"Unknown pool {pool_key}")
        return self.reserves[pool_key]

    def _constant_product_out(self, amount_in: int, reserve_in: int, reserve_out: int) -> int:
        """Formula: amount_out = (in * fee * res_out) / (res_in * 10000 + in * fee)"""
        if amount_in <= 0 or reserve_in <= 0 or reserve_out <= 0:
            return 0
        amount_in_with_fee = amount_in * (10000 - self.fee_bps)
        return (amount_in_with_fee * reserve_out) // (reserve_in * 10000 + amount_in_with_fee)


__all__ = [
    "ChainReader",
    "EndlessViewReader",
    "InMemoryReader",
    "parse_view_amounts",
]

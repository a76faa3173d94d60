"""SliSwap error classes.

Only raised faults live here. A missing route is not an exception: the
quote calculators return None for it.
"""


class SliswapError(Exception):
    """Base error for SliSwap operations."""

    pass


class UnroutableAssetPair(SliswapError):
    """Neither a direct pool nor a two-hop route serves the pair.

    The calculators signal this by returning None. The class exists for
    callers that need to turn that None into an error (e.g. the HTTP API).
    """

    pass


class UnknownPoolError(SliswapError):
    """An asset/pool combination is missing from the static registry.

    Indicates a configuration or programming defect, never a runtime
    condition.
    """

    pass


class ReaderError(SliswapError):
    """The chain reader failed (transport, HTTP status, malformed body, VM abort)."""

    pass


class IlliquidPoolError(SliswapError):
    """A pool reserve is zero, so no market price exists."""

    pass


__all__ = [
    "SliswapError",
    "UnroutableAssetPair",
    "UnknownPoolError",
    "ReaderError",
    "IlliquidPoolError",
]

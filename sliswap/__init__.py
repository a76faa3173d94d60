"""SliSwap quote engine - swap output and slippage for the Endless pools."""

from sliswap.models import Asset, Quote
from sliswap.service import QuoteService, calculate_swap_live, get_default_service

__version__ = "0.1.0"
__all__ = [
    "Asset",
    "Quote",
    "QuoteService",
    "calculate_swap_live",
    "get_default_service",
    "__version__",
]

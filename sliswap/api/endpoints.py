"""API endpoints for the SliSwap quote engine."""

from decimal import Decimal

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query

from sliswap.errors import IlliquidPoolError, ReaderError, UnroutableAssetPair
from sliswap.models.quote import Quote
from sliswap.models.types import Asset
from sliswap.service import QuoteService, get_default_service

logger = structlog.get_logger()

router = APIRouter()


def get_service() -> QuoteService:
    """Dependency provider for the quote service.

    Override this in tests to inject a service backed by an in-memory reader:
        app.dependency_overrides[get_service] = lambda: service

    Returns:
        The service to quote with.
    """
    return get_default_service()


@router.get("/quote/{from_asset}/{to_asset}", response_model_by_alias=True)
async def quote(
    from_asset: Asset,
    to_asset: Asset,
    amount: Decimal = Query(gt=0, description="Amount of from_asset in human units"),
    service: QuoteService = Depends(get_service),
) -> Quote:
    """Quote a swap at current pool reserves.

    Error Handling:
        - Invalid asset or non-positive amount: 422 Validation Error
        - No route for the pair (including from == to): 404
        - Chain reader failure: 502
        - Empty pool reserve: 503
    """
    try:
        result = await service.calculate_swap_live(from_asset, to_asset, amount)
    except ReaderError as e:
        logger.warning(
            "quote_reader_failed",
            from_asset=from_asset.value,
            to_asset=to_asset.value,
            error=str(e),
        )
        raise HTTPException(status_code=502, detail=f"Chain reader failed: {e}") from e
    except IlliquidPoolError as e:
        logger.warning(
            "quote_illiquid_pool",
            from_asset=from_asset.value,
            to_asset=to_asset.value,
            error=str(e),
        )
        raise HTTPException(status_code=503, detail=str(e)) from e

    if result is None:
        raise HTTPException(
            status_code=404,
            detail=f"{UnroutableAssetPair.__name__}: no route from {from_asset.value} "
            f"to {to_asset.value}",
        )

    logger.info(
        "returning_quote",
        from_asset=from_asset.value,
        to_asset=to_asset.value,
        amount=str(amount),
        actual_amount=str(result.actual_amount),
        total_slippage=str(result.total_slippage),
    )
    return result

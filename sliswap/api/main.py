"""FastAPI application for the SliSwap quote engine."""

import logging
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI

from sliswap.api.endpoints import router
from sliswap.service import close_default_service

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("SLISWAP_HOST", "0.0.0.0")
PORT = int(os.environ.get("SLISWAP_PORT", "8000"))
DEBUG = os.environ.get("SLISWAP_DEBUG", "false").lower() in ("true", "1", "yes")


def configure_logging(debug: bool = DEBUG) -> None:
    """Configure structlog for console output."""
    log_level = logging.DEBUG if debug else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    yield
    await close_default_service()


app = FastAPI(
    title="SliSwap Quote Engine",
    description="Swap output and slippage quotes for the SliSwap pools",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok"}


def run() -> None:
    """Run the quote API server.

    Configuration via environment variables:
    - SLISWAP_HOST: Host to bind to (default: 0.0.0.0)
    - SLISWAP_PORT: Port to bind to (default: 8000)
    - SLISWAP_DEBUG: Enable debug logging and reload mode (default: false)
    - SLISWAP_NODE_URL: Node REST API base for the chain reader
    """
    configure_logging()
    uvicorn.run(
        "sliswap.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()

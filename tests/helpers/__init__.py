"""Test helpers module for shared test utilities.

- constants: pool/asset addresses and reserve fixtures
- factories: reader and service factory functions
"""

from tests.helpers.constants import (
    DEFAULT_RESERVES,
    EDS,
    EDS_USDT,
    EDS_USDT_RESERVES,
    UNKNOWN_POOL,
    USDT,
    USDT_VDEP,
    USDT_VDEP_RESERVES,
    VDEP,
)
from tests.helpers.factories import make_reader, make_service

__all__ = [
    # Constants
    "EDS_USDT",
    "USDT_VDEP",
    "EDS",
    "USDT",
    "VDEP",
    "UNKNOWN_POOL",
    "EDS_USDT_RESERVES",
    "USDT_VDEP_RESERVES",
    "DEFAULT_RESERVES",
    # Factories
    "make_reader",
    "make_service",
]

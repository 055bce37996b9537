"""Test helpers module for shared test utilities.

This module consolidates common test utilities to reduce duplication:
- constants: Coin types, package and account addresses
- factories: Pool, coin and accumulator factory functions
- fakes: In-memory ChainAdapter
"""

from tests.helpers.constants import (
    ACCOUNT,
    APT,
    BTC,
    PACKAGE,
    POOL_ADDRESS,
    SUI_NAMED_APT,
    USDT,
    lsp_name,
    pool_descriptor,
)
from tests.helpers.factories import make_coin, make_pool, make_sma

__all__ = [
    # Constants
    "PACKAGE",
    "POOL_ADDRESS",
    "ACCOUNT",
    "APT",
    "USDT",
    "BTC",
    "SUI_NAMED_APT",
    "pool_descriptor",
    "lsp_name",
    # Factories
    "make_pool",
    "make_coin",
    "make_sma",
]

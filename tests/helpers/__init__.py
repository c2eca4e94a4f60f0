"""Test helpers module for shared test utilities.

This module consolidates common test utilities to reduce duplication:
- constants: Coin types, coin metadata and the pool module address
- factories: Pool and position factory functions
"""

from tests.helpers.constants import (
    APT,
    APT_INFO,
    LSP_PREFIX,
    NETWORK,
    POOL_MODULE,
    USDC,
    USDC_INFO,
    USDT,
    USDT_INFO,
    WETH,
    WETH_INFO,
)
from tests.helpers.factories import make_lsp_coin, make_pool, make_position, make_stable_pool

__all__ = [
    # Constants
    "NETWORK",
    "APT",
    "USDC",
    "USDT",
    "WETH",
    "APT_INFO",
    "USDC_INFO",
    "USDT_INFO",
    "WETH_INFO",
    "POOL_MODULE",
    "LSP_PREFIX",
    # Factories
    "make_pool",
    "make_stable_pool",
    "make_position",
    "make_lsp_coin",
]

"""Pytest configuration and fixtures."""

import pytest

from swapmath.config import AccountingConfig
from swapmath.pools.types import FeeDirection, Pool, Position
from tests.helpers.constants import APT
from tests.helpers.factories import make_pool, make_position, make_stable_pool


@pytest.fixture
def cp_pool() -> Pool:
    """Fee-less constant-product APT/USDC pool, 1:2 reserves."""
    return make_pool(reserve_x=1_000_000, reserve_y=2_000_000)


@pytest.fixture
def fee_pool() -> Pool:
    """Balanced constant-product pool with a 30 bps LP fee, admin fee on X."""
    return make_pool(
        reserve_x=1_000_000,
        reserve_y=1_000_000,
        lp_fee_bps=30,
        fee_direction=FeeDirection.X,
    )


@pytest.fixture
def stable_pool() -> Pool:
    """Balanced USDC/USDT stable pool, A=100."""
    return make_stable_pool(reserve_x=1_000_000_000, reserve_y=1_000_000_000, amplification=100)


@pytest.fixture
def empty_pool() -> Pool:
    """Uninitialized pool with no reserves and no supply."""
    return make_pool(reserve_x=0, reserve_y=0, lsp_supply=0)


@pytest.fixture
def position(cp_pool: Pool) -> Position:
    """1000 shares of the constant-product pool (supply 1_000_000)."""
    return make_position(pool=cp_pool, lsp_balance=1000)


@pytest.fixture
def apt_config() -> AccountingConfig:
    """Accounting config with APT as the primary coin."""
    return AccountingConfig(primary_coin=APT)

"""Tests for pool snapshot types."""

from dataclasses import FrozenInstanceError

import pytest

from swapmath.errors import (
    InvalidAmplificationError,
    InvalidFeeError,
    InvalidScaleError,
    NegativeReserveError,
)
from swapmath.math.decimal_value import DecimalValue
from swapmath.pools.types import (
    ConstantProductCurve,
    PoolAvailability,
    Position,
    StableSwapCurve,
    TokenInfo,
)
from tests.helpers import APT, USDC, make_lsp_coin, make_pool, make_position


class TestCurves:
    """Tests for curve variants."""

    def test_stable_defaults(self) -> None:
        curve = StableSwapCurve(amplification=100)
        assert curve.scale_x == 1
        assert curve.scale_y == 1

    def test_stable_zero_amp_raises(self) -> None:
        with pytest.raises(InvalidAmplificationError):
            StableSwapCurve(amplification=0)

    @pytest.mark.parametrize("scale_x,scale_y", [(0, 1), (1, 0)])
    def test_stable_zero_scale_raises(self, scale_x: int, scale_y: int) -> None:
        with pytest.raises(InvalidScaleError):
            StableSwapCurve(amplification=10, scale_x=scale_x, scale_y=scale_y)

    def test_constant_product_equality(self) -> None:
        assert ConstantProductCurve() == ConstantProductCurve()


class TestPool:
    """Tests for Pool validation and derived properties."""

    def test_fee_totals(self) -> None:
        pool = make_pool(admin_fee_bps=10, connect_fee_bps=5, lp_fee_bps=20, incentive_fee_bps=3)
        assert pool.total_admin_fee_bps == 15
        assert pool.total_lp_fee_bps == 23

    def test_is_initialized(self) -> None:
        assert make_pool(reserve_x=1, reserve_y=1).is_initialized
        assert not make_pool(reserve_x=0, reserve_y=1).is_initialized
        assert not make_pool(reserve_x=1, reserve_y=0).is_initialized

    def test_negative_reserve_raises(self) -> None:
        with pytest.raises(NegativeReserveError) as exc_info:
            make_pool(reserve_x=-1)
        assert "reserve_x" in str(exc_info.value)

    def test_negative_supply_raises(self) -> None:
        with pytest.raises(NegativeReserveError):
            make_pool(lsp_supply=-5)

    @pytest.mark.parametrize("field", ["admin_fee_bps", "lp_fee_bps", "withdraw_fee_bps"])
    def test_fee_out_of_range_raises(self, field: str) -> None:
        with pytest.raises(InvalidFeeError):
            make_pool(**{field: 10_001})

    def test_full_fee_allowed(self) -> None:
        assert make_pool(lp_fee_bps=10_000).lp_fee_bps == 10_000

    def test_is_immutable(self) -> None:
        pool = make_pool()
        with pytest.raises(FrozenInstanceError):
            pool.reserve_x = 5  # type: ignore[misc]

    def test_uuid(self) -> None:
        pool = make_pool(address="0xabc")
        assert pool.uuid.startswith("Pool[PoolType[")
        assert pool.uuid.endswith("-0xabc]")
        assert APT.uuid in pool.uuid
        assert USDC.uuid in pool.uuid


class TestPoolAvailability:
    """Tests for availability reasons."""

    def test_reasons(self) -> None:
        assert PoolAvailability.AVAILABLE.reason is None
        assert PoolAvailability.FROZEN.reason == "Pool is frozen"
        assert PoolAvailability.EMPTY_RESERVES.reason == "Pool is empty, deposit first"


class TestPosition:
    """Tests for Position."""

    def test_with_partial_ratio_returns_new_position(self) -> None:
        position = make_position(lsp_balance=1000)
        ratio = DecimalValue(25, 2)
        partial = position.with_partial_ratio(ratio)

        assert partial.ratio == ratio
        assert partial.lsp_balance == 1000
        assert position.ratio is None

    def test_negative_balance_raises(self) -> None:
        with pytest.raises(NegativeReserveError):
            make_position(lsp_balance=-1)

    def test_uuid_identifies_lsp_coin_owner(self) -> None:
        """Equal balances in the same pool held by different accounts are distinct."""
        pool = make_pool()
        alice = make_position(pool=pool, lsp_balance=500, owner="0xa11ce")
        bob = make_position(pool=pool, lsp_balance=500, owner="0xb0b")

        assert alice.uuid != bob.uuid
        assert alice.uuid == f"Position[{pool.uuid}-{alice.lsp_coin.uuid}]"
        assert alice.lsp_coin.uuid.endswith("-0xa11ce]")

    def test_uuid_independent_of_balance(self) -> None:
        pool = make_pool()
        before = make_position(pool=pool, lsp_balance=500)
        after = make_position(pool=pool, lsp_balance=800)
        assert before.uuid == after.uuid

    def test_lsp_balance_reads_coin(self) -> None:
        position = Position(pool=make_pool(), lsp_coin=make_lsp_coin(make_pool(), 42))
        assert position.lsp_balance == 42


class TestTokenInfo:
    """Tests for TokenInfo."""

    def test_stable_flag(self) -> None:
        assert TokenInfo(coin_type=USDC, decimals=6, stable_coin="usdc").is_stable_coin
        assert not TokenInfo(coin_type=APT, decimals=8).is_stable_coin

"""Swap quoting.

Quotes follow the pool contract's fee order exactly:
1. Admin fee on the input amount, if the fee direction is the input leg
2. LP fee on the input amount, always
3. Curve math on the remaining input
4. Admin fee on the output amount, if the fee direction is the output leg

Quoting never refuses a frozen or empty pool; it returns a degenerate
result (usually 0). Callers gate on is_available_for_swap() first.
"""

from __future__ import annotations

from decimal import ROUND_FLOOR, Decimal
from functools import singledispatch

import structlog

from swapmath.constants import BPS_SCALING, SLIPPAGE_PRECISION
from swapmath.errors import InvalidSlippageError
from swapmath.math.stable_swap import compute_counterparty_reserve_with_scales, div_trunc
from swapmath.pools.types import (
    CoinType,
    ConstantProductCurve,
    Curve,
    FeeDirection,
    Pool,
    PoolAvailability,
    StableSwapCurve,
    SwapDirection,
)
from swapmath.safe_int import S

logger = structlog.get_logger()


def is_available_for_swap(pool: Pool) -> PoolAvailability:
    """Classify whether the pool can currently be swapped against."""
    if pool.frozen:
        return PoolAvailability.FROZEN
    if pool.reserve_x == 0 or pool.reserve_y == 0:
        return PoolAvailability.EMPTY_RESERVES
    return PoolAvailability.AVAILABLE


def deduct_fee(amount: int, fee_bps: int) -> int:
    """Subtract a basis-point fee: amount - amount * fee_bps / 10000.

    The fee part is truncated toward zero, so the fee is rounded down and
    the remaining amount rounded up, as on-chain.
    """
    return amount - div_trunc(amount * fee_bps, BPS_SCALING)


@singledispatch
def _curve_amount_out(
    curve: Curve,
    amount_in: int,
    reserve_in: int,
    reserve_out: int,
    direction: SwapDirection,
) -> int:
    """Base dispatch - raises for unknown curve types."""
    raise TypeError(f"Unknown curve type: {type(curve).__name__}")


@_curve_amount_out.register(ConstantProductCurve)
def _constant_product_amount_out(
    curve: ConstantProductCurve,
    amount_in: int,
    reserve_in: int,
    reserve_out: int,
    direction: SwapDirection,
) -> int:
    """amount_out = reserve_out * amount_in / (reserve_in + amount_in)"""
    denominator = S(reserve_in) + amount_in
    if denominator == 0:
        return 0
    return (S(reserve_out) * amount_in // denominator).value


@_curve_amount_out.register(StableSwapCurve)
def _stable_amount_out(
    curve: StableSwapCurve,
    amount_in: int,
    reserve_in: int,
    reserve_out: int,
    direction: SwapDirection,
) -> int:
    if direction is SwapDirection.FORWARD:
        scale_in, scale_out = curve.scale_x, curve.scale_y
    else:
        scale_in, scale_out = curve.scale_y, curve.scale_x

    amount_out = compute_counterparty_reserve_with_scales(
        amount_in, reserve_in, reserve_out, curve.amplification, scale_in, scale_out
    )
    if amount_out < 0:
        logger.debug(
            "stable_quote_negative",
            amount_in=amount_in,
            reserve_in=reserve_in,
            reserve_out=reserve_out,
            raw_amount_out=amount_out,
        )
        return 0
    return amount_out


def quote_swap(pool: Pool, amount_in: int, direction: SwapDirection) -> int:
    """Quote the output amount for an exact-input swap.

    Args:
        pool: Pool snapshot
        amount_in: Raw input amount
        direction: FORWARD swaps X for Y, REVERSE swaps Y for X

    Returns:
        Output amount after all fees, 0 for non-positive input
    """
    if direction is SwapDirection.FORWARD:
        reserve_in, reserve_out = pool.reserve_x, pool.reserve_y
        input_leg = FeeDirection.X
    else:
        reserve_in, reserve_out = pool.reserve_y, pool.reserve_x
        input_leg = FeeDirection.Y

    if amount_in <= 0:
        return 0

    admin_on_input = pool.fee_direction is input_leg
    if admin_on_input:
        amount_in = deduct_fee(amount_in, pool.total_admin_fee_bps)
    amount_in = deduct_fee(amount_in, pool.total_lp_fee_bps)
    if amount_in < 0:
        return 0

    amount_out = _curve_amount_out(pool.curve, amount_in, reserve_in, reserve_out, direction)

    if not admin_on_input:
        amount_out = deduct_fee(amount_out, pool.total_admin_fee_bps)
    return amount_out


def quote_forward_swap(pool: Pool, amount_in: int) -> int:
    """Quote an X -> Y swap."""
    return quote_swap(pool, amount_in, SwapDirection.FORWARD)


def quote_reverse_swap(pool: Pool, amount_in: int) -> int:
    """Quote a Y -> X swap."""
    return quote_swap(pool, amount_in, SwapDirection.REVERSE)


def slippage_multiplier(slippage: float | Decimal) -> int:
    """floor((1 - slippage) * 1e9), computed on the decimal form of slippage.

    Raises:
        InvalidSlippageError: If slippage is outside [0, 1]
    """
    slippage_dec = Decimal(str(slippage))
    if not Decimal(0) <= slippage_dec <= Decimal(1):
        raise InvalidSlippageError(f"Slippage must be in range [0, 1], got {slippage}")
    scaled = (Decimal(1) - slippage_dec) * SLIPPAGE_PRECISION
    return int(scaled.to_integral_value(rounding=ROUND_FLOOR))


def quote_min_output_with_slippage(
    pool: Pool,
    amount_in: int,
    slippage: float | Decimal,
    direction: SwapDirection = SwapDirection.FORWARD,
) -> int:
    """Minimum acceptable output for a swap given a slippage tolerance.

    Args:
        pool: Pool snapshot
        amount_in: Raw input amount
        slippage: Tolerated fraction, e.g. 0.005 for 0.5%
        direction: Swap direction (default X -> Y)

    Returns:
        quote * floor((1 - slippage) * 1e9) / 1e9, rounded down
    """
    multiplier = slippage_multiplier(slippage)
    quote = quote_swap(pool, amount_in, direction)
    return (S(quote) * multiplier // SLIPPAGE_PRECISION).value


def swap_direction(pool: Pool, coin_in: CoinType, coin_out: CoinType) -> SwapDirection | None:
    """Direction of a coin_in -> coin_out swap through this pool, or None."""
    if coin_in == pool.pool_type.x and coin_out == pool.pool_type.y:
        return SwapDirection.FORWARD
    if coin_in == pool.pool_type.y and coin_out == pool.pool_type.x:
        return SwapDirection.REVERSE
    return None


def can_swap_coins(pool: Pool, coin_in: CoinType, coin_out: CoinType) -> bool:
    """True if the pool trades this pair and is currently available."""
    if swap_direction(pool, coin_in, coin_out) is None:
        return False
    return is_available_for_swap(pool) is PoolAvailability.AVAILABLE

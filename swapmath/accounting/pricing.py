"""Pool mid price and fee-adjusted buy/sell prices.

Prices are quoted as units of Y per unit of X in display units (amounts
divided by 10^decimals). They are floats for display and valuation only;
settlement never uses them.
"""

from __future__ import annotations

from fractions import Fraction
from functools import singledispatch

from swapmath.constants import BPS_SCALING
from swapmath.math.stable_swap import compute_invariant
from swapmath.pools.types import ConstantProductCurve, Curve, Pool, StableSwapCurve


def stable_price_rational(pool: Pool, amp: int, decimals_x: int, decimals_y: int) -> tuple[int, int]:
    """Exact stable-swap price as a (numerator, denominator) pair.

    The price is the negated slope -dY/dX of the invariant at the current
    reserves. Both reserves are first normalized to the larger of the two
    decimal precisions; the caller-supplied decimals are used rather than
    the pool's stored scales.

        pn = y1 * (D + 4A(2*x1 + y1 - D))
        pd = x1 * (D + 4A(2*y1 + x1 - D))
    """
    max_decimals = max(decimals_x, decimals_y)
    x1 = pool.reserve_x * 10 ** (max_decimals - decimals_x)
    y1 = pool.reserve_y * 10 ** (max_decimals - decimals_y)
    d = compute_invariant(y1, x1, amp)

    amp4 = 4 * amp
    numerator = y1 * (d + amp4 * (2 * x1 + y1 - d))
    denominator = x1 * (d + amp4 * (2 * y1 + x1 - d))
    return numerator, denominator


@singledispatch
def _curve_price(curve: Curve, pool: Pool, decimals_x: int, decimals_y: int) -> float:
    """Base dispatch - raises for unknown curve types."""
    raise TypeError(f"Unknown curve type: {type(curve).__name__}")


@_curve_price.register(ConstantProductCurve)
def _constant_product_price(
    curve: ConstantProductCurve, pool: Pool, decimals_x: int, decimals_y: int
) -> float:
    # X * Y = K  =>  X dY + Y dX = 0  =>  -dY/dX = Y / X
    if pool.reserve_x == 0:
        return 0.0
    price_abs = pool.reserve_y / pool.reserve_x
    return price_abs * (10**decimals_x) / (10**decimals_y)


@_curve_price.register(StableSwapCurve)
def _stable_price(curve: StableSwapCurve, pool: Pool, decimals_x: int, decimals_y: int) -> float:
    numerator, denominator = stable_price_rational(
        pool, curve.amplification, decimals_x, decimals_y
    )
    if denominator == 0:
        return 0.0
    return float(Fraction(numerator, denominator))


def price(pool: Pool, decimals_x: int, decimals_y: int) -> float:
    """Mid price of X in units of Y. 0.0 for an empty X reserve."""
    return _curve_price(pool.curve, pool, decimals_x, decimals_y)


def _net_fee_factor(pool: Pool) -> float:
    """(1 - admin fee) * (1 - LP fee) as fractions."""
    net_admin = 1.0 - pool.total_admin_fee_bps / BPS_SCALING
    net_lp = 1.0 - pool.total_lp_fee_bps / BPS_SCALING
    return net_admin * net_lp


def buy_price(pool: Pool, decimals_x: int, decimals_y: int) -> float:
    """Price paid in Y per X when buying X, fees included.

    Infinite when the fees consume the whole input.
    """
    factor = _net_fee_factor(pool)
    if factor == 0.0:
        return float("inf")
    return price(pool, decimals_x, decimals_y) / factor


def sell_price(pool: Pool, decimals_x: int, decimals_y: int) -> float:
    """Price received in Y per X when selling X, fees included."""
    return price(pool, decimals_x, decimals_y) * _net_fee_factor(pool)

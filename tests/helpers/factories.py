"""Factory functions for creating test objects.

Usage:
    from tests.helpers import make_pool
    # or
    from tests.helpers.factories import make_pool, make_stable_pool

    pool = make_pool(reserve_x=1_000_000, reserve_y=2_000_000)
"""

from swapmath.math.decimal_value import DecimalValue
from swapmath.pools.types import (
    CoinBalance,
    CoinType,
    ConstantProductCurve,
    Curve,
    FeeDirection,
    Pool,
    PoolType,
    Position,
    StableSwapCurve,
)
from tests.helpers.constants import APT, LSP_PREFIX, USDC, USDT

DEFAULT_OWNER = "0xuser"

DEFAULT_ADDRESS = "0xbeef"


def make_pool(
    reserve_x: int = 1_000_000,
    reserve_y: int = 1_000_000,
    lsp_supply: int | None = None,
    x: CoinType = APT,
    y: CoinType = USDC,
    fee_direction: FeeDirection = FeeDirection.X,
    admin_fee_bps: int = 0,
    lp_fee_bps: int = 0,
    curve: Curve | None = None,
    address: str = DEFAULT_ADDRESS,
    **kwargs,
) -> Pool:
    """Create a test pool with sensible defaults (constant product unless curve is given).

    Args:
        reserve_x: X reserve (default: 1_000_000)
        reserve_y: Y reserve (default: 1_000_000)
        lsp_supply: Share supply (default: reserve_x, or 0 for an empty pool)
        x: X coin type (default: APT)
        y: Y coin type (default: USDC)
        fee_direction: Admin fee leg (default: X)
        admin_fee_bps: Admin fee in bps (default: 0)
        lp_fee_bps: LP fee in bps (default: 0)
        curve: Pricing curve (default: constant product)
        address: Pool address
        **kwargs: Any other Pool field (frozen, trade counters, ...)

    Returns:
        Pool instance ready for testing
    """
    if lsp_supply is None:
        lsp_supply = reserve_x if reserve_x > 0 and reserve_y > 0 else 0

    return Pool(
        pool_type=PoolType(x=x, y=y),
        address=address,
        curve=curve if curve is not None else ConstantProductCurve(),
        reserve_x=reserve_x,
        reserve_y=reserve_y,
        lsp_supply=lsp_supply,
        fee_direction=fee_direction,
        admin_fee_bps=admin_fee_bps,
        lp_fee_bps=lp_fee_bps,
        **kwargs,
    )


def make_stable_pool(
    reserve_x: int = 1_000_000,
    reserve_y: int = 1_000_000,
    amplification: int = 100,
    scale_x: int = 1,
    scale_y: int = 1,
    x: CoinType = USDC,
    y: CoinType = USDT,
    **kwargs,
) -> Pool:
    """Create a stable-swap pool (default: balanced USDC/USDT, A=100)."""
    return make_pool(
        reserve_x=reserve_x,
        reserve_y=reserve_y,
        x=x,
        y=y,
        curve=StableSwapCurve(amplification=amplification, scale_x=scale_x, scale_y=scale_y),
        **kwargs,
    )


def make_lsp_coin(pool: Pool, balance: int, owner: str = DEFAULT_OWNER) -> CoinBalance:
    """Liquidity-share coin balance for the pool's (X, Y) pair."""
    x, y = pool.pool_type.x, pool.pool_type.y
    return CoinBalance(
        coin_type=CoinType(network=x.network, name=f"{LSP_PREFIX}<{x.name}, {y.name}>"),
        address=owner,
        balance=balance,
    )


def make_position(
    pool: Pool | None = None,
    lsp_balance: int = 1000,
    ratio: str | None = None,
    owner: str = DEFAULT_OWNER,
) -> Position:
    """Create a position, optionally narrowed by a decimal ratio string like "0.25"."""
    if pool is None:
        pool = make_pool()
    position = Position(pool=pool, lsp_coin=make_lsp_coin(pool, lsp_balance, owner))
    if ratio is not None:
        parsed = DecimalValue.parse(ratio)
        assert parsed is not None, f"invalid ratio {ratio!r}"
        position = position.with_partial_ratio(parsed)
    return position

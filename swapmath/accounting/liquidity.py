"""Deposit sizing and liquidity-share accounting."""

from __future__ import annotations

from swapmath.accounting.swap import deduct_fee
from swapmath.pools.types import Pool, Position
from swapmath.safe_int import S


def deposit_x_for_y(pool: Pool, amount_y: int) -> int:
    """X amount matching amount_y at the current reserve ratio."""
    if pool.reserve_y == 0:
        return 0
    return (S(pool.reserve_x) * amount_y // pool.reserve_y).value


def deposit_y_for_x(pool: Pool, amount_x: int) -> int:
    """Y amount matching amount_x at the current reserve ratio."""
    if pool.reserve_x == 0:
        return 0
    return (S(amount_x) * pool.reserve_y // pool.reserve_x).value


def quote_deposit(pool: Pool, max_x: int, max_y: int) -> tuple[int, int]:
    """Largest proportional deposit within the given maxima.

    The side whose counterpart would exceed its maximum is the binding
    constraint: it is deposited in full and the other side follows the
    reserve ratio (truncated).

    Returns:
        (deposit_x, deposit_y), or (0, 0) for an uninitialized pool or a
        non-positive maximum
    """
    if not pool.is_initialized or max_x <= 0 or max_y <= 0:
        return 0, 0

    if deposit_x_for_y(pool, max_y) > max_x:
        x = max_x
        y = S(deposit_y_for_x(pool, max_x)).min(max_y).value
    else:
        y = max_y
        x = S(deposit_x_for_y(pool, max_y)).min(max_x).value
    return x, y


def position_balance(position: Position) -> int:
    """Share amount selected by the position.

    Without a ratio this is the full LSP balance. With a ratio it is
    floor(balance * ratio), clamped into [0, balance].
    """
    if position.ratio is None:
        return position.lsp_balance

    ratio = position.ratio
    partial = position.lsp_balance * ratio.mantissa // 10**ratio.scale
    return S(partial).clamp(0, position.lsp_balance).value


def share_of_pool(position: Position) -> float:
    """Fraction of the LSP supply held by the position, for display."""
    supply = position.pool.lsp_supply
    if supply == 0:
        return 0.0
    return position_balance(position) / supply


def share_coin_amounts(position: Position) -> tuple[int, int]:
    """Proportional claim on (reserve_x, reserve_y), truncated."""
    pool = position.pool
    if pool.lsp_supply == 0:
        return 0, 0
    balance = S(position_balance(position))
    return (
        (balance * pool.reserve_x // pool.lsp_supply).value,
        (balance * pool.reserve_y // pool.lsp_supply).value,
    )


def quote_withdraw(position: Position) -> tuple[int, int]:
    """Coin amounts returned for burning the position's shares.

    The pool's withdraw fee is deducted from each side with the same
    rounding as swap fees.
    """
    amount_x, amount_y = share_coin_amounts(position)
    fee_bps = position.pool.withdraw_fee_bps
    return deduct_fee(amount_x, fee_bps), deduct_fee(amount_y, fee_bps)

"""Stable-swap curve math.

Two-token StableSwap invariant solved with Newton iteration in exact
integer arithmetic:

    4A(x + y) + D = 4AD + D^3 / (4xy)

Every division below is performed in the same order as the pool contract's
own integer sequence. Rewriting these expressions into an algebraically
equivalent form changes the intermediate rounding and breaks parity with
settlement.

IMPORTANT: Hitting the iteration cap is NOT an error here. The contract
stops at the same cap and settles with whatever value it reached, so the
client must return that value too.
"""

from __future__ import annotations

import structlog

from swapmath.constants import STABLE_CONVERGENCE_TOLERANCE, STABLE_MAX_ITERATIONS
from swapmath.errors import InvalidAmplificationError, InvalidScaleError, NegativeReserveError
from swapmath.safe_int import S, SafeInt

logger = structlog.get_logger()


def div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero (matching on-chain semantics).

    Python's // operator rounds toward negative infinity. The solver result
    can legitimately be negative for degenerate pools and must be scaled
    down the way the settlement layer would.

    Raises:
        ZeroDivisionError: If b is zero

    Examples:
        Python: -7 // 3 = -3 (rounds toward -inf)
        div_trunc(-7, 3) = -2 (truncates toward zero)
    """
    if b == 0:
        raise ZeroDivisionError("Division by zero in div_trunc")
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def _check_amp(amp: int) -> None:
    if amp < 1:
        raise InvalidAmplificationError(f"Amplification coefficient must be >= 1, got {amp}")


def _check_balances(**balances: int) -> None:
    for name, value in balances.items():
        if value < 0:
            raise NegativeReserveError(f"{name} must be non-negative, got {value}")


def _converged(current: SafeInt, previous: SafeInt) -> bool:
    return abs(current.value - previous.value) <= STABLE_CONVERGENCE_TOLERANCE


def _next_invariant(d: SafeInt, d_prod: SafeInt, sum_balances: SafeInt, amp: int) -> SafeInt:
    """One Newton step for D."""
    leverage = sum_balances * 2 * amp
    numerator = d * (d_prod * 2 + leverage)
    denominator = d * (2 * amp - 1) + d_prod * 3
    return numerator // denominator


def compute_invariant(balance_a: int, balance_b: int, amp: int) -> int:
    """Calculate the stable-swap invariant D for two balances.

    Algorithm:
        1. Initial guess: D = balance_a + balance_b
        2. d_prod = D^3 / (4ab), as two sequential floor divisions
        3. D = D(2 d_prod + 2A(a+b)) / (D(2A-1) + 3 d_prod)
        4. Stop once |D_next - D| <= 1, at most 256 iterations

    Args:
        balance_a: First balance, already scaled to a common precision
        balance_b: Second balance, already scaled to a common precision
        amp: Amplification coefficient A (unscaled, >= 1)

    Returns:
        The invariant D. 0 when either balance is zero: an empty pool has
        invariant 0 and a one-sided pool has no finite invariant.

    Raises:
        InvalidAmplificationError: If amp < 1
        NegativeReserveError: If a balance is negative
    """
    _check_amp(amp)
    _check_balances(balance_a=balance_a, balance_b=balance_b)

    if balance_a + balance_b == 0:
        return 0
    if balance_a == 0 or balance_b == 0:
        logger.debug(
            "stable_invariant_one_sided",
            balance_a=balance_a,
            balance_b=balance_b,
        )
        return 0

    a, b = S(balance_a), S(balance_b)
    sum_balances = a + b
    d = sum_balances

    for _ in range(STABLE_MAX_ITERATIONS):
        d_prod = d
        d_prod = d_prod * d // (a * 2)
        d_prod = d_prod * d // (b * 2)
        d_prev = d
        d = _next_invariant(d, d_prod, sum_balances, amp)
        if _converged(d, d_prev):
            return d.value

    logger.debug(
        "stable_invariant_iteration_cap",
        balance_a=balance_a,
        balance_b=balance_b,
        amp=amp,
        invariant=d.value,
    )
    return d.value


def compute_counterparty_reserve(delta_in: int, reserve_in: int, reserve_out: int, amp: int) -> int:
    """Solve the output side of a trade against the pre-trade invariant.

    If delta_in is added to reserve_in, the output reserve must fall to the
    y that keeps D (computed from the pre-trade reserves) unchanged. The
    returned amount is what the pool releases, one unit less than the
    exact difference so rounding never favours the trader.

    Algorithm:
        1. D = compute_invariant(reserve_in, reserve_out, A)
        2. c = D^2 / (2(x+dx)); c = c * D / (4A)
        3. b = D / (2A) + (x+dx)
        4. y = D; iterate y = (y^2 + c) / (2y + b - D) until |dy| <= 1
        5. Return reserve_out - y - 1

    Args:
        delta_in: Amount added to the input reserve
        reserve_in: Input reserve before the trade
        reserve_out: Output reserve before the trade
        amp: Amplification coefficient A (>= 1)

    Returns:
        reserve_out - y - 1. Can be negative for degenerate inputs; callers
        must treat a negative result as zero output. 0 if D is zero.

    Raises:
        InvalidAmplificationError: If amp < 1
        NegativeReserveError: If any input is negative
    """
    _check_amp(amp)
    _check_balances(delta_in=delta_in, reserve_in=reserve_in, reserve_out=reserve_out)

    invariant = compute_invariant(reserve_in, reserve_out, amp)
    if invariant == 0:
        return 0

    d = S(invariant)
    new_reserve_in = S(reserve_in) + delta_in

    c = d * d // (new_reserve_in * 2)
    c = c * d // (S(amp) * 4)
    b = d // (S(amp) * 2) + new_reserve_in

    y = d
    converged = False
    for _ in range(STABLE_MAX_ITERATIONS):
        y_prev = y
        numerator = y * y + c
        denominator = y * 2 + b - d
        y = numerator // denominator
        if _converged(y, y_prev):
            converged = True
            break

    if not converged:
        logger.debug(
            "stable_reserve_iteration_cap",
            delta_in=delta_in,
            reserve_in=reserve_in,
            reserve_out=reserve_out,
            amp=amp,
            reserve=y.value,
        )

    return reserve_out - y.value - 1


def compute_counterparty_reserve_with_scales(
    delta_in: int,
    reserve_in: int,
    reserve_out: int,
    amp: int,
    scale_in: int,
    scale_out: int,
) -> int:
    """Solve a trade on amounts normalized by explicit multipliers.

    The input side (delta and reserve) is multiplied by scale_in and the
    output reserve by scale_out before solving. The result is divided back
    down by scale_out, truncating toward zero.

    Raises:
        InvalidScaleError: If either scale is < 1
    """
    if scale_in < 1 or scale_out < 1:
        raise InvalidScaleError(f"Scales must be >= 1, got in={scale_in} out={scale_out}")
    amount_out = compute_counterparty_reserve(
        delta_in * scale_in,
        reserve_in * scale_in,
        reserve_out * scale_out,
        amp,
    )
    return div_trunc(amount_out, scale_out)


def _decimal_scales(decimals_a: int, decimals_b: int) -> tuple[int, int]:
    """Multipliers that lift both sides to the larger decimal precision."""
    if decimals_a < 0 or decimals_b < 0:
        raise InvalidScaleError(f"Decimals must be >= 0, got {decimals_a} and {decimals_b}")
    max_decimals = max(decimals_a, decimals_b)
    return 10 ** (max_decimals - decimals_a), 10 ** (max_decimals - decimals_b)


def compute_invariant_scaled(
    balance_a: int,
    balance_b: int,
    amp: int,
    decimals_a: int,
    decimals_b: int,
) -> int:
    """Calculate D for raw token amounts with different decimal precisions.

    Returns:
        The invariant expressed at max(decimals_a, decimals_b) precision
    """
    scale_a, scale_b = _decimal_scales(decimals_a, decimals_b)
    return compute_invariant(balance_a * scale_a, balance_b * scale_b, amp)


def compute_counterparty_reserve_scaled(
    delta_in: int,
    reserve_in: int,
    reserve_out: int,
    amp: int,
    decimals_in: int,
    decimals_out: int,
) -> int:
    """Solve a trade for raw token amounts with different decimal precisions.

    Returns:
        Output amount in the output token's own precision (see
        compute_counterparty_reserve for the sign convention)
    """
    scale_in, scale_out = _decimal_scales(decimals_in, decimals_out)
    return compute_counterparty_reserve_with_scales(
        delta_in, reserve_in, reserve_out, amp, scale_in, scale_out
    )

"""Derived pool metrics: APR, TVL and trade volume.

These helpers are for display and ranking. They work in floats and return
None when a value cannot be established, never raising on market state.
"""

from __future__ import annotations

import structlog

from swapmath.accounting.pricing import price
from swapmath.config import DEFAULT_CONFIG, AccountingConfig
from swapmath.constants import BPS_SCALING
from swapmath.pools.types import CoinType, Pool, TokenInfo

logger = structlog.get_logger()


def estimated_apr(pool: Pool, config: AccountingConfig = DEFAULT_CONFIG) -> float | None:
    """Annualized LP fee yield from the most recent volume capture window.

    Each side's fee income over the window is extrapolated to a day, divided
    by that side's reserve and annualized; the two sides are averaged.

    Returns:
        APR as a fraction (0.12 = 12%), or None when a reserve is empty or
        no time has passed since the last capture
    """
    start_time = pool.trade_24h_last_capture_time
    end_time = pool.last_trade_time
    if pool.reserve_x <= 0 or pool.reserve_y <= 0 or end_time <= start_time:
        return None

    elapsed = end_time - start_time
    fee = pool.total_lp_fee_bps / BPS_SCALING

    def side_apr(traded: int, reserve: int) -> float:
        daily_fee = traded / elapsed * config.seconds_per_day * (fee * config.lp_fee_attribution)
        return (daily_fee / reserve) * config.days_per_year

    apr_x = side_apr(pool.total_trade_x_24h, pool.reserve_x)
    apr_y = side_apr(pool.total_trade_y_24h, pool.reserve_y)
    return (apr_x + apr_y) * 0.5


def _unit_price(
    coin: CoinType,
    info: TokenInfo,
    primary_coin_price: float | None,
    config: AccountingConfig,
) -> float | None:
    """Price of one display unit of the coin, if directly known."""
    if coin == config.primary_coin and primary_coin_price is not None:
        return primary_coin_price
    if info.is_stable_coin:
        return 1.0
    return None


def _volume_to_value(
    pool: Pool,
    amount_x: int,
    amount_y: int,
    x_info: TokenInfo,
    y_info: TokenInfo,
    primary_coin_price: float | None,
    config: AccountingConfig,
) -> float | None:
    """Value raw X and Y amounts in the external unit of account.

    A side without a direct price is priced through the pool's own mid
    price from the other side. primary_coin_price only applies when
    config.primary_coin names the coin it prices.
    """
    if primary_coin_price is not None and config.primary_coin is None:
        logger.warning(
            "primary_coin_price_without_primary_coin",
            pool=pool.uuid,
            primary_coin_price=primary_coin_price,
        )

    pool_price = price(pool, x_info.decimals, y_info.decimals)
    if pool_price == 0.0:
        logger.debug("valuation_zero_pool_price", pool=pool.uuid)
        return None

    tx = amount_x / 10**x_info.decimals
    ty = amount_y / 10**y_info.decimals

    px = _unit_price(pool.pool_type.x, x_info, primary_coin_price, config)
    py = _unit_price(pool.pool_type.y, y_info, primary_coin_price, config)

    if px is not None and py is None:
        py = px / pool_price
    elif px is None and py is not None:
        px = py * pool_price

    if px is None or py is None:
        logger.debug("valuation_price_unavailable", pool=pool.uuid)
        return None
    return px * tx + py * ty


def tvl(
    pool: Pool,
    x_info: TokenInfo,
    y_info: TokenInfo,
    primary_coin_price: float | None = None,
    config: AccountingConfig = DEFAULT_CONFIG,
) -> float | None:
    """Total value locked in the pool's reserves."""
    return _volume_to_value(
        pool, pool.reserve_x, pool.reserve_y, x_info, y_info, primary_coin_price, config
    )


def volume_24h(
    pool: Pool,
    x_info: TokenInfo,
    y_info: TokenInfo,
    primary_coin_price: float | None = None,
    config: AccountingConfig = DEFAULT_CONFIG,
) -> float | None:
    """Value traded since the last 24h capture."""
    return _volume_to_value(
        pool,
        pool.total_trade_x_24h,
        pool.total_trade_y_24h,
        x_info,
        y_info,
        primary_coin_price,
        config,
    )


def total_volume(
    pool: Pool,
    x_info: TokenInfo,
    y_info: TokenInfo,
    primary_coin_price: float | None = None,
    config: AccountingConfig = DEFAULT_CONFIG,
) -> float | None:
    """Lifetime traded value."""
    return _volume_to_value(
        pool,
        pool.total_trade_x,
        pool.total_trade_y,
        x_info,
        y_info,
        primary_coin_price,
        config,
    )

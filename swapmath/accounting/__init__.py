"""Pool accounting: swap quotes, liquidity, prices and metrics.

All functions take immutable Pool/Position snapshots and return plain
values. Integer results match on-chain settlement exactly; float results
(prices, APR, TVL) are for display only.
"""

# Swap quoting
from .swap import (
    can_swap_coins,
    deduct_fee,
    is_available_for_swap,
    quote_forward_swap,
    quote_min_output_with_slippage,
    quote_reverse_swap,
    quote_swap,
    slippage_multiplier,
    swap_direction,
)

# Liquidity
from .liquidity import (
    deposit_x_for_y,
    deposit_y_for_x,
    position_balance,
    quote_deposit,
    quote_withdraw,
    share_coin_amounts,
    share_of_pool,
)

# Prices
from .pricing import buy_price, price, sell_price, stable_price_rational

# Metrics
from .metrics import estimated_apr, total_volume, tvl, volume_24h

__all__ = [
    # Swap quoting
    "is_available_for_swap",
    "deduct_fee",
    "quote_swap",
    "quote_forward_swap",
    "quote_reverse_swap",
    "slippage_multiplier",
    "quote_min_output_with_slippage",
    "swap_direction",
    "can_swap_coins",
    # Liquidity
    "deposit_x_for_y",
    "deposit_y_for_x",
    "quote_deposit",
    "position_balance",
    "share_of_pool",
    "share_coin_amounts",
    "quote_withdraw",
    # Prices
    "price",
    "buy_price",
    "sell_price",
    "stable_price_rational",
    # Metrics
    "estimated_apr",
    "tvl",
    "volume_24h",
    "total_volume",
]

"""Pool and position snapshot types.

A Pool is an immutable snapshot of one pool's on-chain state. Reserves
change between reads, so every quote is computed against a frozen snapshot
and accounting functions never mutate it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TypeAlias

from swapmath.constants import BPS_SCALING
from swapmath.errors import (
    InvalidAmplificationError,
    InvalidFeeError,
    InvalidScaleError,
    NegativeReserveError,
)
from swapmath.math.decimal_value import DecimalValue


class FeeDirection(Enum):
    """Which leg of a swap the admin fee is deducted from."""

    X = "X"
    Y = "Y"


class SwapDirection(Enum):
    """Swap direction relative to the pool's (X, Y) ordering."""

    FORWARD = "forward"  # X -> Y
    REVERSE = "reverse"  # Y -> X


class PoolAvailability(Enum):
    """Whether a pool can be quoted for swaps."""

    AVAILABLE = "available"
    FROZEN = "frozen"
    EMPTY_RESERVES = "empty_reserves"

    @property
    def reason(self) -> str | None:
        """Human-readable reason the pool is unavailable, or None."""
        return _AVAILABILITY_REASONS.get(self)


_AVAILABILITY_REASONS = {
    PoolAvailability.FROZEN: "Pool is frozen",
    PoolAvailability.EMPTY_RESERVES: "Pool is empty, deposit first",
}


@dataclass(frozen=True)
class CoinType:
    """A coin type on a given network (e.g. "0x1::aptos_coin::AptosCoin")."""

    network: str
    name: str

    @property
    def uuid(self) -> str:
        return f"CoinType[{self.network}-{self.name}]"


@dataclass(frozen=True)
class PoolType:
    """The ordered coin pair traded by a pool."""

    x: CoinType
    y: CoinType

    @property
    def uuid(self) -> str:
        return f"PoolType[{self.x.uuid}-{self.y.uuid}]"


@dataclass(frozen=True)
class ConstantProductCurve:
    """x * y = k curve."""


@dataclass(frozen=True)
class StableSwapCurve:
    """StableSwap curve.

    Attributes:
        amplification: Amplification coefficient A (>= 1)
        scale_x: Multiplier normalizing X amounts before curve math
        scale_y: Multiplier normalizing Y amounts before curve math
    """

    amplification: int
    scale_x: int = 1
    scale_y: int = 1

    def __post_init__(self) -> None:
        if self.amplification < 1:
            raise InvalidAmplificationError(
                f"Amplification coefficient must be >= 1, got {self.amplification}"
            )
        if self.scale_x < 1 or self.scale_y < 1:
            raise InvalidScaleError(
                f"Stable scales must be >= 1, got x={self.scale_x} y={self.scale_y}"
            )


Curve: TypeAlias = ConstantProductCurve | StableSwapCurve


@dataclass(frozen=True)
class Pool:
    """Snapshot of a two-token liquidity pool.

    Attributes:
        pool_type: The (X, Y) coin pair
        address: Account or object address holding the pool
        curve: Pricing curve (constant product or stable swap)
        reserve_x: Current X reserve
        reserve_y: Current Y reserve
        lsp_supply: Total liquidity-share supply (0 means uninitialized)
        fee_direction: Leg the admin fee is deducted from
        admin_fee_bps / lp_fee_bps / incentive_fee_bps / connect_fee_bps /
        withdraw_fee_bps: Fees in basis points
        frozen: Swaps and deposits are disabled when True
        total_trade_x / total_trade_y: Lifetime traded volume counters
        total_trade_x_24h / total_trade_y_24h: Volume since the last capture
        trade_24h_last_capture_time: Unix seconds of the last 24h capture
        last_trade_time: Unix seconds of the most recent trade
    """

    pool_type: PoolType
    address: str
    curve: Curve
    reserve_x: int
    reserve_y: int
    lsp_supply: int
    fee_direction: FeeDirection = FeeDirection.X
    admin_fee_bps: int = 0
    lp_fee_bps: int = 0
    incentive_fee_bps: int = 0
    connect_fee_bps: int = 0
    withdraw_fee_bps: int = 0
    frozen: bool = False
    total_trade_x: int = 0
    total_trade_y: int = 0
    total_trade_x_24h: int = 0
    total_trade_y_24h: int = 0
    trade_24h_last_capture_time: int = 0
    last_trade_time: int = 0

    def __post_init__(self) -> None:
        for name in ("reserve_x", "reserve_y", "lsp_supply"):
            value = getattr(self, name)
            if value < 0:
                raise NegativeReserveError(f"{name} must be non-negative, got {value}")
        for name in (
            "admin_fee_bps",
            "lp_fee_bps",
            "incentive_fee_bps",
            "connect_fee_bps",
            "withdraw_fee_bps",
        ):
            value = getattr(self, name)
            if not 0 <= value <= BPS_SCALING:
                raise InvalidFeeError(f"{name} must be in [0, {BPS_SCALING}], got {value}")

    @property
    def total_admin_fee_bps(self) -> int:
        """Admin plus connect fee."""
        return self.admin_fee_bps + self.connect_fee_bps

    @property
    def total_lp_fee_bps(self) -> int:
        """Incentive plus LP fee."""
        return self.incentive_fee_bps + self.lp_fee_bps

    @property
    def is_initialized(self) -> bool:
        return self.reserve_x > 0 and self.reserve_y > 0

    @property
    def uuid(self) -> str:
        return f"Pool[{self.pool_type.uuid}-{self.address}]"


@dataclass(frozen=True)
class CoinBalance:
    """An account's balance of one coin type."""

    coin_type: CoinType
    address: str
    balance: int

    @property
    def uuid(self) -> str:
        return f"CoinBalance[{self.coin_type.uuid}-{self.address}]"


@dataclass(frozen=True)
class Position:
    """A holding of liquidity-share coins in a pool.

    Attributes:
        pool: Snapshot of the pool the shares belong to
        lsp_coin: The account's liquidity-share coin balance for this pool
        ratio: Optional fraction in [0, 1] selecting part of the balance,
            used for partial withdrawals
    """

    pool: Pool
    lsp_coin: CoinBalance
    ratio: DecimalValue | None = None

    def __post_init__(self) -> None:
        if self.lsp_coin.balance < 0:
            raise NegativeReserveError(
                f"lsp_coin balance must be non-negative, got {self.lsp_coin.balance}"
            )

    @property
    def lsp_balance(self) -> int:
        """Number of liquidity-share coins held."""
        return self.lsp_coin.balance

    def with_partial_ratio(self, ratio: DecimalValue) -> Position:
        """Return a new position narrowed to a fraction of the balance."""
        return replace(self, ratio=ratio)

    @property
    def uuid(self) -> str:
        return f"Position[{self.pool.uuid}-{self.lsp_coin.uuid}]"


@dataclass(frozen=True)
class TokenInfo:
    """Coin metadata needed to value pool amounts.

    Attributes:
        coin_type: The coin
        decimals: Decimal precision of raw amounts
        stable_coin: Stable-coin tag ("usdc", "usdt", ...) if the coin is a
            recognized stable-valued asset, else None
    """

    coin_type: CoinType
    decimals: int
    stable_coin: str | None = None

    @property
    def is_stable_coin(self) -> bool:
        return self.stable_coin is not None

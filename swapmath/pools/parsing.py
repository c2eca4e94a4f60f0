"""Pool snapshot parsing.

Functions to turn externally fetched pool state (a decoded pool resource)
into validated Pool snapshots, and to match liquidity-share coins held by
an account to the pools they belong to.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Annotated, Any

import structlog
from pydantic import BaseModel, BeforeValidator, Field, ValidationError

from swapmath.constants import CURVE_CODE_CONSTANT_PRODUCT, FEE_DIRECTION_CODE_X
from swapmath.errors import SwapMathError
from swapmath.safe_int import S, SafeIntError

from .types import (
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

logger = structlog.get_logger()


def _to_int(value: Any) -> int:
    """Accept ints and decimal integer strings."""
    if isinstance(value, bool):
        raise ValueError(f"Expected integer, got bool: {value}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError as err:
            raise ValueError(f"Must be a decimal integer string: '{value}'") from err
    raise ValueError(f"Expected int or string, got {type(value).__name__}")


def validate_u64(value: Any) -> int:
    """Validate a u64 amount given as int or decimal string.

    Raises:
        ValueError: If value is not a non-negative integer within u64 range
    """
    try:
        return S(_to_int(value)).to_u64()
    except SafeIntError as err:
        raise ValueError(str(err)) from err


def validate_u128(value: Any) -> int:
    """Validate a u128 counter given as int or decimal string.

    Raises:
        ValueError: If value is not a non-negative integer within u128 range
    """
    try:
        return S(_to_int(value)).to_u128()
    except SafeIntError as err:
        raise ValueError(str(err)) from err


def validate_coin_u64(value: Any) -> int:
    """Validate a coin amount, unwrapping {"value": amount} coin structs."""
    if isinstance(value, Mapping):
        value = value.get("value")
    return validate_u64(value)


U64 = Annotated[int, BeforeValidator(validate_u64)]
U128 = Annotated[int, BeforeValidator(validate_u128)]
CoinU64 = Annotated[int, BeforeValidator(validate_coin_u64)]


class PoolResource(BaseModel):
    """Decoded on-chain pool resource.

    Field names follow the pool contract's storage layout. Unknown fields
    (moving-average trackers, capability handles) are ignored.
    """

    index: U64 = 0
    pool_type: int = Field(description="100 for constant product, otherwise stable swap")
    x: CoinU64
    y: CoinU64
    lsp_supply: U64
    fee_direction: int = Field(description="200 charges the admin fee on X, otherwise Y")
    stable_amp: U64 = 0
    stable_x_scale: U64 = 1
    stable_y_scale: U64 = 1
    freeze: bool = False
    last_trade_time: U64 = 0
    total_trade_x: U128 = 0
    total_trade_y: U128 = 0
    total_trade_24h_last_capture_time: U64 = 0
    total_trade_x_24h: U128 = 0
    total_trade_y_24h: U128 = 0
    admin_fee: U64 = 0
    lp_fee: U64 = 0
    incentive_fee: U64 = 0
    connect_fee: U64 = 0
    withdraw_fee: U64 = 0

    model_config = {"extra": "ignore"}

    @property
    def curve(self) -> Curve:
        if self.pool_type == CURVE_CODE_CONSTANT_PRODUCT:
            return ConstantProductCurve()
        return StableSwapCurve(
            amplification=self.stable_amp,
            scale_x=self.stable_x_scale,
            scale_y=self.stable_y_scale,
        )

    @property
    def direction(self) -> FeeDirection:
        return FeeDirection.X if self.fee_direction == FEE_DIRECTION_CODE_X else FeeDirection.Y

    def to_pool(self, pool_type: PoolType, address: str) -> Pool:
        """Build a Pool snapshot.

        Raises:
            SwapMathError: If the resource describes an invalid configuration
        """
        return Pool(
            pool_type=pool_type,
            address=address,
            curve=self.curve,
            reserve_x=self.x,
            reserve_y=self.y,
            lsp_supply=self.lsp_supply,
            fee_direction=self.direction,
            admin_fee_bps=self.admin_fee,
            lp_fee_bps=self.lp_fee,
            incentive_fee_bps=self.incentive_fee,
            connect_fee_bps=self.connect_fee,
            withdraw_fee_bps=self.withdraw_fee,
            frozen=self.freeze,
            total_trade_x=self.total_trade_x,
            total_trade_y=self.total_trade_y,
            total_trade_x_24h=self.total_trade_x_24h,
            total_trade_y_24h=self.total_trade_y_24h,
            trade_24h_last_capture_time=self.total_trade_24h_last_capture_time,
            last_trade_time=self.last_trade_time,
        )


def parse_type_args(type_string: str) -> tuple[str, list[str]] | None:
    """Split a generic type tag into its head and top-level type arguments.

    Example:
        "0x1::pool::Pool<0x1::a::A, 0x2::b::B<0x3::c::C>>" ->
        ("0x1::pool::Pool", ["0x1::a::A", "0x2::b::B<0x3::c::C>"])

    Returns:
        (head, args), or None if the string is not a generic type tag
    """
    open_idx = type_string.find("<")
    if open_idx <= 0 or not type_string.endswith(">"):
        return None

    head = type_string[:open_idx]
    inner = type_string[open_idx + 1 : -1]

    args: list[str] = []
    depth = 0
    current: list[str] = []
    for char in inner:
        if char == "<":
            depth += 1
        elif char == ">":
            depth -= 1
            if depth < 0:
                return None
        if char == "," and depth == 0:
            arg = "".join(current).strip()
            if arg:
                args.append(arg)
            current = []
        else:
            current.append(char)

    if depth != 0:
        return None
    arg = "".join(current).strip()
    if arg:
        args.append(arg)
    return head, args


def parse_pool(
    type_string: str,
    address: str,
    data: Mapping[str, Any],
    network: str = "aptos",
) -> Pool | None:
    """Parse a pool resource into a Pool snapshot.

    Args:
        type_string: Resource type tag, e.g. "0xabc::pool::Pool<X, Y>"
        address: Address holding the resource
        data: Decoded resource fields
        network: Network name recorded on the coin types

    Returns:
        Pool, or None if the type tag or the data is invalid
    """
    parsed = parse_type_args(type_string)
    if parsed is None or len(parsed[1]) != 2:
        logger.warning("pool_invalid_type_string", address=address, type_string=type_string)
        return None
    _, (x_name, y_name) = parsed
    pool_type = PoolType(
        x=CoinType(network=network, name=x_name),
        y=CoinType(network=network, name=y_name),
    )

    try:
        resource = PoolResource.model_validate(data)
        return resource.to_pool(pool_type, address)
    except (ValidationError, SwapMathError) as err:
        logger.warning(
            "pool_invalid_resource",
            address=address,
            type_string=type_string,
            error=str(err),
        )
        return None


def find_positions(
    pools: Iterable[Pool],
    coins: Iterable[CoinBalance],
    lsp_prefix: str,
) -> list[Position]:
    """Match an account's liquidity-share coins to pool positions.

    A coin is a liquidity share if its type name starts with lsp_prefix and
    carries the pool's (X, Y) pair as its two type arguments. When several
    pools trade the same pair, the one with the largest share supply wins.

    Args:
        pools: Known pool snapshots
        coins: The account's coin balances
        lsp_prefix: Type-name prefix of liquidity-share coins,
            e.g. "0xabc::pool::LSP"

    Returns:
        One Position per matched coin with a positive balance
    """
    pool_list = list(pools)
    positions: list[Position] = []

    for coin in coins:
        if coin.balance <= 0 or not coin.coin_type.name.startswith(lsp_prefix):
            continue
        parsed = parse_type_args(coin.coin_type.name)
        if parsed is None or len(parsed[1]) != 2:
            logger.debug("lsp_coin_invalid_type", coin=coin.coin_type.name)
            continue

        x_name, y_name = parsed[1]
        candidates = [
            p
            for p in pool_list
            if p.pool_type.x.name == x_name
            and p.pool_type.y.name == y_name
            and p.pool_type.x.network == coin.coin_type.network
        ]
        if not candidates:
            logger.debug("lsp_coin_pool_not_found", coin=coin.coin_type.name)
            continue

        best = candidates[0]
        for candidate in candidates[1:]:
            if candidate.lsp_supply > best.lsp_supply:
                best = candidate
        positions.append(Position(pool=best, lsp_coin=coin))

    return positions

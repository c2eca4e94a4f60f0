"""Pool snapshot types and parsing."""

from .parsing import PoolResource, find_positions, parse_pool, parse_type_args
from .types import (
    CoinBalance,
    CoinType,
    ConstantProductCurve,
    Curve,
    FeeDirection,
    Pool,
    PoolAvailability,
    PoolType,
    Position,
    StableSwapCurve,
    SwapDirection,
    TokenInfo,
)

__all__ = [
    # Types
    "CoinType",
    "PoolType",
    "Curve",
    "ConstantProductCurve",
    "StableSwapCurve",
    "FeeDirection",
    "SwapDirection",
    "PoolAvailability",
    "Pool",
    "Position",
    "TokenInfo",
    "CoinBalance",
    # Parsing
    "PoolResource",
    "parse_pool",
    "parse_type_args",
    "find_positions",
]

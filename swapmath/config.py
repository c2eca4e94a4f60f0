"""Configuration for derived pool metrics."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from swapmath.pools.types import CoinType

# Environment variable naming the chain's primary coin as "network:name"
PRIMARY_COIN_ENV = "SWAPMATH_PRIMARY_COIN"


@dataclass(frozen=True)
class AccountingConfig:
    """Centralized configuration for APR and valuation helpers.

    None of these values affect swap quoting; settlement-parity constants
    live in swapmath.constants.

    Attributes:
        seconds_per_day: Length of the trade-volume capture window unit
        days_per_year: Annualization factor for APR
        lp_fee_attribution: Share of the LP fee attributed to each side's
            recorded volume. Both legs of a swap are recorded as volume but
            the LP fee is only taken on the input leg, hence 0.5.
        primary_coin: The chain's primary asset, priced by an external oracle.
            None disables primary-coin pricing in valuation.
    """

    seconds_per_day: int = 86_400
    days_per_year: int = 365
    lp_fee_attribution: float = 0.5
    primary_coin: CoinType | None = None


# Default configuration instance
DEFAULT_CONFIG = AccountingConfig()


def parse_coin_type(value: str) -> CoinType:
    """Parse a "network:name" coin type string.

    The name itself may contain "::" separators, so only the first single
    colon before the name is treated as the delimiter.

    Raises:
        ValueError: If the string has no network prefix or an empty name
    """
    network, sep, name = value.partition(":")
    if not sep or not network or not name or name.startswith(":"):
        raise ValueError(f"Coin type must be 'network:name', got '{value}'")
    return CoinType(network=network, name=name)


def load_config(environ: Mapping[str, str] | None = None) -> AccountingConfig:
    """Build an AccountingConfig from environment variables.

    Configuration via environment variables:
    - SWAPMATH_PRIMARY_COIN: primary coin as "network:name" (default: unset)
    """
    env = os.environ if environ is None else environ
    primary_raw = env.get(PRIMARY_COIN_ENV, "").strip()
    primary_coin = parse_coin_type(primary_raw) if primary_raw else None
    return AccountingConfig(primary_coin=primary_coin)

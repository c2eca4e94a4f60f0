"""Exact integer and fixed-point math for pool accounting.

This package provides:
- Stable-swap invariant and reserve solvers (Newton iteration, integer only)
- DecimalValue: mantissa/scale fixed-point decimals for ratios and user input
"""

from .decimal_value import DecimalValue
from .stable_swap import (
    compute_counterparty_reserve,
    compute_counterparty_reserve_scaled,
    compute_counterparty_reserve_with_scales,
    compute_invariant,
    compute_invariant_scaled,
    div_trunc,
)

__all__ = [
    "DecimalValue",
    "compute_invariant",
    "compute_invariant_scaled",
    "compute_counterparty_reserve",
    "compute_counterparty_reserve_scaled",
    "compute_counterparty_reserve_with_scales",
    "div_trunc",
]

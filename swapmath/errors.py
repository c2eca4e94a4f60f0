"""Pool accounting error classes.

All of these signal a caller bug (bad configuration or malformed input),
never market state. Empty pools, zero supply and frozen pools are reported
through return values instead.
"""


class SwapMathError(Exception):
    """Base error for pool math operations."""

    pass


class InvalidAmplificationError(SwapMathError):
    """Stable-swap amplification coefficient must be at least 1."""

    pass


class InvalidScaleError(SwapMathError):
    """Normalization scales must be >= 1 and decimal scales >= 0."""

    pass


class NegativeReserveError(SwapMathError):
    """Reserves, balances and supplies must be non-negative."""

    pass


class InvalidFeeError(SwapMathError):
    """Fee must be in range [0, 10000] basis points."""

    pass


class InvalidSlippageError(SwapMathError):
    """Slippage tolerance must be in range [0, 1]."""

    pass


class ScaleNarrowingError(SwapMathError):
    """A decimal value cannot be aligned to a smaller scale without truncation."""

    pass

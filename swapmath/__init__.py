"""Client-side accounting for two-token AMM liquidity pools."""

from swapmath.config import DEFAULT_CONFIG, AccountingConfig, load_config
from swapmath.errors import SwapMathError

__version__ = "0.1.0"
__all__ = ["AccountingConfig", "DEFAULT_CONFIG", "load_config", "SwapMathError", "__version__"]

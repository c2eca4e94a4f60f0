"""Settlement-parity constants.

These values are fixed by the on-chain pool contract. Changing any of them
breaks bit-exact agreement between client quotes and settlement.
"""

# Fees are expressed in basis points over this denominator
BPS_SCALING = 10_000

# Newton iteration cap shared by the invariant and reserve solvers
STABLE_MAX_ITERATIONS = 256

# Newton iteration stops once successive estimates differ by at most this
STABLE_CONVERGENCE_TOLERANCE = 1

# Slippage tolerance is applied with 9-decimal fixed-point precision
SLIPPAGE_PRECISION = 10**9

# Pool resource codes
CURVE_CODE_CONSTANT_PRODUCT = 100
CURVE_CODE_STABLE_SWAP = 101
FEE_DIRECTION_CODE_X = 200
FEE_DIRECTION_CODE_Y = 201

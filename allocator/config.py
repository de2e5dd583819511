"""
allocator/config.py
-------------------
Tunable numeric parameters for the knapsack allocator.

Every value here can be overridden per call by passing a ``config`` dict to
:meth:`KnapsackEngine.optimize` (keys are the lower-case constant names).
"""

# ---------------------------------------------------------------------------
# Discretization
# ---------------------------------------------------------------------------
# Currency is converted to integer units before the DP table is built.
# 100 units per currency unit = one-cent resolution.

UNITS_PER_CURRENCY: int = 100

# Amounts within this many units of an integer snap to that integer, so that
# 19.99 * 100 = 1998.9999999999998 is read as 1999 and not floored to 1998.

DISCRETIZATION_TOLERANCE: float = 1e-6

# ---------------------------------------------------------------------------
# Safety ceilings
# ---------------------------------------------------------------------------
# The exact DP is O(W x N) in time and O(W) in memory, where W is the
# budget in units after dividing out the gcd of the prices.  Above
# MAX_DP_UNITS the engine switches to the greedy fallback instead of
# allocating a huge table.

MAX_DP_UNITS: int = 1_000_000

# The table is filled in blocks as wide as the cheapest price, one Python
# iteration per block.  More blocks than this also triggers the fallback.

MAX_DP_BLOCKS: int = 100_000

# Budgets above this are rejected outright as InvalidBudget.

MAX_BUDGET: float = 1e12

# ---------------------------------------------------------------------------
# Cancellation
# ---------------------------------------------------------------------------
# The fill loop polls its cancellation token once every N budget units.

CANCEL_CHECK_INTERVAL: int = 10_000

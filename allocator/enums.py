from enum import Enum


class OptimizationMethod(Enum):
    """Which solver produced an allocation."""
    EXACT = "exact"     # unbounded-knapsack dynamic programme
    GREEDY = "greedy"   # ratio-ordered fill, used above the DP ceiling

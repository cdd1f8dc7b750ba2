# category_paths/constants.py
"""
Category Paths Constants

This module defines the defaults used throughout the path optimizers:

COSTS
- ZERO_COST: additive identity used to start cost accumulation
- INFINITE_COST: initial Bellman-Ford distance of every non-source node

SEARCH
- DEFAULT_K: number of paths returned by the ranked (Yen) search
- NO_PREDECESSOR: marker in the Bellman-Ford predecessor table
"""
import numpy as np


# =============================================================================
# COSTS
# =============================================================================

# Works for int, float, Fraction and Decimal costs. Cost types with a different
# identity are configured per optimizer: Accumulating(zero=...)
ZERO_COST = 0

# Bellman-Ford runs on float64 edge weights
INFINITE_COST = np.inf


# =============================================================================
# SEARCH
# =============================================================================

# k=1 is the single shortest path
DEFAULT_K = 1

NO_PREDECESSOR = -1

assert DEFAULT_K >= 1, "DEFAULT_K must be at least 1"

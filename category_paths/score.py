"""
Common score calculations for Optimizer.ranked_paths

A score receives a WellFormedPath and returns anything totally ordered.
"""

from typing import Any


def cost(path) -> Any:
    """Pass the original cost along as the score."""
    return path.cost


def cost_per_input(path) -> Any:
    """
    Ratio of cost to the input size at the source.

    Works whenever the cost type can be divided by the size type.
    """
    return path.cost / path.source.size

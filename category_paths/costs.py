"""
Cost Logic Module

Basic concrete cost functions and metadata wrappers so clients can get started
without writing their own ApplyMorphism implementations.
"""

from typing import Any, Hashable
from dataclasses import dataclass

from .morphism import MorphismOutput, NonNegativeCost, is_non_negative


@dataclass(frozen=True)
class DeductiveLinearCost(NonNegativeCost):
    """
    Linear cost that is deducted from the flowing size.

    cost = rate * input + constant, and the target receives whatever is left
    of the input after paying the cost (never less than zero).

    Non-negative as long as rate, constant and the sizes are non-negative.
    """
    rate: Any
    constant: Any

    def apply(self, input_size: Any) -> MorphismOutput:
        cost = self.rate * input_size + self.constant
        size = 0 * input_size if cost > input_size else input_size - cost
        return MorphismOutput(size=size, cost=cost)


@dataclass(frozen=True)
class ConstantCost(NonNegativeCost):
    """Every morphism costs the same, for a basic unweighted graph."""
    cost: Any = 1.0

    def apply(self, input_size: Any) -> MorphismOutput:
        return MorphismOutput(size=input_size, cost=self.cost)


@dataclass(frozen=True, eq=False)
class SimpleMorphism:
    """
    Metadata wrapper separating identity from cost logic.

    Only `meta` takes part in equality and hashing, so the logic does not need
    to be hashable.

    Attributes:
        meta: Identifying data, unique among morphisms sharing endpoints
        logic: Any ApplyMorphism implementation
    """
    meta: Hashable
    logic: Any = ConstantCost()

    def apply(self, input_size: Any) -> MorphismOutput:
        return self.logic.apply(input_size)

    def __hash__(self):
        return hash(self.meta)

    def __eq__(self, other):
        if not isinstance(other, SimpleMorphism):
            return NotImplemented
        return self.meta == other.meta

    def __str__(self):
        return str(self.meta)


@dataclass(frozen=True, eq=False)
class NonNegativeSimpleMorphism(SimpleMorphism, NonNegativeCost):
    """SimpleMorphism whose logic carries the NonNegativeCost promise."""

    def __post_init__(self):
        if not is_non_negative(self.logic):
            raise TypeError(
                f"{type(self.logic).__name__} does not promise non-negative costs"
            )

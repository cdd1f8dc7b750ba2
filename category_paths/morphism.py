"""
Morphism Module

A morphism is a directed arrow between two object ids. Its metadata tells
morphisms with the same endpoints apart and carries the cost logic: given the
size of the input object, how much does applying the morphism cost and what
size reaches the target object?
"""

from typing import Any, Hashable, NamedTuple, Protocol, runtime_checkable
from dataclasses import dataclass


class MorphismOutput(NamedTuple):
    """Outcome of applying a morphism to an input size."""
    size: Any
    cost: Any


@runtime_checkable
class ApplyMorphism(Protocol):
    """
    Determines the outcome of applying a morphism to its input object of the
    given size. Returns the cost of the application and the size of the target
    object afterwards.
    """

    def apply(self, input_size: Any) -> MorphismOutput:
        ...


class NonNegativeCost:
    """
    Marker for metadata whose cost is never negative.

    By inheriting this class, a metadata type promises that for every input
    size s:

        apply(s).cost >= 0

    Dijkstra's algorithm is only correct under this guarantee, so the
    Accumulating optimizer refuses categories containing metadata without the
    marker. The promise cannot be checked by the library. Inherit at your own
    risk.
    """
    __slots__ = ()


def is_non_negative(metadata: Any) -> bool:
    """Whether the metadata carries the NonNegativeCost promise."""
    return isinstance(metadata, NonNegativeCost)


@dataclass(frozen=True)
class Morphism:
    """
    Represents a morphism (arrow) between two objects of a category.

    Equality and hashing use (source, target, metadata), so the metadata must
    be hashable and sufficiently unique to distinguish this morphism from
    other morphisms with the same source and target.

    Attributes:
        source: Id of the input object
        target: Id of the output object
        metadata: Identifying data plus the cost logic (an ApplyMorphism)
    """
    source: Hashable
    target: Hashable
    metadata: Any

    def apply(self, input_size: Any) -> MorphismOutput:
        """Apply the metadata's cost logic to an input size."""
        output = self.metadata.apply(input_size)
        if not isinstance(output, MorphismOutput):
            size, cost = output
            output = MorphismOutput(size, cost)
        return output

    @property
    def non_negative(self) -> bool:
        return is_non_negative(self.metadata)

    def __str__(self):
        return f"{self.metadata}: {self.source} -> {self.target}"

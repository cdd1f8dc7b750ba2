"""
Vertex Module

A vertex is a node of the graph used to search a category. Objects and
morphisms are both vertices, and the implicit edges connect an object to its
outbound morphisms and a morphism to its target object:

    ObjectVertex ──(zero)──▶ MorphismVertex ──(apply(size).cost)──▶ ObjectVertex

Putting morphisms on vertices is what lets the output of a cost function, the
size that reaches the target, inform the rest of the search.

During a search an ObjectVertex refers to its object by id ("lean" form).
`resolve` swaps the id for the stored object once a path has been chosen.
"""

from typing import Any, Hashable, List, Optional, Set, Tuple
from dataclasses import dataclass

from .category import Category, identify
from .constants import ZERO_COST
from .morphism import Morphism

Successors = List[Tuple["Vertex", Any]]


class Vertex:
    """Base of the two vertex kinds. Dispatches successor expansion."""
    __slots__ = ()

    def successors(self,
                   category: Category,
                   zero: Any = ZERO_COST,
                   blacklist: Optional[Set[Hashable]] = None) -> Successors:
        """
        Vertices reachable in one step, each with the cost of the step.

        Args:
            category: Category the vertex belongs to
            zero: Additive identity of the cost type
            blacklist: Object ids that may not be entered. When given, an
                object vertex adds its own id before expanding, so every object
                is expanded at most once.
        """
        raise NotImplementedError

    def is_object_with_id(self, object_id: Hashable) -> bool:
        return False

    def resolve(self, category: Category) -> "Vertex":
        return self


@dataclass(frozen=True)
class ObjectVertex(Vertex):
    """An object together with the size flowing through it."""
    inner: Any
    size: Any

    @property
    def object_id(self) -> Hashable:
        return identify(self.inner)

    def successors(self, category, zero=ZERO_COST, blacklist=None):
        object_id = self.object_id
        outbound = category.get_outbound(object_id)
        if outbound is None:
            # Search frontiers only ever hold ids taken from the category
            category.require_object(object_id)
        if blacklist is not None:
            if object_id in blacklist:
                return []
            blacklist.add(object_id)
        return [
            (MorphismVertex(morphism, self.size), zero)
            for morphism in outbound
            if blacklist is None or morphism.target not in blacklist
        ]

    def is_object_with_id(self, object_id):
        return self.object_id == object_id

    def resolve(self, category):
        return ObjectVertex(category.require_object(self.object_id), self.size)


@dataclass(frozen=True)
class MorphismVertex(Vertex):
    """A morphism together with the size it is applied to."""
    inner: Morphism
    input_size: Any

    def successors(self, category, zero=ZERO_COST, blacklist=None):
        output = self.inner.apply(self.input_size)
        return [(ObjectVertex(self.inner.target, output.size), output.cost)]

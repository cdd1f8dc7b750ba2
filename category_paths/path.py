"""
Path Module

Results of the shortest-path optimizers and the tools to inspect them.

- Path: a non-empty sequence of vertices plus its total cost
- WellFormedPath: a Path guaranteed to alternate Object, Morphism, ..., Object.
  Only the optimizers construct it.
- AppliedMorphism / AppliedCompositeMorphism: the same path regrouped as
  (morphism, (source, size), (target, size)) steps, for inspection and
  re-scoring. A composite behaves like one morphism built by sequential
  composition.
"""

from typing import Any, Iterable, List, Sequence, Tuple
from dataclasses import dataclass

from .category import Category, identify
from .constants import ZERO_COST
from .errors import (
    EmptyPath,
    InnerIsNotMorphism,
    InvalidPath,
    InvariantViolation,
    MalformedStructure,
    MissingObjects,
    SourceIsNotObject,
    TargetIsNotObject,
)
from .morphism import Morphism, MorphismOutput
from .vertex import MorphismVertex, ObjectVertex, Vertex


@dataclass(frozen=True)
class Path:
    """
    A non-empty sequence of vertices and the total cost of traversing them.

    The structure is not validated beyond non-emptiness. Use WellFormedPath
    or AppliedCompositeMorphism.from_path for that.
    """
    vertices: Tuple[Vertex, ...]
    cost: Any

    def __post_init__(self):
        vertices = tuple(self.vertices)
        if not vertices:
            raise EmptyPath()
        object.__setattr__(self, "vertices", vertices)

    def replace_cost(self, new_cost: Any) -> Tuple["Path", Any]:
        """Return a copy with a new cost, together with the old cost."""
        return Path(self.vertices, new_cost), self.cost

    def __len__(self):
        return len(self.vertices)


_CONSTRUCTION_KEY = object()


class WellFormedPath:
    """
    A Path whose vertices alternate Object, Morphism, ..., Object and whose
    morphisms connect their neighbouring objects.

    Read-only. Instances come out of the optimizers only; calling the
    constructor directly raises TypeError. Use into_inner() to get a Path
    that can be modified freely.
    """
    __slots__ = ("_path",)

    def __init__(self, path: Path, _key: Any = None):
        if _key is not _CONSTRUCTION_KEY:
            raise TypeError(
                "WellFormedPath is produced by the path optimizers and cannot be "
                "constructed directly"
            )
        self._path = path

    @classmethod
    def _wrap(cls, path: Path) -> "WellFormedPath":
        try:
            validate_structure(path.vertices)
        except InvalidPath as e:
            raise InvariantViolation(f"Optimizer produced a malformed path: {e}") from e
        return cls(path, _key=_CONSTRUCTION_KEY)

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        return self._path.vertices

    @property
    def cost(self) -> Any:
        return self._path.cost

    @property
    def source(self) -> ObjectVertex:
        return self._path.vertices[0]

    @property
    def target(self) -> ObjectVertex:
        return self._path.vertices[-1]

    def into_inner(self) -> Path:
        return self._path

    def to_composite(self) -> "AppliedCompositeMorphism":
        try:
            return AppliedCompositeMorphism.from_path(self._path)
        except InvalidPath as e:
            raise InvariantViolation(f"Well-formed path failed conversion: {e}") from e

    def replace_cost(self, new_cost: Any) -> Tuple["WellFormedPath", Any]:
        """Swap the cost without touching the vertices, which stay well formed."""
        path, old = self._path.replace_cost(new_cost)
        return WellFormedPath(path, _key=_CONSTRUCTION_KEY), old

    def __len__(self):
        return len(self._path.vertices)

    def __iter__(self):
        return iter(self._path.vertices)

    def __eq__(self, other):
        if not isinstance(other, WellFormedPath):
            return NotImplemented
        return self._path == other._path

    def __hash__(self):
        return hash(self._path)

    def __repr__(self):
        return f"WellFormedPath(vertices={len(self)}, cost={self.cost!r})"

    def __str__(self):
        return str(self.to_composite())


def validate_structure(vertices: Sequence[Vertex]) -> None:
    """
    Check the Object, Morphism, ..., Object alternation.

    Raises:
        EmptyPath: No vertices
        MalformedStructure: Fewer than 3 or an even number of vertices, or a
            morphism whose source/target does not match its neighbours
        SourceIsNotObject, InnerIsNotMorphism, TargetIsNotObject: A step of
            the wrong kind
    """
    n = len(vertices)
    if n == 0:
        raise EmptyPath()
    if n < 3 or n % 2 != 1:
        raise MalformedStructure(f"{n} vertices")
    for i in range(0, n - 1, 2):
        source, inner, target = vertices[i], vertices[i + 1], vertices[i + 2]
        if not isinstance(source, ObjectVertex):
            raise SourceIsNotObject(f"position {i}")
        if not isinstance(inner, MorphismVertex):
            raise InnerIsNotMorphism(f"position {i + 1}")
        if not isinstance(target, ObjectVertex):
            raise TargetIsNotObject(f"position {i + 2}")
        morphism = inner.inner
        if morphism.source != source.object_id or morphism.target != target.object_id:
            raise MalformedStructure(
                f"{morphism.source!r} -> {morphism.target!r} sits between "
                f"{source.object_id!r} and {target.object_id!r}"
            )


@dataclass(frozen=True)
class AppliedMorphism:
    """A morphism as applied in a path, with both objects and their sizes."""
    morphism: Morphism
    source: Tuple[Any, Any]
    target: Tuple[Any, Any]

    @property
    def input_size(self) -> Any:
        return self.source[1]

    @property
    def output_size(self) -> Any:
        return self.target[1]

    def pretty(self) -> str:
        return (
            f"{self.morphism.metadata}:\n"
            f"  ┌──{self.source[1]} of {identify(self.source[0])}\n"
            f"  └─▶{self.target[1]} of {identify(self.target[0])}"
        )

    def __str__(self):
        return (
            f"{self.morphism.metadata}{{ {self.source[1]} of {identify(self.source[0])} "
            f"─▶ {self.target[1]} of {identify(self.target[0])} }}"
        )


@dataclass(frozen=True)
class AppliedCompositeMorphism:
    """
    A well-formed path regrouped into applied morphisms.

    Attributes:
        morphisms: Non-empty tuple of AppliedMorphism, in path order
        cost: Total cost of the path
    """
    morphisms: Tuple[AppliedMorphism, ...]
    cost: Any

    def __post_init__(self):
        morphisms = tuple(self.morphisms)
        if not morphisms:
            raise EmptyPath()
        object.__setattr__(self, "morphisms", morphisms)

    @classmethod
    def from_path(cls, path: Any) -> "AppliedCompositeMorphism":
        """
        Convert a path, validating its structure.

        Args:
            path: Path or WellFormedPath

        Raises:
            InvalidPath: The vertices do not form a well-formed path
        """
        if isinstance(path, WellFormedPath):
            path = path.into_inner()
        vertices = path.vertices
        validate_structure(vertices)
        steps = []
        for i in range(0, len(vertices) - 1, 2):
            source, inner, target = vertices[i], vertices[i + 1], vertices[i + 2]
            steps.append(AppliedMorphism(
                morphism=inner.inner,
                source=(source.inner, source.size),
                target=(target.inner, target.size),
            ))
        return cls(tuple(steps), path.cost)

    @property
    def input_size(self) -> Any:
        return self.morphisms[0].input_size

    @property
    def output_size(self) -> Any:
        return self.morphisms[-1].output_size

    def apply(self, input_size: Any, zero: Any = ZERO_COST) -> MorphismOutput:
        """Apply the whole sequence as one morphism. Costs are summed."""
        size, total = input_size, zero
        for step in self.morphisms:
            output = step.morphism.apply(size)
            size, total = output.size, total + output.cost
        return MorphismOutput(size=size, cost=total)

    def reapply(self, new_input: Any, zero: Any = ZERO_COST) -> "AppliedCompositeMorphism":
        """
        Walk the same morphisms again from a new input size, recomputing every
        recorded size and the total cost.
        """
        steps = []
        size, total = new_input, zero
        for step in self.morphisms:
            output = step.morphism.apply(size)
            steps.append(AppliedMorphism(
                morphism=step.morphism,
                source=(step.source[0], size),
                target=(step.target[0], output.size),
            ))
            size, total = output.size, total + output.cost
        return AppliedCompositeMorphism(tuple(steps), total)

    def replace_cost(self, new_cost: Any) -> Tuple["AppliedCompositeMorphism", Any]:
        return AppliedCompositeMorphism(self.morphisms, new_cost), self.cost

    def to_morphisms(self) -> List[Morphism]:
        return [step.morphism for step in self.morphisms]

    def to_path(self) -> Path:
        """Flatten back into Object, Morphism, ..., Object vertices."""
        first = self.morphisms[0]
        vertices: List[Vertex] = [ObjectVertex(*first.source)]
        for step in self.morphisms:
            vertices.append(MorphismVertex(step.morphism, step.input_size))
            vertices.append(ObjectVertex(*step.target))
        return Path(tuple(vertices), self.cost)

    def pretty(self) -> str:
        lines = [f"{self.cost} =>"]
        for step in self.morphisms:
            lines.append(step.pretty())
        return "\n".join(lines)

    def __len__(self):
        return len(self.morphisms)

    def __str__(self):
        return f"{self.cost} => [{', '.join(str(step) for step in self.morphisms)}]"


def reapply(vertices: Iterable[Vertex], input_size: Any) -> Tuple[List[Vertex], List[Any]]:
    """
    Re-walk a vertex sequence from a new input size with accumulation.

    Every object takes the size that currently flows, and every morphism is
    applied to it and passes its output size on.

    Returns:
        (new vertices, cost of every morphism step). Summing the costs is left
        to the caller so any cost type works.
    """
    new_vertices: List[Vertex] = []
    step_costs: List[Any] = []
    size = input_size
    for vertex in vertices:
        if isinstance(vertex, ObjectVertex):
            new_vertices.append(ObjectVertex(vertex.inner, size))
        elif isinstance(vertex, MorphismVertex):
            output = vertex.inner.apply(size)
            new_vertices.append(MorphismVertex(vertex.inner, size))
            step_costs.append(output.cost)
            size = output.size
        else:
            raise TypeError(f"Not a vertex: {vertex!r}")
    return new_vertices, step_costs


def sum_costs(costs: Iterable[Any], zero: Any = ZERO_COST) -> Any:
    total = zero
    for cost in costs:
        total = total + cost
    return total


def path_from_morphisms(category: Category,
                        morphisms: Sequence[Morphism],
                        input_size: Any,
                        zero: Any = ZERO_COST) -> WellFormedPath:
    """
    Build the accumulated path that applies the given morphisms in order.

    Raises:
        EmptyPath: No morphisms
        MalformedStructure: Consecutive morphisms do not connect
        MissingObjects: A morphism refers to an object not in the category
    """
    if not morphisms:
        raise EmptyPath()
    for before, after in zip(morphisms, morphisms[1:]):
        if before.target != after.source:
            raise MalformedStructure(f"{before} does not connect to {after}")
    missing = [
        object_id
        for object_id in dict.fromkeys(
            [morphisms[0].source] + [m.target for m in morphisms]
        )
        if object_id not in category
    ]
    if missing:
        raise MissingObjects(missing)

    lean: List[Vertex] = [ObjectVertex(morphisms[0].source, input_size)]
    for morphism in morphisms:
        lean.append(MorphismVertex(morphism, input_size))
        lean.append(ObjectVertex(morphism.target, input_size))
    vertices, step_costs = reapply(lean, input_size)
    return resolved_path(category, vertices, sum_costs(step_costs, zero))


def resolved_path(category: Category, vertices: Iterable[Vertex], cost: Any) -> WellFormedPath:
    """Swap lean object ids for stored objects and wrap as a well-formed path."""
    return WellFormedPath._wrap(Path(tuple(v.resolve(category) for v in vertices), cost))

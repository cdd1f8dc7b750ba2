"""
Error Types

Three families of errors reported by the library, plus a defect signal:

- CategoryError: integrity violations detected while building a category
- PathFindingError: a shortest-path query that has no valid answer
- InvalidPath: a vertex sequence that is not an Object/Morphism alternation
- InvariantViolation: an internal guarantee was broken (always a bug)
"""

from typing import Any, Hashable, List


class CategoryError(ValueError):
    """Base class for errors raised while inserting into a Category."""
    pass


class ObjectAlreadyInserted(CategoryError):
    """An object with the same id is already in the category."""

    def __init__(self, object_id: Hashable):
        self.object_id = object_id
        super().__init__(f"Object {object_id!r} is already in the category")


class MorphismAlreadyInserted(CategoryError):
    """A structurally identical morphism is already in the category."""

    def __init__(self, source: Hashable, target: Hashable):
        self.source = source
        self.target = target
        super().__init__(
            f"An identical morphism {source!r} -> {target!r} is already in the category"
        )


class MissingObjects(CategoryError):
    """The morphism refers to objects that have not been inserted."""

    def __init__(self, missing: List[Hashable]):
        self.missing = list(missing)
        super().__init__(f"The objects were expected but not found: {self.missing!r}")


class PathFindingError(Exception):
    """Base class for errors raised by the shortest-path optimizers."""
    pass


class MissingObject(PathFindingError):
    """The source or target of the query is not an object in the category."""

    def __init__(self, object_id: Hashable):
        self.object_id = object_id
        super().__init__(f"Object {object_id!r} is not in the category")


class NegativeCycle(PathFindingError):
    """A cycle of negative total cost makes the shortest path undefined."""

    def __init__(self, message: str = "There is a cycle of negative costs that prevents shortest path optimization"):
        super().__init__(message)


class InvalidPath(ValueError):
    """Base class for vertex sequences that do not form a valid path."""
    message = "The vertices do not form a valid path"

    def __init__(self, detail: Any = None):
        self.detail = detail
        text = self.message if detail is None else f"{self.message}: {detail}"
        super().__init__(text)


class EmptyPath(InvalidPath):
    message = "The lack of a path should be represented with None"


class MalformedStructure(InvalidPath):
    message = "The path does not alternate object, morphism, ..., object"


class SourceIsNotObject(InvalidPath):
    message = "The source vertex of a step is not an object"


class TargetIsNotObject(InvalidPath):
    message = "The target vertex of a step is not an object"


class InnerIsNotMorphism(InvalidPath):
    message = "The inner vertex of a step is not a morphism"


class InvariantViolation(RuntimeError):
    """An internal invariant was broken. This is a bug in category_paths."""
    pass

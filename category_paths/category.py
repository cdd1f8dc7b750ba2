"""
Categorical Store Module

A Category holds objects and the morphisms between them, and guarantees
referential integrity: every morphism points at objects that exist, and
nothing is ever inserted twice.
"""

from typing import Any, Dict, Hashable, Iterable, Iterator, List, Optional, Set, Tuple
from typing import Protocol, runtime_checkable

from .errors import (
    InvariantViolation,
    MissingObjects,
    MorphismAlreadyInserted,
    ObjectAlreadyInserted,
)
from .morphism import Morphism


@runtime_checkable
class HasId(Protocol):
    """An object richer than its id. Exposes the id as an attribute."""
    id: Hashable


def identify(obj: Any) -> Hashable:
    """Return the id of an object. Objects without an `id` are their own id."""
    if isinstance(obj, HasId):
        return obj.id
    return obj


class Category:
    """
    Represents a category of objects and morphisms with integrity checks.

    Built once through the fallible builder methods and treated as read-only
    by every path query afterwards.

    Attributes:
        objects: Mapping of object id to object
        morphisms: Set of all morphisms
        outbound: Mapping of object id to the morphisms leaving it, in
            insertion order. Present (possibly empty) for every object.
    """

    def __init__(self):
        self._objects: Dict[Hashable, Any] = {}
        self._morphisms: Set[Morphism] = set()
        self._outbound: Dict[Hashable, List[Morphism]] = {}
        self._non_negative = True

    @classmethod
    def of(cls, objects: Iterable[Any], morphisms: Iterable[Morphism]) -> "Category":
        """
        Build a category from objects and morphisms.

        Raises:
            CategoryError: On the first object or morphism that fails to insert
        """
        category = cls()
        category.add_objects(objects)
        category.add_morphisms(morphisms)
        return category

    @classmethod
    def from_morphisms(cls, morphisms: Iterable[Morphism]) -> "Category":
        """
        Build a category whose objects are their own ids.

        Every source and target id is registered as an object before the
        morphisms are inserted.
        """
        morphisms = list(morphisms)
        category = cls()
        for morphism in morphisms:
            for object_id in (morphism.source, morphism.target):
                if object_id not in category._objects:
                    category.add_object(object_id)
        category.add_morphisms(morphisms)
        return category

    def add_objects(self, objects: Iterable[Any]) -> None:
        for obj in objects:
            self.add_object(obj)

    def add_morphisms(self, morphisms: Iterable[Morphism]) -> None:
        for morphism in morphisms:
            self.add_morphism(morphism)

    def add_object(self, obj: Any) -> None:
        """
        Add an object to the category.

        Raises:
            ObjectAlreadyInserted: If an object with the same id exists
        """
        object_id = identify(obj)
        if object_id in self._objects:
            raise ObjectAlreadyInserted(object_id)
        if object_id in self._outbound:
            raise InvariantViolation(
                f"Outbound list for {object_id!r} exists without its object"
            )
        self._objects[object_id] = obj
        self._outbound[object_id] = []

    def verify_morphism(self, morphism: Morphism) -> None:
        """
        Check that a morphism could be inserted without inserting it.

        Raises:
            MorphismAlreadyInserted: If an identical morphism exists
            MissingObjects: If its source or target is not an object
        """
        if morphism in self._morphisms:
            raise MorphismAlreadyInserted(morphism.source, morphism.target)
        missing = [
            object_id
            for object_id in (morphism.source, morphism.target)
            if object_id not in self._objects
        ]
        if missing:
            raise MissingObjects(missing)

    def add_morphism(self, morphism: Morphism) -> None:
        """
        Add a morphism between two existing objects.

        Raises:
            MorphismAlreadyInserted: If an identical morphism exists
            MissingObjects: If its source or target is not an object
        """
        self.verify_morphism(morphism)
        self._morphisms.add(morphism)
        self._outbound[morphism.source].append(morphism)
        self._non_negative = self._non_negative and morphism.non_negative

    def get_object(self, object_id: Hashable) -> Optional[Any]:
        return self._objects.get(object_id)

    def get_outbound(self, object_id: Hashable) -> Optional[List[Morphism]]:
        """Morphisms whose source is the given object, or None if unknown."""
        return self._outbound.get(object_id)

    def require_object(self, object_id: Hashable) -> Any:
        """Get an object that is known to exist. A miss is a defect."""
        try:
            return self._objects[object_id]
        except KeyError:
            raise InvariantViolation(
                f"Object {object_id!r} was expected to be in the category"
            ) from None

    def objects(self) -> Iterator[Tuple[Hashable, Any]]:
        """Iterate (id, object) pairs in insertion order."""
        return iter(self._objects.items())

    def morphisms(self) -> Iterator[Morphism]:
        """Iterate all morphisms, grouped by source in insertion order."""
        for outbound in self._outbound.values():
            yield from outbound

    @property
    def non_negative(self) -> bool:
        """Whether every morphism's metadata promises non-negative costs."""
        return self._non_negative

    def copy(self) -> "Category":
        """Shallow copy. Objects and morphisms are shared, not duplicated."""
        new = Category()
        new._objects = dict(self._objects)
        new._morphisms = set(self._morphisms)
        new._outbound = {k: list(v) for k, v in self._outbound.items()}
        new._non_negative = self._non_negative
        return new

    def __contains__(self, item: Any) -> bool:
        if isinstance(item, Morphism):
            return item in self._morphisms
        return item in self._objects

    def __len__(self) -> int:
        return len(self._objects)

    def __repr__(self):
        return f"Category(objects={len(self._objects)}, morphisms={len(self._morphisms)})"

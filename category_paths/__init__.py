"""
Category Paths - Cost-Optimal Paths Through Categories

A category stores objects and the morphisms between them. Every morphism
carries cost logic: applied to the size of its source object, it returns the
cost of the application and the size that reaches the target. The optimizers
find the cheapest sequence of morphisms between two objects, either with size
accumulation (Dijkstra) or with negative costs (Bellman-Ford).
"""

import logging

__version__ = "0.1.0"

from . import score
from .category import Category, HasId, identify
from .costs import ConstantCost, DeductiveLinearCost, NonNegativeSimpleMorphism, SimpleMorphism
from .errors import (
    CategoryError,
    EmptyPath,
    InnerIsNotMorphism,
    InvalidPath,
    InvariantViolation,
    MalformedStructure,
    MissingObject,
    MissingObjects,
    MorphismAlreadyInserted,
    NegativeCycle,
    ObjectAlreadyInserted,
    PathFindingError,
    SourceIsNotObject,
    TargetIsNotObject,
)
from .morphism import ApplyMorphism, Morphism, MorphismOutput, NonNegativeCost
from .optimizer import Accumulating, Negatable, NegatableInfallible, Optimizer
from .path import (
    AppliedCompositeMorphism,
    AppliedMorphism,
    Path,
    WellFormedPath,
    path_from_morphisms,
    reapply,
)
from .vertex import MorphismVertex, ObjectVertex, Vertex

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Category",
    "HasId",
    "identify",
    "Morphism",
    "MorphismOutput",
    "ApplyMorphism",
    "NonNegativeCost",
    "ConstantCost",
    "DeductiveLinearCost",
    "SimpleMorphism",
    "NonNegativeSimpleMorphism",
    "Vertex",
    "ObjectVertex",
    "MorphismVertex",
    "Path",
    "WellFormedPath",
    "AppliedMorphism",
    "AppliedCompositeMorphism",
    "path_from_morphisms",
    "reapply",
    "Optimizer",
    "Accumulating",
    "Negatable",
    "NegatableInfallible",
    "score",
    "CategoryError",
    "ObjectAlreadyInserted",
    "MorphismAlreadyInserted",
    "MissingObjects",
    "PathFindingError",
    "MissingObject",
    "NegativeCycle",
    "InvalidPath",
    "EmptyPath",
    "MalformedStructure",
    "SourceIsNotObject",
    "TargetIsNotObject",
    "InnerIsNotMorphism",
    "InvariantViolation",
]

"""
Bellman-Ford Over a Materialised Category

Bellman-Ford needs every edge weight up front, so the category is turned into
an explicit graph whose nodes are object vertices and morphism vertices. Every
morphism is evaluated at the same fixed input size: a weight that depended on
the size produced by earlier steps would depend on the path taken, which the
algorithm cannot express. Sizes therefore do not accumulate here.

Relaxation is vectorised with numpy over an edge list, one min-plus round per
iteration, in the style of a semiring shortest-path:

    dist[j] = min(dist[j], min_i(dist[i] + w[i, j]))
"""

import logging
from typing import Any, Dict, Hashable, List, Optional
from dataclasses import dataclass

import numpy as np

from .category import Category
from .constants import INFINITE_COST, NO_PREDECESSOR
from .errors import InvariantViolation, MissingObject, NegativeCycle
from .vertex import MorphismVertex, ObjectVertex, Vertex

logger = logging.getLogger(__name__)


class CategoryGraph:
    """
    Explicit node/edge graph of a category with weights fixed at one size.

    Nodes are lean vertices: every ObjectVertex and MorphismVertex carries
    the same input_size. Each morphism contributes two edges,
    source object -> morphism (weight 0) and morphism -> target object
    (weight apply(input_size).cost).

    Attributes:
        nodes: Index -> lean vertex
        object_index: Object id -> node index
        edge_sources, edge_targets: Node indices of every edge
        edge_weights: float64 weight of every edge
    """

    def __init__(self, category: Category, input_size: Any):
        self.category = category
        self.input_size = input_size
        self.nodes: List[Vertex] = []
        self.object_index: Dict[Hashable, int] = {}

        for object_id, _ in category.objects():
            self.object_index[object_id] = len(self.nodes)
            self.nodes.append(ObjectVertex(object_id, input_size))

        sources: List[int] = []
        targets: List[int] = []
        weights: List[float] = []
        for morphism in category.morphisms():
            index = len(self.nodes)
            self.nodes.append(MorphismVertex(morphism, input_size))
            cost = morphism.apply(input_size).cost
            sources.extend((self.object_index[morphism.source], index))
            targets.extend((index, self.object_index[morphism.target]))
            weights.extend((0.0, float(cost)))

        self.edge_sources = np.asarray(sources, dtype=np.intp)
        self.edge_targets = np.asarray(targets, dtype=np.intp)
        self.edge_weights = np.asarray(weights, dtype=np.float64)

    @property
    def num_nodes(self) -> int:
        return len(self.nodes)

    @property
    def num_edges(self) -> int:
        return len(self.edge_weights)

    def index_of(self, object_id: Hashable) -> int:
        """
        Raises:
            MissingObject: If the id is not an object of the category
        """
        try:
            return self.object_index[object_id]
        except KeyError:
            raise MissingObject(object_id) from None

    def bellman_ford(self, source_id: Hashable) -> "ShortestPathTree":
        """
        Single-source shortest paths from an object.

        Raises:
            MissingObject: If the source is not an object of the category
            NegativeCycle: If a negative cycle is reachable from the source
        """
        source = self.index_of(source_id)
        n = self.num_nodes

        dist = np.full(n, INFINITE_COST, dtype=np.float64)
        pred = np.full(n, NO_PREDECESSOR, dtype=np.intp)
        dist[source] = 0.0

        rounds = 0
        for _ in range(max(n - 1, 0)):
            rounds += 1
            if not self._relax(dist, pred):
                break
        else:
            if self.num_edges and self._relax(dist.copy(), pred.copy()):
                logger.debug("negative cycle reachable from %r", source_id)
                raise NegativeCycle()

        logger.debug("bellman-ford converged in %d rounds over %d nodes", rounds, n)
        return ShortestPathTree(self, source, dist, pred)

    def _relax(self, dist: np.ndarray, pred: np.ndarray) -> bool:
        """One synchronous relaxation round. Returns whether anything improved."""
        if not self.num_edges:
            return False
        candidate = dist[self.edge_sources] + self.edge_weights

        # Cheapest incoming edge per target: sort by (target, candidate) and
        # keep the first entry of every target run
        order = np.lexsort((candidate, self.edge_targets))
        sorted_targets = self.edge_targets[order]
        first = np.ones(len(order), dtype=bool)
        first[1:] = sorted_targets[1:] != sorted_targets[:-1]
        best_edges = order[first]

        best_targets = self.edge_targets[best_edges]
        best_values = candidate[best_edges]
        improved = best_values < dist[best_targets]
        if not improved.any():
            return False

        dist[best_targets[improved]] = best_values[improved]
        pred[best_targets[improved]] = self.edge_sources[best_edges[improved]]
        return True


@dataclass
class ShortestPathTree:
    """Distances and predecessors from one source, as computed by Bellman-Ford."""
    graph: CategoryGraph
    source: int
    distances: np.ndarray
    predecessors: np.ndarray

    def distance_to(self, target_id: Hashable) -> float:
        """
        Non-accumulated cost of the cheapest route (inf if unreachable).

        Raises:
            MissingObject: If the target is not an object of the category
        """
        return float(self.distances[self.graph.index_of(target_id)])

    def route_to(self, target_id: Hashable) -> Optional[List[Vertex]]:
        """
        Lean vertices from the source to the target.

        Returns None if the target is unreachable or is the source itself,
        since a path must contain at least one morphism.

        Raises:
            MissingObject: If the target is not an object of the category
        """
        target = self.graph.index_of(target_id)
        if target == self.source or self.predecessors[target] == NO_PREDECESSOR:
            return None

        indices = [target]
        while indices[-1] != self.source:
            previous = int(self.predecessors[indices[-1]])
            if previous == NO_PREDECESSOR or len(indices) > self.graph.num_nodes:
                raise InvariantViolation(
                    f"Broken predecessor chain from {target_id!r} back to the source"
                )
            indices.append(previous)
        indices.reverse()
        return [self.graph.nodes[i] for i in indices]

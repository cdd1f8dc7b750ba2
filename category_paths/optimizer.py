"""
Shortest Path Optimizers

Three strategies with the same query interface:

- Accumulating: Dijkstra with size accumulation. Exact, but every morphism must
  carry the NonNegativeCost marker.
- Negatable: Bellman-Ford at a fixed input size, so negative costs are fine but
  sizes do not accumulate while searching. The chosen route is then re-applied
  with accumulation and reported with its true sizes and cost.
- NegatableInfallible: Negatable, falling back to an inaccurate
  blacklist-guarded Dijkstra when a negative cycle is found. Never raises a
  PathFindingError.

Example:
    >>> optimizer = Accumulating()
    >>> path = optimizer.shortest_path(category, "A", "D", 10)
    >>> print(path.to_composite().pretty())
"""

import logging
from typing import Any, Callable, Dict, Hashable, List, Optional, Sequence, Tuple

from . import score as scores
from .bellman_ford import CategoryGraph, ShortestPathTree
from .category import Category
from .constants import DEFAULT_K, ZERO_COST
from .dijkstra import (
    inaccurate_k_shortest_paths_with_dijkstra,
    inaccurate_shortest_single_path_with_dijkstra,
    shortest_single_path_with_dijkstra,
)
from .errors import MissingObject, NegativeCycle, PathFindingError
from .path import WellFormedPath, reapply, resolved_path, sum_costs

logger = logging.getLogger(__name__)

Source = Tuple[Hashable, Any]


class Optimizer:
    """
    Base class of the shortest-path strategies.

    Args:
        zero: Additive identity of the cost type
    """

    def __init__(self, zero: Any = ZERO_COST):
        self.zero = zero

    def shortest_path(self,
                      category: Category,
                      source: Hashable,
                      target: Hashable,
                      input_size: Any) -> Optional[WellFormedPath]:
        """Cheapest path from source to target, or None if there is none."""
        raise NotImplementedError

    def shortest_paths(self,
                       category: Category,
                       sources: Sequence[Source],
                       targets: Sequence[Hashable]) -> List[WellFormedPath]:
        """
        Cheapest path for each (source, input size) and the target at the same
        position. Pairs without a path are left out.

        Raises:
            ValueError: If sources and targets differ in length
        """
        _check_pairing(sources, targets)
        paths = []
        for (source, input_size), target in zip(sources, targets):
            path = self.shortest_path(category, source, target, input_size)
            if path is not None:
                paths.append(path)
        return paths

    def ranked_paths(self,
                     category: Category,
                     sources: Sequence[Source],
                     targets: Sequence[Hashable],
                     score: Callable[[WellFormedPath], Any] = scores.cost) -> List[WellFormedPath]:
        """
        Like shortest_paths, with each cost replaced by score(path) and the
        paths sorted by that score, lowest first.
        """
        ranked = [
            path.replace_cost(score(path))[0]
            for path in self.shortest_paths(category, sources, targets)
        ]
        ranked.sort(key=lambda path: path.cost)
        return ranked


def _check_pairing(sources, targets):
    if len(sources) != len(targets):
        raise ValueError(
            f"sources and targets are paired by position, got {len(sources)} "
            f"sources and {len(targets)} targets"
        )


class Accumulating(Optimizer):
    """
    Dijkstra over the dual-vertex graph. Each morphism is applied to the size
    produced by the previous one.
    """

    def shortest_path(self, category, source, target, input_size):
        """
        Raises:
            TypeError: If a morphism's metadata lacks the NonNegativeCost marker
        """
        if not category.non_negative:
            raise TypeError(
                "Accumulating requires every morphism's metadata to inherit "
                "NonNegativeCost; use Negatable or NegatableInfallible instead"
            )
        return shortest_single_path_with_dijkstra(
            category, source, target, input_size, self.zero
        )


class Negatable(Optimizer):
    """
    Bellman-Ford with every morphism costed at the query's input size.

    The route is chosen without accumulation; the returned path re-applies it
    with accumulation, so its sizes and cost are the real ones. The fixed-size
    estimate is available from CategoryGraph(category, size).bellman_ford(...).
    """

    def shortest_path(self, category, source, target, input_size):
        """
        Raises:
            MissingObject: If source or target is not in the category
            NegativeCycle: If a negative cycle is reachable from the source
        """
        for object_id in (source, target):
            if object_id not in category:
                raise MissingObject(object_id)
        if source == target:
            return None
        tree = CategoryGraph(category, input_size).bellman_ford(source)
        return self._path_in(category, tree, target, input_size)

    def shortest_paths(self, category, sources, targets):
        """Runs Bellman-Ford once for every distinct (source, input size)."""
        _check_pairing(sources, targets)
        trees: Dict[Source, ShortestPathTree] = {}
        paths = []
        for (source, input_size), target in zip(sources, targets):
            key = (source, input_size)
            if key not in trees:
                trees[key] = CategoryGraph(category, input_size).bellman_ford(source)
            path = self._path_in(category, trees[key], target, input_size)
            if path is not None:
                paths.append(path)
        return paths

    def shortest_paths_from(self,
                            category: Category,
                            source: Hashable,
                            targets: Sequence[Hashable],
                            input_size: Any) -> Dict[Hashable, WellFormedPath]:
        """
        Cheapest path from one source to each target, from a single
        Bellman-Ford run. Unreachable targets are left out.
        """
        tree = CategoryGraph(category, input_size).bellman_ford(source)
        paths = {}
        for target in targets:
            path = self._path_in(category, tree, target, input_size)
            if path is not None:
                paths[target] = path
        return paths

    def _path_in(self, category, tree, target, input_size):
        route = tree.route_to(target)
        if route is None:
            return None
        vertices, step_costs = reapply(route, input_size)
        return resolved_path(category, vertices, sum_costs(step_costs, self.zero))


class NegatableInfallible(Negatable):
    """
    Negatable that never raises a PathFindingError.

    A missing object yields None. A negative cycle switches to the inaccurate
    Dijkstra, which may return a sub-optimal path.
    """

    def shortest_path(self, category, source, target, input_size):
        try:
            return super().shortest_path(category, source, target, input_size)
        except MissingObject:
            return None
        except NegativeCycle:
            logger.info(
                "negative cycle from %r, falling back to inaccurate dijkstra", source
            )
            return inaccurate_shortest_single_path_with_dijkstra(
                category, source, target, input_size, self.zero
            )

    def shortest_paths(self, category, sources, targets):
        try:
            return super().shortest_paths(category, sources, targets)
        except PathFindingError:
            return Optimizer.shortest_paths(self, category, sources, targets)

    def shortest_paths_from(self, category, source, targets, input_size):
        try:
            return super().shortest_paths_from(category, source, targets, input_size)
        except PathFindingError:
            paths = {}
            for target in targets:
                path = self.shortest_path(category, source, target, input_size)
                if path is not None:
                    paths[target] = path
            return paths

    def k_shortest_paths(self,
                         category: Category,
                         source: Hashable,
                         target: Hashable,
                         input_size: Any,
                         k: int = DEFAULT_K) -> List[WellFormedPath]:
        """Up to k paths by Yen's algorithm over the inaccurate Dijkstra."""
        return inaccurate_k_shortest_paths_with_dijkstra(
            category, source, target, input_size, k, self.zero
        )

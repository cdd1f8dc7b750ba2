"""
Dijkstra Over a Category

Category-level entry points for the heapq searches in `search`, run on the
dual-vertex graph so that sizes accumulate along the way.

- shortest_single_path_with_dijkstra: exact, needs non-negative costs
- inaccurate_shortest_single_path_with_dijkstra: any costs, may be sub-optimal
- inaccurate_k_shortest_paths_with_dijkstra: Yen's k cheapest paths, any costs

The inaccurate variants carry a blacklist of object ids that have already been
expanded, so no object is expanded twice and the search terminates even with
negative cycles.
"""

from typing import Any, Hashable, List, Optional

from .category import Category
from .constants import DEFAULT_K, ZERO_COST
from .path import WellFormedPath, resolved_path
from .search import dijkstra, yen
from .vertex import ObjectVertex


def _start(category: Category, source: Hashable, target: Hashable, input_size: Any):
    if source == target:
        return None
    if source not in category or target not in category:
        return None
    return ObjectVertex(source, input_size)


def shortest_single_path_with_dijkstra(category: Category,
                                       source: Hashable,
                                       target: Hashable,
                                       input_size: Any,
                                       zero: Any = ZERO_COST) -> Optional[WellFormedPath]:
    """
    Cheapest path from source to target with size accumulation.

    Correct only if every morphism cost is non-negative. Returns None if
    source or target is absent, if they are equal, or if the target is
    unreachable.
    """
    start = _start(category, source, target, input_size)
    if start is None:
        return None
    found = dijkstra(
        start,
        lambda vertex: vertex.successors(category, zero),
        lambda vertex: vertex.is_object_with_id(target),
        zero,
    )
    if found is None:
        return None
    vertices, cost = found
    return resolved_path(category, vertices, cost)


def inaccurate_shortest_single_path_with_dijkstra(category: Category,
                                                  source: Hashable,
                                                  target: Hashable,
                                                  input_size: Any,
                                                  zero: Any = ZERO_COST) -> Optional[WellFormedPath]:
    """Blacklist-guarded accumulating Dijkstra. Terminates with any costs."""
    paths = inaccurate_k_shortest_paths_with_dijkstra(
        category, source, target, input_size, k=1, zero=zero
    )
    return paths[0] if paths else None


def inaccurate_k_shortest_paths_with_dijkstra(category: Category,
                                              source: Hashable,
                                              target: Hashable,
                                              input_size: Any,
                                              k: int = DEFAULT_K,
                                              zero: Any = ZERO_COST) -> List[WellFormedPath]:
    """
    Up to k loopless paths, cheapest first, using Yen's algorithm over the
    blacklist-guarded expansion.

    With negative costs the order and the selection are best effort: each spur
    search is a Dijkstra and the blacklist may hide cheaper routes.

    Raises:
        ValueError: If k < 1
    """
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")
    start = _start(category, source, target, input_size)
    if start is None:
        return []

    def make_successors():
        blacklist = set()
        return lambda vertex: vertex.successors(category, zero, blacklist)

    routes = yen(
        start,
        make_successors,
        lambda vertex: vertex.is_object_with_id(target),
        k,
        zero,
    )
    paths = [resolved_path(category, vertices, cost) for vertices, cost in routes]
    paths.sort(key=lambda path: path.cost)
    return paths

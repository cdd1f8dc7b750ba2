"""
Implicit Graph Search

Shortest-path searches over graphs that are never materialised: the graph is
given by a start node, a successor function returning (node, step cost) pairs,
and a success predicate. Nodes must be hashable and costs totally ordered and
additive.

Provides:
- dijkstra: single cheapest path
- yen: up to k cheapest loopless paths (Yen's algorithm)
"""

import heapq
import itertools
import logging
from typing import Any, Callable, Dict, Hashable, List, Optional, Set, Tuple

from .constants import ZERO_COST

logger = logging.getLogger(__name__)

Node = Hashable
SuccessorFn = Callable[[Node], List[Tuple[Node, Any]]]
Route = Tuple[List[Node], Any]


def dijkstra(start: Node,
             successors: SuccessorFn,
             success: Callable[[Node], bool],
             zero: Any = ZERO_COST) -> Optional[Route]:
    """
    Find the cheapest path from start to the first node accepted by success.

    Correct only when no step cost is negative. With negative costs it still
    terminates on finite graphs but may return a sub-optimal path.

    Returns:
        (nodes from start to goal, total cost) or None if no goal is reachable
    """
    found = _dijkstra(start, successors, success, zero)
    if found is None:
        return None
    nodes, cumulative = found
    return nodes, cumulative[-1]


def _dijkstra(start, successors, success, zero):
    """Dijkstra returning the path and the cumulative cost at every node."""
    counter = itertools.count()
    best: Dict[Node, Any] = {start: zero}
    parents: Dict[Node, Optional[Node]] = {start: None}
    closed: Set[Node] = set()
    heap = [(zero, next(counter), start)]
    expanded = 0

    while heap:
        cost, _, node = heapq.heappop(heap)
        if node in closed:
            continue
        if success(node):
            logger.debug("dijkstra reached goal after expanding %d nodes", expanded)
            return _rebuild(parents, best, node)
        closed.add(node)
        expanded += 1
        for neighbor, step in successors(node):
            if neighbor in closed:
                continue
            new_cost = cost + step
            if neighbor not in best or new_cost < best[neighbor]:
                best[neighbor] = new_cost
                parents[neighbor] = node
                heapq.heappush(heap, (new_cost, next(counter), neighbor))

    logger.debug("dijkstra exhausted after expanding %d nodes", expanded)
    return None


def _rebuild(parents, best, goal):
    nodes = [goal]
    while parents[nodes[-1]] is not None:
        nodes.append(parents[nodes[-1]])
    nodes.reverse()
    return nodes, [best[node] for node in nodes]


def yen(start: Node,
        make_successors: Callable[[], SuccessorFn],
        success: Callable[[Node], bool],
        k: int,
        zero: Any = ZERO_COST) -> List[Route]:
    """
    Find up to k cheapest loopless paths from start to a goal (Yen's algorithm).

    Args:
        start: Start node
        make_successors: Factory returning a fresh successor function. It is
            called once per inner Dijkstra run so stateful successor functions
            (e.g. blacklists) start clean every time.
        success: Goal predicate
        k: Maximum number of paths
        zero: Additive identity of the cost type

    Returns:
        List of (nodes, cost), cheapest first
    """
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")

    first = _dijkstra(start, make_successors(), success, zero)
    if first is None:
        return []

    routes = [first]
    seen = {tuple(first[0])}
    counter = itertools.count()
    candidates: List[Tuple[Any, int, List[Node], List[Any]]] = []

    while len(routes) < k:
        previous, previous_costs = routes[-1]
        for i in range(len(previous) - 1):
            spur = previous[i]
            root = previous[:i + 1]
            removed_edges = {
                (nodes[i], nodes[i + 1])
                for nodes, _ in routes
                if len(nodes) > i + 1 and nodes[:i + 1] == root
            }
            removed_nodes = set(root[:-1])
            spur_result = _dijkstra(
                spur,
                _restricted(make_successors(), removed_edges, removed_nodes),
                success,
                zero,
            )
            if spur_result is None:
                continue
            spur_nodes, spur_costs = spur_result
            nodes = root[:-1] + spur_nodes
            key = tuple(nodes)
            if key in seen:
                continue
            seen.add(key)
            costs = previous_costs[:i] + [previous_costs[i] + c for c in spur_costs]
            heapq.heappush(candidates, (costs[-1], next(counter), nodes, costs))

        if not candidates:
            break
        _, _, nodes, costs = heapq.heappop(candidates)
        routes.append((nodes, costs))

    logger.debug("yen found %d of %d requested paths", len(routes), k)
    return [(nodes, costs[-1]) for nodes, costs in routes]


def _restricted(successors, removed_edges, removed_nodes):
    def restricted(node):
        return [
            (neighbor, step)
            for neighbor, step in successors(node)
            if neighbor not in removed_nodes and (node, neighbor) not in removed_edges
        ]
    return restricted

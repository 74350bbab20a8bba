"""
Generic graph search over implicit graphs.

A graph is never built up front. Each call takes a start node and a neighbor
function, and owns its visited set, distance map and heap for the duration of
the call. Nodes may be any hashable value; the priority-queue searches also
need nodes to be orderable, since heap ties fall back to comparing nodes.

Unweighted searches take ``node -> iterable of nodes``. Weighted searches take
``node -> iterable of (neighbor, cost)`` with non-negative costs.

"Not found" is always reported as None, never raised.
"""

from __future__ import annotations

import heapq
import logging
from collections import deque
from typing import Callable, Hashable, Iterable, TypeVar

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)

# Type aliases for caller-supplied callbacks
Neighbors = Callable[[N], Iterable[N]]
WeightedNeighbors = Callable[[N], Iterable[tuple[N, int]]]
GoalFn = Callable[[N], bool]
Heuristic = Callable[[N], int]


# =============================================================================
# Breadth-first search
# =============================================================================


def breadth_first_search(
    start: N,
    neighbors: Neighbors[N],
    is_goal: GoalFn[N],
    *,
    trace: bool = False,
) -> tuple[N, int] | None:
    """
    Find the goal nearest to ``start`` by hop count.

    Args:
        start: Node to search from
        neighbors: Returns the nodes reachable in one hop
        is_goal: Predicate identifying goal nodes
        trace: Log every expanded node at DEBUG

    Returns:
        (goal, hops) for the first goal reached, or None if the reachable
        graph holds no goal
    """
    visited: set[N] = {start}
    queue: deque[tuple[N, int]] = deque([(start, 0)])

    while queue:
        node, hops = queue.popleft()
        if trace:
            logger.debug("bfs: expand %s at depth %d", node, hops)
        if is_goal(node):
            if trace:
                logger.info("bfs: reached %s in %d hops (%d visited)", node, hops, len(visited))
            return (node, hops)

        for neighbor in neighbors(node):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append((neighbor, hops + 1))

    if trace:
        logger.info("bfs: frontier exhausted after %d nodes", len(visited))
    return None


def search_for_goal(
    start: N,
    neighbors: Neighbors[N],
    is_goal: GoalFn[N],
    *,
    trace: bool = False,
) -> N | None:
    """Return the first goal reached breadth-first, or None."""
    result = breadth_first_search(start, neighbors, is_goal, trace=trace)
    return None if result is None else result[0]


def has_path(
    start: N,
    neighbors: Neighbors[N],
    is_goal: GoalFn[N],
    *,
    trace: bool = False,
) -> bool:
    return search_for_goal(start, neighbors, is_goal, trace=trace) is not None


# =============================================================================
# Dijkstra
# =============================================================================


def dijkstra(
    start: N,
    neighbors: WeightedNeighbors[N],
    is_goal: GoalFn[N],
    *,
    trace: bool = False,
) -> tuple[N, int] | None:
    """
    Cheapest path from ``start`` to any goal.

    Nodes are popped in non-decreasing distance, so the first goal popped
    carries the minimum cost. Edge costs must be non-negative.

    Returns:
        (goal, cost) or None if no goal is reachable
    """
    dist: dict[N, int] = {start: 0}
    visited: set[N] = set()
    heap: list[tuple[int, N]] = [(0, start)]

    while heap:
        d, node = heapq.heappop(heap)
        if node in visited:
            continue
        visited.add(node)
        if trace:
            logger.debug("dijkstra: expand %s at %d", node, d)

        if is_goal(node):
            if trace:
                logger.info("dijkstra: reached %s at cost %d (%d expanded)", node, d, len(visited))
            return (node, d)

        for neighbor, cost in neighbors(node):
            if neighbor in visited:
                continue
            candidate = d + cost
            if neighbor not in dist or candidate < dist[neighbor]:
                dist[neighbor] = candidate
                heapq.heappush(heap, (candidate, neighbor))

    if trace:
        logger.info("dijkstra: frontier exhausted after %d nodes", len(visited))
    return None


def dijkstra_all_shortest_paths(
    start: N,
    neighbors: WeightedNeighbors[N],
    is_goal: GoalFn[N],
    *,
    trace: bool = False,
) -> tuple[list[list[N]], int] | None:
    """
    Every minimum-cost path from ``start`` to the first goal popped.

    Each node keeps all predecessors that reach it at its best known
    distance. A strictly shorter distance discards the old predecessors; an
    equal one adds to them. Paths are expanded from the predecessor lists once
    the goal is popped, so the result can grow with the number of optimal
    paths.

    Returns:
        (paths, cost) where each path runs from ``start`` to the goal
        inclusive, or None if no goal is reachable
    """
    dist: dict[N, int] = {start: 0}
    predecessors: dict[N, list[N]] = {start: []}
    visited: set[N] = set()
    heap: list[tuple[int, N]] = [(0, start)]

    while heap:
        d, node = heapq.heappop(heap)
        if node in visited:
            continue
        visited.add(node)
        if trace:
            logger.debug(
                "dijkstra_all: expand %s at %d via %d predecessors",
                node,
                d,
                len(predecessors[node]),
            )

        if is_goal(node):
            paths = _expand_paths(start, node, predecessors)
            if trace:
                logger.info("dijkstra_all: %d paths to %s at cost %d", len(paths), node, d)
            return (paths, d)

        for neighbor, cost in neighbors(node):
            if neighbor in visited:
                continue
            candidate = d + cost
            if neighbor not in dist or candidate < dist[neighbor]:
                dist[neighbor] = candidate
                predecessors[neighbor] = [node]
                heapq.heappush(heap, (candidate, neighbor))
            elif candidate == dist[neighbor] and node not in predecessors[neighbor]:
                predecessors[neighbor].append(node)

    if trace:
        logger.info("dijkstra_all: frontier exhausted after %d nodes", len(visited))
    return None


def _expand_paths(start: N, goal: N, predecessors: dict[N, list[N]]) -> list[list[N]]:
    """Walk the predecessor DAG back from ``goal``, yielding start-to-goal paths."""
    paths: list[list[N]] = []
    stack: list[tuple[N, list[N]]] = [(goal, [goal])]

    while stack:
        node, reversed_path = stack.pop()
        if node == start:
            paths.append(reversed_path[::-1])
            continue
        # Reversed so paths come out in predecessor discovery order
        for pred in reversed(predecessors[node]):
            stack.append((pred, reversed_path + [pred]))

    return paths


def distance_to_goal(
    goal: N,
    neighbors: WeightedNeighbors[N],
    *,
    trace: bool = False,
) -> dict[N, int]:
    """
    Shortest distance from every node that can reach ``goal``.

    Runs Dijkstra outward from ``goal`` until the frontier is empty.
    ``neighbors`` must describe reversed edges: for a node, the nodes that can
    step *into* it and the cost of that step. On undirected graphs this is the
    ordinary neighbor function.

    Returns:
        Mapping of node to its distance from goal (``goal`` maps to 0)
    """
    distances: dict[N, int] = {}
    best: dict[N, int] = {goal: 0}
    heap: list[tuple[int, N]] = [(0, goal)]

    while heap:
        d, node = heapq.heappop(heap)
        if node in distances:
            continue
        distances[node] = d
        if trace:
            logger.debug("distance_to_goal: settle %s at %d", node, d)

        for neighbor, cost in neighbors(node):
            if neighbor in distances:
                continue
            candidate = d + cost
            if neighbor not in best or candidate < best[neighbor]:
                best[neighbor] = candidate
                heapq.heappush(heap, (candidate, neighbor))

    if trace:
        logger.info("distance_to_goal: %d nodes can reach %s", len(distances), goal)
    return distances


# =============================================================================
# A*
# =============================================================================


def astar(
    start: N,
    neighbors: WeightedNeighbors[N],
    heuristic: Heuristic[N],
    is_goal: GoalFn[N],
    *,
    trace: bool = False,
) -> tuple[N, int] | None:
    """
    Cheapest path from ``start`` to any goal, guided by ``heuristic``.

    The frontier is ordered by cost so far plus ``heuristic(node)``. The
    result is optimal whenever the heuristic never overestimates the remaining
    cost. A node whose cost improves after it was expanded is expanded again,
    so an admissible but inconsistent heuristic is still safe.

    Returns:
        (goal, cost) or None if no goal is reachable
    """
    best: dict[N, int] = {start: 0}
    heap: list[tuple[int, int, N]] = [(heuristic(start), 0, start)]
    expanded = 0

    while heap:
        _, g, node = heapq.heappop(heap)
        if g > best[node]:
            continue  # stale entry
        expanded += 1
        if trace:
            logger.debug("astar: expand %s at %d", node, g)

        if is_goal(node):
            if trace:
                logger.info("astar: reached %s at cost %d (%d expansions)", node, g, expanded)
            return (node, g)

        for neighbor, cost in neighbors(node):
            candidate = g + cost
            if neighbor not in best or candidate < best[neighbor]:
                best[neighbor] = candidate
                heapq.heappush(heap, (candidate + heuristic(neighbor), candidate, neighbor))

    if trace:
        logger.info("astar: frontier exhausted after %d expansions", expanded)
    return None

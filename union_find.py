"""
Disjoint-set forest over grid points, for extracting connected regions.
"""

from __future__ import annotations

import logging
from typing import Hashable, Iterable

from grid import Grid
from grid_types import CARDINAL_DIRECTIONS, Point

logger = logging.getLogger(__name__)


class UnionFind:
    """
    Union-find keyed by Point.

    ``rank`` holds the number of points under each root; the smaller component
    is attached beneath the larger one and the survivor's count absorbs it.
    """

    def __init__(self, points: Iterable[Point]) -> None:
        self.parent: dict[Point, Point] = {}
        self.rank: dict[Point, int] = {}
        for p in points:
            self.parent[p] = p
            self.rank[p] = 1

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, point: Point) -> Point:
        """
        Return the root of ``point``'s component, compressing the path walked.

        Raises:
            KeyError: If ``point`` is not tracked
        """
        root = point
        while self.parent[root] != root:
            root = self.parent[root]

        # Point everything on the walked path straight at the root
        current = point
        while current != root:
            next_point = self.parent[current]
            self.parent[current] = root
            current = next_point

        return root

    def union(self, a: Point, b: Point) -> None:
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return

        if self.rank[root_a] < self.rank[root_b]:
            root_a, root_b = root_b, root_a

        self.parent[root_b] = root_a
        self.rank[root_a] += self.rank[root_b]

    def connected(self, a: Point, b: Point) -> bool:
        return self.find(a) == self.find(b)

    def connected_components(self) -> list[set[Point]]:
        """Group every tracked point by its root."""
        groups: dict[Point, set[Point]] = {}
        for p in list(self.parent):
            groups.setdefault(self.find(p), set()).add(p)
        return list(groups.values())


def grid_regions(grid: Grid[Hashable]) -> list[set[Point]]:
    """
    Split a grid into maximal regions of equal, 4-adjacent cells.

    Example:
        AAB
        ABB   ->  [{(0,0), (0,1), (1,0)}, {(0,2), (1,1), (1,2)}]
    """
    uf = UnionFind(grid.all_points())
    for point in grid.all_points():
        value = grid.get(point)
        # Only look forward (E, S); W and N were covered from the other side
        for direction in CARDINAL_DIRECTIONS[1:3]:
            neighbor = point.move_direction(direction)
            if grid.in_bounds(neighbor) and grid.get(neighbor) == value:
                uf.union(point, neighbor)

    regions = uf.connected_components()
    logger.debug("grid_regions: %d regions in %r", len(regions), grid)
    return regions

"""Tests for union_find module."""

import pytest

from grid import Grid
from grid_parser import parse_grid
from grid_types import Point
from union_find import UnionFind, grid_regions


def line_points(n: int) -> list[Point]:
    return [Point(0, c) for c in range(n)]


def assert_partition(components: list[set[Point]], points: list[Point]) -> None:
    """Components are disjoint and cover every point exactly once."""
    seen: set[Point] = set()
    for component in components:
        assert component
        assert seen.isdisjoint(component)
        seen |= component
    assert seen == set(points)


# =============================================================================
# Test UnionFind
# =============================================================================


class TestUnionFind:
    """Tests for the disjoint-set forest."""

    def test_initial_singletons(self) -> None:
        """Every point starts in its own component."""
        points = line_points(4)
        uf = UnionFind(points)
        assert len(uf) == 4
        for p in points:
            assert uf.find(p) == p
        assert sorted(len(c) for c in uf.connected_components()) == [1, 1, 1, 1]

    def test_union_joins(self) -> None:
        """After union two points share a root."""
        a, b, c = line_points(3)
        uf = UnionFind([a, b, c])
        uf.union(a, b)
        assert uf.connected(a, b)
        assert not uf.connected(a, c)

    def test_union_self_is_noop(self) -> None:
        """Unioning a point with itself changes nothing."""
        a, b = line_points(2)
        uf = UnionFind([a, b])
        uf.union(a, a)
        assert uf.find(a) == a
        assert uf.rank[a] == 1
        assert len(uf.connected_components()) == 2

    def test_union_already_joined_is_noop(self) -> None:
        """Repeating a union leaves the counts unchanged."""
        a, b = line_points(2)
        uf = UnionFind([a, b])
        uf.union(a, b)
        root = uf.find(a)
        uf.union(b, a)
        assert uf.find(a) == root
        assert uf.rank[root] == 2

    def test_smaller_attaches_under_larger(self) -> None:
        """The larger component's root survives a union."""
        a, b, c, d = line_points(4)
        uf = UnionFind([a, b, c, d])
        uf.union(a, b)
        uf.union(a, c)
        big_root = uf.find(a)
        uf.union(d, a)
        assert uf.find(d) == big_root
        assert uf.rank[big_root] == 4

    def test_transitive(self) -> None:
        """Chained unions connect the ends."""
        points = line_points(6)
        uf = UnionFind(points)
        for left, right in zip(points, points[1:]):
            uf.union(left, right)
        assert uf.connected(points[0], points[-1])
        assert len(uf.connected_components()) == 1

    def test_path_compression(self) -> None:
        """find() leaves every walked point pointing at the root."""
        a, b, c, d = line_points(4)
        uf = UnionFind([a, b, c, d])
        # Build a chain d -> c -> b -> a by hand
        uf.parent[b] = a
        uf.parent[c] = b
        uf.parent[d] = c
        assert uf.find(d) == a
        assert uf.parent[d] == a
        assert uf.parent[c] == a
        assert uf.parent[b] == a

    def test_untracked_point(self) -> None:
        """find() on an unknown point raises KeyError."""
        uf = UnionFind(line_points(2))
        with pytest.raises(KeyError):
            uf.find(Point(9, 9))

    def test_components_partition(self) -> None:
        """connected_components() is an exact partition."""
        points = [Point(r, c) for r in range(4) for c in range(4)]
        uf = UnionFind(points)
        for p in points:
            if (p.row + p.col) % 3 == 0:
                uf.union(p, points[0])
            elif p.col == 3:
                uf.union(p, Point(0, 3))
        components = uf.connected_components()
        assert_partition(components, points)
        assert len(components) == len({uf.find(p) for p in points})


# =============================================================================
# Test Grid Regions
# =============================================================================


class TestGridRegions:
    """Tests for splitting a grid into equal-valued regions."""

    def test_two_regions(self) -> None:
        """Adjacent equal cells group together."""
        grid = parse_grid("""
            AAB
            ABB
        """)
        regions = grid_regions(grid)
        assert sorted(regions, key=min) == [
            {Point(0, 0), Point(0, 1), Point(1, 0)},
            {Point(0, 2), Point(1, 1), Point(1, 2)},
        ]

    def test_diagonal_not_adjacent(self) -> None:
        """Diagonal neighbors are separate regions."""
        grid = Grid([["X", "O"], ["O", "X"]])
        assert len(grid_regions(grid)) == 4

    def test_enclosed_region(self) -> None:
        """Equal values separated by another region stay apart."""
        grid = parse_grid("""
            OOOOO
            OXOXO
            OOOOO
            OXOXO
            OOOOO
        """)
        regions = grid_regions(grid)
        sizes = sorted(len(r) for r in regions)
        assert sizes == [1, 1, 1, 1, 21]
        assert_partition(regions, list(grid.all_points()))

    def test_garden_example(self) -> None:
        """A larger mixed grid splits into the expected number of regions."""
        grid = parse_grid("""
            AAAA
            BBCD
            BBCC
            EEEC
        """)
        regions = grid_regions(grid)
        by_value = sorted((grid.get(min(r)), len(r)) for r in regions)
        assert by_value == [("A", 4), ("B", 4), ("C", 4), ("D", 1), ("E", 3)]

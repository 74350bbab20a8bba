"""
Bounded, mutable 2D grid keyed by Point.

Cells live in a flat row-major list indexed by ``row * width + col``. Every
in-bounds point holds exactly one value; out-of-bounds reads give None and
out-of-bounds writes are dropped.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, Iterator, Sequence, TypeVar

from grid_types import ALL_DIRECTIONS, CARDINAL_DIRECTIONS, Point

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


class Grid(Generic[T]):
    """A fixed-size 2D grid of cells."""

    def __init__(self, rows: Sequence[Sequence[T]]) -> None:
        """
        Build a grid from a rectangular sequence of rows.

        Raises:
            ValueError: If there are no rows or the rows differ in length
        """
        if not rows:
            raise ValueError("Cannot build a grid from zero rows")

        width = len(rows[0])
        mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != width]
        if mismatched:
            error_msg = (
                f"Inconsistent row lengths\n"
                f"  Expected: {width} columns (from row 0)\n"
                f"  Mismatched rows:\n"
            )
            for row_idx, actual_cols in mismatched:
                error_msg += f"    Row {row_idx}: {actual_cols} columns\n"
            error_msg += "  All rows must have the same number of cells"
            raise ValueError(error_msg)

        self._width = width
        self._height = len(rows)
        self._cells: list[T] = [value for row in rows for value in row]

    @classmethod
    def filled(cls, width: int, height: int, value: T) -> Grid[T]:
        """A width x height grid with every cell set to ``value``."""
        if width < 0 or height <= 0:
            raise ValueError(f"Invalid grid dimensions: width={width}, height={height}")
        return cls._from_cells(width, height, [value] * (width * height))

    @classmethod
    def _from_cells(cls, width: int, height: int, cells: list[T]) -> Grid[T]:
        grid: Grid[T] = cls.__new__(cls)
        grid._width = width
        grid._height = height
        grid._cells = cells
        return grid

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    # =========================================================================
    # Cell access
    # =========================================================================

    def in_bounds(self, point: Point) -> bool:
        return 0 <= point.row < self._height and 0 <= point.col < self._width

    def get(self, point: Point) -> T | None:
        """Return the value at ``point``, or None if it is out of bounds."""
        if not self.in_bounds(point):
            return None
        return self._cells[point.row * self._width + point.col]

    def set(self, point: Point, value: T) -> None:
        """Overwrite the value at ``point``. Out-of-bounds writes are ignored."""
        if not self.in_bounds(point):
            logger.debug("set: dropping write to out-of-bounds %s", point)
            return
        self._cells[point.row * self._width + point.col] = value

    def all_points(self) -> Iterator[Point]:
        """Every in-bounds point in row-major order."""
        for row in range(self._height):
            for col in range(self._width):
                yield Point(row, col)

    def find(self, predicate: Callable[[T], bool]) -> Point | None:
        """First point, row-major, whose value satisfies ``predicate``."""
        for point, value in zip(self.all_points(), self._cells):
            if predicate(value):
                return point
        return None

    def find_all(self, predicate: Callable[[T], bool]) -> list[Point]:
        return [p for p, value in zip(self.all_points(), self._cells) if predicate(value)]

    def neighbors(self, point: Point) -> list[Point]:
        """In-bounds points adjacent in any of the eight compass directions."""
        candidates = (point.move_direction(d) for d in ALL_DIRECTIONS)
        return [p for p in candidates if self.in_bounds(p)]

    def cardinal_neighbors(self, point: Point) -> list[Point]:
        candidates = (point.move_direction(d) for d in CARDINAL_DIRECTIONS)
        return [p for p in candidates if self.in_bounds(p)]

    # =========================================================================
    # Whole-grid operations
    # =========================================================================

    def transform(self, f: Callable[[Grid[T], Point], T]) -> Grid[T]:
        """
        Build a new grid where each cell is ``f(self, point)``.

        ``f`` always sees this grid unmodified, so the order in which cells are
        computed never affects the result.
        """
        cells = [f(self, point) for point in self.all_points()]
        return Grid._from_cells(self._width, self._height, cells)

    def expand_grid(self, expand_fn: Callable[[T], Sequence[Sequence[U]]]) -> Grid[U]:
        """
        Replace every cell with the tile ``expand_fn(value)``.

        The first tile fixes the tile shape; the result is
        ``height * tile_height`` by ``width * tile_width``.

        Raises:
            ValueError: If a tile's shape differs from the first tile's
        """
        if not self._cells:
            return Grid._from_cells(0, self._height, [])

        tiles = [expand_fn(value) for value in self._cells]
        tile_height = len(tiles[0])
        tile_width = len(tiles[0][0]) if tile_height else 0

        for point, tile in zip(self.all_points(), tiles):
            if len(tile) != tile_height or any(len(r) != tile_width for r in tile):
                raise ValueError(
                    f"Inconsistent tile shape at {point}\n"
                    f"  Expected: {tile_height}x{tile_width} (from the first cell)\n"
                    f"  Got: {len(tile)} rows with lengths {[len(r) for r in tile]}"
                )

        rows: list[list[U]] = []
        for row in range(self._height):
            row_tiles = tiles[row * self._width : (row + 1) * self._width]
            for tile_row in range(tile_height):
                rows.append([v for tile in row_tiles for v in tile[tile_row]])

        if not rows:
            return Grid._from_cells(0, 0, [])
        return Grid(rows)

    def copy(self) -> Grid[T]:
        return Grid._from_cells(self._width, self._height, list(self._cells))

    def to_rows(self) -> list[list[T]]:
        """Return a list-of-lists copy of the cells."""
        w = self._width
        return [self._cells[r * w : (r + 1) * w] for r in range(self._height)]

    # =========================================================================
    # Dunder methods
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._cells == other._cells
        )

    def __str__(self) -> str:
        return "".join("".join(str(v) for v in row) + "\n" for row in self.to_rows())

    def __repr__(self) -> str:
        return f"Grid(height={self._height}, width={self._width})"

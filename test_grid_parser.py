"""Tests for grid_parser module."""

import pytest

from grid_parser import parse_grid
from grid_types import Point


class TestParseGrid:
    """Tests for parsing text blocks into grids."""

    def test_simple_grid(self) -> None:
        """Each character becomes one cell."""
        grid = parse_grid("ab\ncd")
        assert grid.width == 2
        assert grid.height == 2
        assert grid.get(Point(0, 0)) == "a"
        assert grid.get(Point(1, 1)) == "d"

    def test_indented_block(self) -> None:
        """Common indentation and surrounding blank lines are ignored."""
        grid = parse_grid("""
            #.#
            .S.
            #E#
        """)
        assert grid.to_rows() == [list("#.#"), list(".S."), list("#E#")]

    def test_round_trips_through_str(self) -> None:
        """str() of a parsed grid reproduces the text."""
        text = "##..\n.@O.\n"
        assert str(parse_grid(text)) == text

    def test_cell_conversion(self) -> None:
        """A conversion function is applied to every character."""
        grid = parse_grid("""
            0123
            4567
        """, cell=int)
        assert grid.get(Point(1, 3)) == 7
        assert sum(grid.get(p) for p in grid.all_points()) == 28

    def test_error_conversion_failure(self) -> None:
        """A character the conversion rejects is reported with its position."""
        with pytest.raises(ValueError, match="Invalid character '.'") as exc_info:
            parse_grid("01\n2.", cell=int)
        assert "Row 1, column 1" in str(exc_info.value)

    def test_error_ragged_rows(self) -> None:
        """Rows of different lengths are rejected."""
        with pytest.raises(ValueError, match="Inconsistent row lengths"):
            parse_grid("""
                ...
                ..
            """)

    def test_error_empty_text(self) -> None:
        """Blank text has no rows."""
        with pytest.raises(ValueError, match="empty text"):
            parse_grid("  \n\n")

"""
Coloured terminal rendering for grids and search results.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

import simple_chalk as chalk  # type: ignore[import-untyped]

from grid import Grid
from grid_types import Point

logger = logging.getLogger(__name__)


def _palette() -> list[Callable[[str], str]]:
    return [
        chalk.red,
        chalk.green,
        chalk.yellow,
        chalk.blue,
        chalk.magenta,
        chalk.cyan,
        chalk.redBright,
        chalk.greenBright,
        chalk.yellowBright,
        chalk.blueBright,
    ]


def render(
    grid: Grid,
    highlight: Iterable[Point] | None = None,
    colors: bool = True,
) -> str:
    """
    Render a grid to a string, one line per row.

    Args:
        grid: The grid to render
        highlight: Optional points to draw black-on-white
        colors: If False, emit plain text with no ANSI codes

    Returns:
        Rendered string (no trailing newline)
    """
    highlighted = set(highlight) if highlight is not None else set()
    rows = grid.to_rows()

    # Same text, same colour
    texts = sorted({str(value) for row in rows for value in row})
    palette = _palette()
    value_colors: dict[str, Callable[[str], str]] = {
        text: palette[i % len(palette)] for i, text in enumerate(texts)
    }

    lines: list[str] = []
    for row_idx, row in enumerate(rows):
        line_parts: list[str] = []
        for col_idx, value in enumerate(row):
            content = str(value)
            if not colors:
                line_parts.append(content)
            elif Point(row_idx, col_idx) in highlighted:
                line_parts.append(chalk.bgWhite.black(content))
            else:
                line_parts.append(value_colors[content](content))
        lines.append("".join(line_parts))

    return "\n".join(lines)


def render_path(grid: Grid, path: Iterable[object], colors: bool = True) -> str:
    """
    Render a grid with every point on ``path`` highlighted.

    Path items may be Points or search states whose first element is a Point,
    such as ``(Point, Direction)`` tuples.
    """
    points: set[Point] = set()
    for item in path:
        if isinstance(item, Point):
            points.add(item)
        elif isinstance(item, tuple) and item and isinstance(item[0], Point):
            points.add(item[0])
        else:
            raise ValueError(f"Cannot locate a Point in path item: {item!r}")

    outside = [p for p in points if not grid.in_bounds(p)]
    if outside:
        logger.info("render_path: %d path points fall outside %r", len(outside), grid)

    return render(grid, highlight=points, colors=colors)

"""
Text-to-Grid parsing.

One character per cell, one line per row:

    #.#
    .S.
    #E#

Leading and trailing blank lines are ignored and common indentation is
stripped, so triple-quoted blocks in tests can be indented freely.
"""

from __future__ import annotations

import textwrap
from typing import Callable, TypeVar, overload

from grid import Grid

__all__ = ["parse_grid"]

T = TypeVar("T")


@overload
def parse_grid(text: str) -> Grid[str]: ...


@overload
def parse_grid(text: str, cell: Callable[[str], T]) -> Grid[T]: ...


def parse_grid(text: str, cell: Callable[[str], object] | None = None) -> Grid:
    """
    Parse a block of text into a Grid.

    Args:
        text: Multi-line string, one row per line
        cell: Optional conversion applied to each character (e.g. ``int``)

    Returns:
        Grid of characters, or of ``cell(char)`` values

    Raises:
        ValueError: If the text has no rows, rows differ in length, or
                    ``cell`` rejects a character
    """
    lines = textwrap.dedent(text).strip("\n").split("\n")
    lines = [line.rstrip() for line in lines]
    if not lines or lines == [""]:
        raise ValueError("Cannot parse a grid from empty text")

    if cell is None:
        return Grid([list(line) for line in lines])

    rows: list[list[object]] = []
    for row_idx, line in enumerate(lines):
        row: list[object] = []
        for col_idx, char in enumerate(line):
            try:
                row.append(cell(char))
            except ValueError as e:
                raise ValueError(
                    f"Invalid character '{char}'\n"
                    f"  Row {row_idx}, column {col_idx}: \"{line}\"\n"
                    f"  {e}"
                ) from e
        rows.append(row)

    return Grid(rows)

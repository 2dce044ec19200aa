"""Reading maps from text, one character per cell."""

from __future__ import annotations

import os
from typing import Union

from hexescape.grid import CellType, HexGrid

_CHAR_TO_TYPE = {
    "S": CellType.START,
    "G": CellType.GOAL,
    "#": CellType.WALL,
    "K": CellType.ITEM,
    "A": CellType.UP_RIGHT,
    "B": CellType.RIGHT,
    "C": CellType.DOWN_RIGHT,
    "D": CellType.DOWN_LEFT,
    "E": CellType.LEFT,
    "F": CellType.UP_LEFT,
}

_TYPE_TO_STRING = {cell_type: ch for ch, cell_type in _CHAR_TO_TYPE.items()}
_TYPE_TO_STRING[CellType.EMPTY] = " "


def cell_type_from_char(ch: str) -> CellType:
    """Map a map character to its cell type; unknown characters are empty."""
    return _CHAR_TO_TYPE.get(ch, CellType.EMPTY)


def cell_type_to_string(cell_type: CellType) -> str:
    """Return the character used to display a cell type."""
    return _TYPE_TO_STRING.get(cell_type, "?")


def parse_grid(text: str) -> HexGrid:
    """Build a grid from map text; blank lines are ignored.

    The width is taken from the first line. A later line shorter than that
    raises ValueError; extra characters on longer lines are ignored.
    """
    lines = [line for line in text.splitlines() if line]
    rows = len(lines)
    cols = len(lines[0]) if lines else 0
    grid = HexGrid(rows, cols)
    for r, line in enumerate(lines):
        if len(line) < cols:
            raise ValueError(
                f"map line {r + 1} has {len(line)} cells, expected {cols}"
            )
        for c, ch in enumerate(line[:cols]):
            grid.at(r, c).type = cell_type_from_char(ch)
    return grid


def load_grid(path: Union[str, os.PathLike]) -> HexGrid:
    """Read a map file and build its grid."""
    with open(path, encoding="utf-8") as handle:
        return parse_grid(handle.read())
"""Hexagonal grid model: cell types, cells and the grid itself."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class CellType(Enum):
    """Kinds of cell a map can contain."""

    EMPTY = 0
    WALL = 1
    START = 2
    GOAL = 3
    ITEM = 4
    # Conveyor belts
    UP_RIGHT = 5
    UP_LEFT = 6
    RIGHT = 7
    LEFT = 8
    DOWN_RIGHT = 9
    DOWN_LEFT = 10

    def is_conveyor(self) -> bool:
        """Return True for the conveyor-belt cell types."""
        return CellType.UP_RIGHT.value <= self.value <= CellType.DOWN_LEFT.value


@dataclass
class HexCell:
    """A single cell of the grid."""

    row: int
    col: int
    type: CellType = CellType.EMPTY
    has_player: bool = False


# Directions E, SE, SW, W, NW, NE (clockwise from the right).
_ROW_STEPS = (0, 1, 1, 0, -1, -1)
_COL_STEPS_EVEN = (1, 0, -1, -1, -1, 0)
_COL_STEPS_ODD = (1, 1, 0, -1, 0, 1)


class HexGrid:
    """A rectangular grid of hexagonal cells in offset (odd-row shifted) layout."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"grid dimensions must be non-negative, got {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self._cells = [[HexCell(r, c) for c in range(cols)] for r in range(rows)]

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    def in_bounds(self, row: int, col: int) -> bool:
        """Whether (row, col) lies inside the grid."""
        return 0 <= row < self._rows and 0 <= col < self._cols

    def at(self, row: int, col: int) -> HexCell:
        """Return the cell at (row, col); raise IndexError when out of bounds."""
        if not self.in_bounds(row, col):
            raise IndexError(
                f"cell ({row}, {col}) is outside a {self._rows}x{self._cols} grid"
            )
        return self._cells[row][col]

    def cells(self) -> Iterator[HexCell]:
        """Yield every cell in row-major order."""
        for row in self._cells:
            yield from row

    def neighbors(self, cell: HexCell) -> list[HexCell]:
        """Return the in-bounds neighbours of a cell, clockwise from the east."""
        odd = cell.row % 2 != 0
        col_steps = _COL_STEPS_ODD if odd else _COL_STEPS_EVEN
        result = []
        for d_row, d_col in zip(_ROW_STEPS, col_steps):
            nr, nc = cell.row + d_row, cell.col + d_col
            if self.in_bounds(nr, nc):
                result.append(self._cells[nr][nc])
        return result

    def to_pixel(self, row: int, col: int) -> tuple[float, float]:
        """Convert grid coordinates to the pixel position of the cell centre."""
        base_x = 50.0 if row % 2 == 0 else 75.0
        return (base_x + col * 50.0, 50.0 + row * 40.0)
"""Movement produced by conveyor-belt cells."""

from __future__ import annotations

from hexescape.grid import CellType


def conveyor_offset(cell_type: CellType, is_odd_row: bool) -> tuple[int, int]:
    """Return the (row, col) displacement a conveyor applies; (0, 0) otherwise."""
    if cell_type is CellType.UP_RIGHT:
        return (-1, 1 if is_odd_row else 0)
    if cell_type is CellType.RIGHT:
        return (0, 1)
    if cell_type is CellType.DOWN_RIGHT:
        return (1, 1 if is_odd_row else 0)
    if cell_type is CellType.DOWN_LEFT:
        return (1, 0 if is_odd_row else -1)
    if cell_type is CellType.LEFT:
        return (0, -1)
    if cell_type is CellType.UP_LEFT:
        return (-1, 0 if is_odd_row else -1)
    return (0, 0)
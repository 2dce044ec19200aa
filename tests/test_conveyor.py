import pytest

from hexescape.conveyor import conveyor_offset
from hexescape.grid import CellType, HexGrid

CONVEYORS = [t for t in CellType if t.is_conveyor()]
OPPOSITES = [
    (CellType.UP_RIGHT, CellType.DOWN_LEFT),
    (CellType.DOWN_RIGHT, CellType.UP_LEFT),
    (CellType.RIGHT, CellType.LEFT),
]


@pytest.mark.parametrize("cell_type", [t for t in CellType if not t.is_conveyor()])
@pytest.mark.parametrize("odd", [False, True])
def test_non_conveyors_do_not_move(cell_type, odd):
    assert conveyor_offset(cell_type, odd) == (0, 0)


def test_right_moves_one_column():
    assert conveyor_offset(CellType.RIGHT, False) == (0, 1)
    assert conveyor_offset(CellType.RIGHT, True) == (0, 1)


@pytest.mark.parametrize("cell_type", CONVEYORS)
@pytest.mark.parametrize("row", [2, 3])
def test_conveyor_target_is_a_neighbor(cell_type, row):
    grid = HexGrid(6, 6)
    d_row, d_col = conveyor_offset(cell_type, row % 2 != 0)
    target = (row + d_row, 2 + d_col)
    neighbor_coords = {(n.row, n.col) for n in grid.neighbors(grid.at(row, 2))}
    assert target in neighbor_coords


@pytest.mark.parametrize("forward,back", OPPOSITES + [(b, a) for a, b in OPPOSITES])
@pytest.mark.parametrize("row", [2, 3])
def test_opposite_conveyors_return_to_origin(forward, back, row):
    d_row, d_col = conveyor_offset(forward, row % 2 != 0)
    mid_row, mid_col = row + d_row, 5 + d_col
    e_row, e_col = conveyor_offset(back, mid_row % 2 != 0)
    assert (mid_row + e_row, mid_col + e_col) == (row, 5)


def test_all_conveyor_targets_distinct():
    for odd in (False, True):
        offsets = {conveyor_offset(t, odd) for t in CONVEYORS}
        assert len(offsets) == len(CONVEYORS)
"""Game rules: finding start and goal, player moves, conveyors and wall breaking."""

from __future__ import annotations

import sys
from enum import Enum
from typing import TYPE_CHECKING, Optional

from hexescape.conveyor import conveyor_offset
from hexescape.grid import CellType, HexCell, HexGrid

if TYPE_CHECKING:
    from hexescape.player import Player
    from hexescape.turns import TurnSystem


class Key(Enum):
    """Keys the game reacts to."""

    W = "w"
    E = "e"
    A = "a"
    D = "d"
    Z = "z"
    X = "x"
    SPACE = "space"
    ESCAPE = "escape"
    P = "p"


_DIRECTION_KEYS = frozenset({Key.W, Key.E, Key.A, Key.D, Key.Z, Key.X})


def _find_cell(grid: HexGrid, cell_type: CellType) -> Optional[HexCell]:
    return next((cell for cell in grid.cells() if cell.type is cell_type), None)


def find_start_cell(grid: HexGrid) -> Optional[HexCell]:
    """Return the first START cell in row-major order, or None."""
    cell = _find_cell(grid, CellType.START)
    if cell is None:
        print("No se encontró celda de inicio (START)", file=sys.stderr)
    return cell


def find_goal_cell(grid: HexGrid) -> Optional[HexCell]:
    """Return the first GOAL cell in row-major order, or None."""
    cell = _find_cell(grid, CellType.GOAL)
    if cell is None:
        print("No se encontró celda de meta (GOAL)", file=sys.stderr)
    return cell


def directional_offset(key: Key, current_row: int) -> tuple[int, int]:
    """Return the (row, col) step a direction key means from the given row."""
    odd = current_row % 2 != 0
    if key is Key.W:
        return (-1, 0 if odd else -1)
    if key is Key.E:
        return (-1, 1 if odd else 0)
    if key is Key.A:
        return (0, -1)
    if key is Key.D:
        return (0, 1)
    if key is Key.Z:
        return (1, 0 if odd else -1)
    if key is Key.X:
        return (1, 1 if odd else 0)
    return (0, 0)


def is_valid_wall_break_direction(key: Key) -> bool:
    """Whether the key is one of the six direction keys."""
    return key in _DIRECTION_KEYS


def wall_position_in_direction(
    player: "Player", key: Key, grid: HexGrid
) -> Optional[tuple[int, int]]:
    """Position next to the player in the key's direction, or None if off the grid."""
    d_row, d_col = directional_offset(key, player.row)
    row, col = player.row + d_row, player.col + d_col
    if not grid.in_bounds(row, col):
        return None
    return (row, col)


def find_adjacent_walls(player: "Player", grid: HexGrid) -> list[tuple[int, int]]:
    """Positions of the walls around the player."""
    here = HexCell(player.row, player.col)
    return [
        (cell.row, cell.col)
        for cell in grid.neighbors(here)
        if cell.type is CellType.WALL
    ]


def handle_wall_break(key: Key, player: "Player", grid: HexGrid) -> bool:
    """Break the wall in the key's direction; return whether a wall was broken."""
    if not player.can_use_wall_break() or not player.is_selecting_wall:
        return False
    position = wall_position_in_direction(player, key, grid)
    if position is None:
        print("No hay pared en esa dirección.")
        return False
    row, col = position
    cell = grid.at(row, col)
    if cell.type is not CellType.WALL:
        print("No hay una pared en esa posición.")
        return False
    cell.type = CellType.EMPTY
    player.use_wall_break()
    player.is_selecting_wall = False
    print(f"¡Pared rota en posición ({row}, {col})!")
    return True


def _move_player(
    player: "Player", grid: HexGrid, row: int, col: int, left_type: CellType
) -> bool:
    """Animate and move the player; return True if the target is the goal."""
    player.start_movement(
        grid.to_pixel(player.row, player.col), grid.to_pixel(row, col)
    )
    player.last_cell_type = left_type
    player.row = row
    player.col = col
    if grid.at(row, col).type is CellType.GOAL:
        player.has_won = True
        player.win_time = player.elapsed_time()
        return True
    return False


def handle_player_movement(
    key: Key, player: "Player", grid: HexGrid, turns: "TurnSystem"
) -> None:
    """React to a key press: select or break walls, or step in a direction."""
    if player.is_moving:
        return

    if player.is_selecting_wall:
        if is_valid_wall_break_direction(key):
            handle_wall_break(key, player, grid)
            return
        if key in (Key.ESCAPE, Key.SPACE):
            player.is_selecting_wall = False
            print("Selección de pared cancelada.")
            return

    if key is Key.SPACE:
        if player.can_use_wall_break():
            player.is_selecting_wall = True
            print("¡Modo selección de pared activado!")
            print(
                "Usa W/E (arriba), A/D (lados), Z/X (abajo) "
                "para elegir qué pared romper."
            )
            print("Presiona ESC para cancelar.")
        elif not player.is_energy_full():
            print(
                f"Energía insuficiente. Necesitas {player.MAX_ENERGY} "
                f"puntos de energía. Actual: {player.energy}"
            )
        return

    if not is_valid_wall_break_direction(key):
        return

    d_row, d_col = directional_offset(key, player.row)
    new_row, new_col = player.row + d_row, player.col + d_col
    if not grid.in_bounds(new_row, new_col):
        return
    if grid.at(new_row, new_col).type is CellType.WALL:
        return

    left_type = grid.at(player.row, player.col).type
    if _move_player(player, grid, new_row, new_col, left_type):
        print(
            f"¡¡¡VICTORIA!!! Has llegado a la meta en {player.win_time} segundos!"
        )
        return

    player.gain_energy()
    turns.handle_turn(grid, player)


def handle_conveyor_movement(player: "Player", grid: HexGrid) -> None:
    """Carry the player one step if standing still on a conveyor."""
    if player.is_moving or player.has_won:
        return
    current = grid.at(player.row, player.col)
    if not current.type.is_conveyor():
        return
    d_row, d_col = conveyor_offset(current.type, player.row % 2 != 0)
    new_row, new_col = player.row + d_row, player.col + d_col
    if not grid.in_bounds(new_row, new_col):
        return
    if grid.at(new_row, new_col).type is CellType.WALL:
        return
    if _move_player(player, grid, new_row, new_col, current.type):
        print("¡¡¡VICTORIA!!! Has llegado a la meta!")
        return
    player.gain_energy()
"""Turn counting and the periodic appearance of new walls."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Optional

from hexescape.grid import CellType

if TYPE_CHECKING:
    from hexescape.grid import HexGrid
    from hexescape.player import Player

DEFAULT_TURNS_PER_WALL = 5


class TurnSystem:
    """Counts the player's turns and drops a random wall every few turns."""

    def __init__(
        self,
        turns_per_wall: int = DEFAULT_TURNS_PER_WALL,
        rng: Optional[random.Random] = None,
    ) -> None:
        if turns_per_wall < 1:
            raise ValueError(f"turns_per_wall must be at least 1, got {turns_per_wall}")
        self.turns_per_wall = turns_per_wall
        self._rng = rng if rng is not None else random.Random()
        self._turn_count = 0

    @property
    def turn_count(self) -> int:
        """Number of turns played since the last reset."""
        return self._turn_count

    def reset(self) -> None:
        """Start counting turns from zero again."""
        self._turn_count = 0

    def should_generate_wall(self) -> bool:
        """Whether the current turn is one on which a wall appears."""
        return self._turn_count % self.turns_per_wall == 0

    def available_cells(self, grid: "HexGrid", player: "Player") -> list[tuple[int, int]]:
        """Positions of empty cells, other than the player's, that may become walls."""
        return [
            (cell.row, cell.col)
            for cell in grid.cells()
            if cell.type is CellType.EMPTY
            and not (cell.row == player.row and cell.col == player.col)
        ]

    def generate_random_wall(
        self, grid: "HexGrid", player: "Player"
    ) -> Optional[tuple[int, int]]:
        """Turn a random available cell into a wall and return its position.

        Returns None when no cell is available.
        """
        candidates = self.available_cells(grid, player)
        if not candidates:
            print("No hay celdas EMPTY disponibles para colocar un nuevo muro.")
            return None
        row, col = self._rng.choice(candidates)
        grid.at(row, col).type = CellType.WALL
        print(f"¡Nuevo muro generado en posición ({row}, {col})!")
        return (row, col)

    def handle_turn(
        self, grid: "HexGrid", player: "Player"
    ) -> Optional[tuple[int, int]]:
        """Count one turn; return the new wall's position if one was placed."""
        self._turn_count += 1
        print(f"Turno: {self._turn_count}")
        if self.should_generate_wall():
            return self.generate_random_wall(grid, player)
        return None
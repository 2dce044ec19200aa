"""The player: position, energy, wall-breaking ability and move animation."""

from __future__ import annotations

import math
import time
from typing import TYPE_CHECKING, Callable, Optional

from hexescape.grid import CellType

if TYPE_CHECKING:
    from hexescape.grid import HexGrid

Vector = tuple[float, float]


class Player:
    """State of the player on the grid."""

    MAX_ENERGY = 10
    ENERGY_PER_MOVE = 1

    def __init__(
        self,
        row: int,
        col: int,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.row = row
        self.col = col
        self._clock = clock if clock is not None else time.monotonic

        self.energy = 0
        self.can_break_wall = False
        self.is_selecting_wall = False

        self.has_won = False
        self.win_time = 0.0
        self._created_at = self._clock()

        self.last_cell_type = CellType.EMPTY

        self.is_moving = False
        self.start_position: Vector = (0.0, 0.0)
        self.target_position: Vector = (0.0, 0.0)
        self.current_position: Vector = (0.0, 0.0)
        self.movement_duration = 0.3
        self._movement_started_at = self._created_at

    def elapsed_time(self) -> float:
        """Seconds since the player was created (the game timer)."""
        return self._clock() - self._created_at

    def gain_energy(self) -> None:
        """Add the energy earned by one move, up to the maximum."""
        if self.energy >= self.MAX_ENERGY:
            return
        self.energy += self.ENERGY_PER_MOVE
        print(f"Energía ganada! Energía actual: {self.energy}/{self.MAX_ENERGY}")
        if self.energy >= self.MAX_ENERGY:
            self.can_break_wall = True
            print(
                "¡Barra de energía llena! Puedes romper una pared presionando SPACE."
            )

    def reset_energy(self) -> None:
        """Empty the energy bar."""
        self.energy = 0
        self.can_break_wall = False

    def is_energy_full(self) -> bool:
        return self.energy >= self.MAX_ENERGY

    def energy_percentage(self) -> float:
        """Energy as a fraction of the maximum."""
        return self.energy / self.MAX_ENERGY

    def use_wall_break(self) -> None:
        """Spend a full energy bar on breaking a wall, if available."""
        if self.can_use_wall_break():
            self.reset_energy()
            print(
                "¡Has roto una pared! Puedes volver a usar la habilidad "
                "cuando tu energía se llene de nuevo."
            )

    def can_use_wall_break(self) -> bool:
        return self.can_break_wall

    def start_movement(self, start: Vector, target: Vector) -> None:
        """Begin animating from start to target."""
        self.is_moving = True
        self.start_position = start
        self.target_position = target
        self.current_position = start
        self._movement_started_at = self._clock()

    def update_movement(self) -> None:
        """Advance the move animation according to the clock."""
        if not self.is_moving:
            return
        elapsed = self._clock() - self._movement_started_at
        progress = elapsed / self.movement_duration
        if progress >= 1.0:
            self.is_moving = False
            self.current_position = self.target_position
            return
        eased = 0.5 * (1.0 - math.cos(progress * 3.14159))
        sx, sy = self.start_position
        tx, ty = self.target_position
        self.current_position = (sx + (tx - sx) * eased, sy + (ty - sy) * eased)

    def visual_position(self, grid: "HexGrid") -> Vector:
        """Where the player should be drawn."""
        if self.is_moving:
            return self.current_position
        return grid.to_pixel(self.row, self.col)
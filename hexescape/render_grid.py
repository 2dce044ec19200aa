"""Drawing of the play field: the cells, the highlighted path and the player."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Collection, Sequence

import pygame

from hexescape.grid import CellType
from hexescape.maploader import cell_type_to_string
from hexescape.render_hud import (
    CYBER_WHITE,
    ELECTRIC_YELLOW,
    NEON_BLUE,
    NEON_GREEN,
    NEON_ORANGE,
    NEON_PURPLE,
    TECH_GRAY,
    Color,
    FontFactory,
    Point,
    _draw_circle,
    _draw_polygon,
    _pulsed,
    _rgba,
    _scaled,
    _text,
    _with_alpha,
    draw_animated_background,
    draw_decorative_hex,
    draw_game_title,
)

if TYPE_CHECKING:
    from hexescape.grid import HexGrid
    from hexescape.player import Player

HEX_RADIUS = 25.0
HUD_WIDTH = 220.0

_SHADOW: Color = (0, 0, 0, 120)
_PLAIN_OUTLINE: Color = (120, 140, 160, 255)
_PATH_OUTLINE: Color = (255, 0, 0, 255)
_LABEL: Color = (30, 30, 50, 255)
_PLAYER_SHADOW: Color = (0, 0, 0, 150)
_PLAYER_DOT: Color = (50, 50, 80, 255)


def _byte(value: float) -> int:
    return max(0, min(255, int(value)))


def cell_color(cell_type: CellType, time: float) -> Color:
    """Fill colour of a cell type at the given animation time."""
    if cell_type is CellType.EMPTY:
        return (220, 235, 255, 180)
    if cell_type is CellType.WALL:
        return _scaled(TECH_GRAY, math.sin(time * 1.5) * 0.2 + 0.8)
    if cell_type is CellType.START:
        pulse = math.sin(time * 3.0) * 0.4 + 0.6
        return (0, _byte(NEON_GREEN[1] * pulse), _byte(NEON_GREEN[2] * pulse), 255)
    if cell_type is CellType.GOAL:
        pulse = math.sin(time * 4.0) * 0.5 + 0.5
        return (_byte(ELECTRIC_YELLOW[0] * pulse), _byte(ELECTRIC_YELLOW[1] * pulse), 0, 255)
    if cell_type is CellType.ITEM:
        return _scaled(NEON_PURPLE, math.sin(time * 6.0) * 0.4 + 0.6)
    if cell_type is CellType.UP_RIGHT:
        flow = math.sin(time * 5.0) * 0.3 + 0.7
        return (255, _byte(150 * flow), 0, 255)
    if cell_type is CellType.RIGHT:
        flow = math.sin(time * 5.0 + 1.0) * 0.3 + 0.7
        return (0, _byte(200 * flow), 255, 255)
    if cell_type is CellType.DOWN_RIGHT:
        flow = math.sin(time * 5.0 + 2.0) * 0.3 + 0.7
        return (_byte(180 * flow), 0, 255, 255)
    if cell_type is CellType.DOWN_LEFT:
        flow = math.sin(time * 5.0 + 3.0) * 0.3 + 0.7
        return (255, 0, _byte(180 * flow), 255)
    if cell_type is CellType.LEFT:
        flow = math.sin(time * 5.0 + 4.0) * 0.3 + 0.7
        return (0, 255, _byte(150 * flow), 255)
    if cell_type is CellType.UP_LEFT:
        flow = math.sin(time * 5.0 + 5.0) * 0.3 + 0.7
        return (255, 255, _byte(100 * flow), 255)
    return (255, 255, 255, 255)


def grid_offset(surface_size: Sequence[int], grid: "HexGrid") -> tuple[float, float]:
    """Offset that centres the grid in the space left of the side panels."""
    width, height = surface_size
    grid_width = grid.cols * 50.0 + 25.0
    grid_height = grid.rows * 40.0 + 50.0
    offset_x = (width - grid_width - HUD_WIDTH) / 2.0
    offset_y = (height - grid_height) / 2.0 + 10.0
    return offset_x, offset_y


def hexagon_points(center: Point, radius: float, angle: float = 0.0) -> list[Point]:
    """Corners of a pointy-top hexagon, rotated clockwise by angle degrees."""
    cx, cy = center
    points = []
    for i in range(6):
        theta = math.radians(angle + i * 60.0 - 90.0)
        points.append((cx + radius * math.cos(theta), cy + radius * math.sin(theta)))
    return points


def player_color(player: "Player", time: float) -> Color:
    """Fill colour of the player marker for its current state."""
    if player.is_moving:
        trail = math.sin(time * 20.0) * 0.4 + 0.6
        return (_byte(255 * trail), _byte(150 * trail), _byte(150 * trail), 255)
    if player.can_use_wall_break():
        return _pulsed(ELECTRIC_YELLOW, math.sin(time * 8.0) * 0.5 + 0.5)
    if player.is_selecting_wall:
        return NEON_ORANGE
    breath = math.sin(time * 2.0) * 0.3 + 0.7
    return (_byte(NEON_BLUE[0] * breath), _byte(NEON_BLUE[1] * breath), NEON_BLUE[2], 255)


def _hex_outline(
    surface: pygame.Surface,
    center: Point,
    radius: float,
    color: Sequence[int],
    thickness: int,
    angle: float = 0.0,
) -> None:
    """Hexagon outline drawn just outside the given radius."""
    _draw_polygon(
        surface, color, hexagon_points(center, radius + thickness / 2.0, angle), thickness
    )


def _hex_shape(
    surface: pygame.Surface,
    center: Point,
    radius: float,
    fill: Sequence[int],
    outline: Sequence[int],
    thickness: int,
) -> None:
    if _rgba(fill)[3] > 0:
        _draw_polygon(surface, fill, hexagon_points(center, radius))
    if thickness > 0:
        _hex_outline(surface, center, radius, outline, thickness)


def _draw_cell_effects(
    surface: pygame.Surface, cell_type: CellType, pos: Point, row: int, col: int, time: float
) -> tuple[Color, int]:
    """Draw the halo of special cells; return the outline to give the cell."""
    if cell_type is CellType.GOAL:
        for i in range(3):
            intensity = math.sin(time * 4.0 + i * 2.0) * 0.4 + 0.6
            _hex_outline(surface, pos, 30 + i * 10,
                         _with_alpha(ELECTRIC_YELLOW, 100 * intensity), 2,
                         time * 45.0 * (i + 1))
        return ELECTRIC_YELLOW, 4
    if cell_type is CellType.START:
        intensity = math.sin(time * 3.0) * 0.5 + 0.5
        _hex_outline(surface, pos, 35, _with_alpha(NEON_GREEN, 120 * intensity), 3)
        return NEON_GREEN, 3
    if cell_type is CellType.ITEM:
        sparkle = math.sin(time * 8.0) * 0.4 + 0.6
        _hex_outline(surface, pos, 32, _scaled(NEON_PURPLE, sparkle), 2)
        return NEON_PURPLE, 3
    if cell_type.is_conveyor():
        flow = math.sin(time * 6.0 + col + row) * 0.4 + 0.6
        _hex_outline(surface, pos, 28, _scaled(NEON_BLUE, flow), 2)
        return NEON_BLUE, 2
    if cell_type is CellType.WALL:
        return TECH_GRAY, 3
    return _PLAIN_OUTLINE, 1


def _draw_player(
    surface: pygame.Surface, player: "Player", pos: Point, time: float
) -> None:
    _draw_circle(surface, _PLAYER_SHADOW, (pos[0] + 4, pos[1] + 4), 18)

    if not player.is_moving and player.can_use_wall_break():
        for i in range(3):
            _hex_outline(surface, pos, 25 + i * 8,
                         _with_alpha(ELECTRIC_YELLOW, 80 - i * 20), 2,
                         time * 60.0 * (i + 1))
    elif not player.is_moving and player.is_selecting_wall:
        _hex_outline(surface, pos, 30, NEON_ORANGE, 3, time * 90.0)

    _draw_circle(surface, CYBER_WHITE, pos, 19)
    _draw_circle(surface, player_color(player, time), pos, 16)
    _draw_polygon(surface, CYBER_WHITE, hexagon_points(pos, 8))
    _draw_circle(surface, _PLAYER_DOT, pos, 3)


def draw_grid(
    surface: pygame.Surface,
    grid: "HexGrid",
    player: "Player",
    font_factory: FontFactory,
    anim_time: float,
    bg_time: float,
    path_cells: Collection[tuple[int, int]],
) -> None:
    """Draw the background, the title, every cell and the player.

    Also advances the player's move animation.
    """
    draw_animated_background(surface, bg_time)
    draw_game_title(surface, font_factory, anim_time)

    player.update_movement()

    width, height = surface.get_size()
    offset_x, offset_y = grid_offset((width, height), grid)
    grid_width = grid.cols * 50.0 + 25.0
    grid_height = grid.rows * 40.0 + 50.0
    time = anim_time

    palette = (NEON_BLUE, NEON_GREEN, NEON_PURPLE)
    for i in range(12):
        angle = (i / 12.0) * 2 * 3.14159
        radius = 200 + math.sin(time * 2.0 + i) * 20
        x = offset_x + grid_width / 2 + math.cos(angle + time * 0.3) * radius
        y = offset_y + grid_height / 2 + math.sin(angle + time * 0.3) * radius
        if 0 < x < width - HUD_WIDTH and 80 < y < height - 100:
            draw_decorative_hex(surface, (x, y), 8, _with_alpha(palette[i % 3], 60),
                                (time * 30.0 + i * 30) * 30.0)

    for cell in grid.cells():
        px, py = grid.to_pixel(cell.row, cell.col)
        pos = (px + offset_x, py + offset_y)

        _draw_polygon(surface, _SHADOW, hexagon_points((pos[0] + 3, pos[1] + 3), HEX_RADIUS))

        outline, thickness = _draw_cell_effects(
            surface, cell.type, pos, cell.row, cell.col, time
        )
        if (cell.row, cell.col) in path_cells:
            outline, thickness = _PATH_OUTLINE, 4

        _hex_shape(surface, pos, HEX_RADIUS, cell_color(cell.type, time), outline, thickness)
        _text(surface, font_factory, cell_type_to_string(cell.type), 14, _LABEL,
              bold=True, topleft=(pos[0] - 7.0, pos[1] - 7.0))

    vx, vy = player.visual_position(grid)
    _draw_player(surface, player, (vx + offset_x, vy + offset_y), time)
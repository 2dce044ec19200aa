import math

import pygame
import pytest

from hexescape.grid import CellType
from hexescape.maploader import parse_grid
from hexescape.player import Player
from hexescape.render_grid import (
    cell_color,
    draw_grid,
    grid_offset,
    hexagon_points,
    player_color,
)
from hexescape.render_hud import NEON_ORANGE, TECH_GRAY


class _FakeFont:
    def render(self, text, antialias, color):
        return pygame.Surface((max(1, len(text) * 6), 10), pygame.SRCALPHA)

    def size(self, text):
        return (len(text) * 6, 10)


def _fonts(size, bold):
    return _FakeFont()


TIMES = [0.0, 0.37, 1.5, 12.25]


def test_empty_cell_color_is_translucent_pale_blue():
    assert cell_color(CellType.EMPTY, 3.0) == (220, 235, 255, 180)


@pytest.mark.parametrize("cell_type", list(CellType))
@pytest.mark.parametrize("time", TIMES)
def test_cell_colors_are_valid_rgba(cell_type, time):
    color = cell_color(cell_type, time)
    assert len(color) == 4
    assert all(0 <= component <= 255 for component in color)


@pytest.mark.parametrize("time", TIMES)
def test_goal_color_is_yellowish(time):
    r, g, b, a = cell_color(CellType.GOAL, time)
    assert b == 0
    assert r == g
    assert a == 255


@pytest.mark.parametrize("time", TIMES)
def test_wall_color_never_brighter_than_tech_gray(time):
    color = cell_color(CellType.WALL, time)
    assert all(c <= base for c, base in zip(color[:3], TECH_GRAY[:3]))


@pytest.mark.parametrize("time", TIMES)
def test_start_and_conveyor_fixed_channels(time):
    assert cell_color(CellType.START, time)[0] == 0
    r, _, b, _ = cell_color(CellType.UP_RIGHT, time)
    assert (r, b) == (255, 0)


def test_grid_offset_shifts_with_grid_size():
    base = parse_grid("   \n   \n")
    wider = parse_grid("     \n     \n")
    taller = parse_grid("   \n   \n   \n   \n")
    bx, by = grid_offset((900, 600), base)
    wx, wy = grid_offset((900, 600), wider)
    tx, ty = grid_offset((900, 600), taller)
    assert bx - wx == 50.0
    assert wy == by
    assert by - ty == 40.0
    assert tx == bx


def test_hexagon_points_lie_on_circle_with_top_vertex():
    points = hexagon_points((100.0, 80.0), 25.0)
    assert len(points) == 6
    for x, y in points:
        assert math.hypot(x - 100.0, y - 80.0) == pytest.approx(25.0)
    assert points[0] == pytest.approx((100.0, 55.0))


def test_hexagon_rotation_by_sixty_degrees_gives_same_shape():
    plain = sorted((round(x, 6), round(y, 6)) for x, y in hexagon_points((0.0, 0.0), 10.0, 0.0))
    turned = sorted((round(x, 6), round(y, 6)) for x, y in hexagon_points((0.0, 0.0), 10.0, 60.0))
    assert plain == pytest.approx(turned)


def test_player_color_while_moving_has_equal_green_and_blue():
    player = Player(0, 0)
    player.is_moving = True
    r, g, b, _ = player_color(player, 0.8)
    assert g == b
    assert r >= g


def test_player_color_when_selecting_wall_without_energy():
    player = Player(0, 0)
    player.is_selecting_wall = True
    assert player_color(player, 2.0) == NEON_ORANGE


def test_player_color_with_full_energy_is_yellow():
    player = Player(0, 0)
    for _ in range(Player.MAX_ENERGY):
        player.gain_energy()
    r, g, b, _ = player_color(player, 0.3)
    assert b == 0
    assert r == g


def test_player_color_at_rest_is_blue():
    player = Player(0, 0)
    r, _, b, _ = player_color(player, 1.1)
    assert r == 0
    assert b == 255


def test_draw_grid_puts_player_centre_dot_on_its_cell():
    grid = parse_grid("S G\n   \n")
    player = Player(0, 0)
    surface = pygame.Surface((900, 600))
    draw_grid(surface, grid, player, _fonts, 0.0, 0.0, set())
    ox, oy = grid_offset(surface.get_size(), grid)
    px, py = grid.to_pixel(0, 0)
    pixel = tuple(surface.get_at((round(px + ox), round(py + oy))))
    assert pixel[:3] == (50, 50, 80)


def _red_pixels(surface, grid, row, col):
    ox, oy = grid_offset(surface.get_size(), grid)
    px, py = grid.to_pixel(row, col)
    cx, cy = round(px + ox), round(py + oy)
    width, height = surface.get_size()
    count = 0
    for x in range(max(0, cx - 32), min(width, cx + 33)):
        for y in range(max(0, cy - 32), min(height, cy + 33)):
            if tuple(surface.get_at((x, y)))[:3] == (255, 0, 0):
                count += 1
    return count


def test_draw_grid_highlights_path_cells_in_red():
    grid = parse_grid("S   \n    \n   G\n")
    plain = pygame.Surface((900, 600))
    draw_grid(plain, grid, Player(0, 0), _fonts, 0.5, 0.5, set())
    highlighted = pygame.Surface((900, 600))
    draw_grid(highlighted, grid, Player(0, 0), _fonts, 0.5, 0.5, {(2, 1)})
    assert _red_pixels(plain, grid, 2, 1) == 0
    assert _red_pixels(highlighted, grid, 2, 1) > 0


def test_draw_grid_finishes_elapsed_move_animation():
    now = [0.0]
    grid = parse_grid("S G\n")
    player = Player(0, 0, clock=lambda: now[0])
    player.start_movement((50.0, 50.0), (100.0, 50.0))
    now[0] = 1.0
    draw_grid(pygame.Surface((900, 600)), grid, player, _fonts, 1.0, 1.0, set())
    assert player.is_moving is False
    assert player.current_position == (100.0, 50.0)
import random

import pygame
import pytest

from hexescape.app import Game, main, map_key
from hexescape.grid import CellType
from hexescape.logic import Key
from hexescape.maploader import parse_grid


def _game(text, seed=0):
    return Game(parse_grid(text), random.Random(seed))


def _settle(game):
    game.player.is_moving = False


def _walls(game):
    return sum(1 for cell in game.grid.cells() if cell.type is CellType.WALL)


@pytest.mark.parametrize(
    "code, key",
    [
        (pygame.K_w, Key.W),
        (pygame.K_e, Key.E),
        (pygame.K_a, Key.A),
        (pygame.K_d, Key.D),
        (pygame.K_z, Key.Z),
        (pygame.K_x, Key.X),
        (pygame.K_SPACE, Key.SPACE),
        (pygame.K_ESCAPE, Key.ESCAPE),
        (pygame.K_p, Key.P),
    ],
)
def test_map_key_known_keys(code, key):
    assert map_key(code) is key


def test_map_key_unknown_key_is_none():
    assert map_key(pygame.K_q) is None


def test_game_requires_start_cell():
    with pytest.raises(ValueError):
        _game("  G\n")


def test_game_requires_goal_cell():
    with pytest.raises(ValueError):
        _game("S  \n")


def test_game_places_player_on_start():
    game = _game("  \n S\n G\n")
    start = next(c for c in game.grid.cells() if c.type is CellType.START)
    assert (game.player.row, game.player.col) == (start.row, start.col)
    assert game.turn_count == 0


def test_press_moves_player_and_counts_turn():
    game = _game("S  G\n")
    game.press(Key.D)
    assert (game.player.row, game.player.col) == (0, 1)
    assert game.turn_count == 1
    assert game.player.energy == 1


def test_press_p_leaves_player_in_place():
    game = _game("S  G\n")
    game.press(Key.P)
    assert (game.player.row, game.player.col) == (0, 0)
    assert game.turn_count == 0


def test_wall_appears_after_five_turns():
    game = _game("S    \n     \n    G\n", seed=3)
    assert _walls(game) == 0
    for key in (Key.D, Key.A, Key.D, Key.A, Key.D):
        game.press(key)
        _settle(game)
    assert game.turn_count == 5
    assert _walls(game) == 1
    wall = next(c for c in game.grid.cells() if c.type is CellType.WALL)
    assert (wall.row, wall.col) != (game.player.row, game.player.col)


def test_update_carries_player_along_conveyor():
    game = _game("SB  G\n")
    game.press(Key.D)
    _settle(game)
    game.update()
    assert (game.player.row, game.player.col) == (0, 2)
    assert game.turn_count == 1
    assert game.player.energy == 2
    _settle(game)
    game.update()
    assert (game.player.row, game.player.col) == (0, 2)


def test_escape_before_victory_keeps_running():
    game = _game("S G\n")
    game.press(Key.ESCAPE)
    assert game.running is True


def test_reaching_goal_shows_victory_and_escape_closes():
    game = _game("S G\n")
    game.press(Key.D)
    _settle(game)
    game.press(Key.D)
    assert game.player.has_won is True
    assert game.show_victory_screen is False
    game.update()
    assert game.game_won is True
    assert game.show_victory_screen is True
    assert game.victory_started_at is not None and game.victory_started_at >= 0
    game.press(Key.ESCAPE)
    assert game.running is False


def test_main_with_missing_map_returns_one(tmp_path):
    assert main(["--map", str(tmp_path / "missing.txt")]) == 1


def test_main_with_map_without_goal_returns_one(tmp_path):
    path = tmp_path / "map.txt"
    path.write_text("S  \n   \n", encoding="utf-8")
    assert main(["--map", str(path)]) == 1
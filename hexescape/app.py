"""The game window: state of a running game, input handling and the main loop."""

from __future__ import annotations

import argparse
import functools
import random
import sys
import time
from typing import Optional, Sequence

import pygame

from hexescape.grid import HexGrid
from hexescape.logic import (
    Key,
    find_goal_cell,
    find_start_cell,
    handle_conveyor_movement,
    handle_player_movement,
)
from hexescape.maploader import load_grid
from hexescape.player import Player
from hexescape.render_grid import draw_grid
from hexescape.render_hud import (
    draw_controls,
    draw_energy_bar,
    draw_game_info,
    draw_victory_screen,
)
from hexescape.turns import TurnSystem

WINDOW_WIDTH = 900
WINDOW_HEIGHT = 600
MAP_PATH = "resources/map.txt"
FONT_PATH = "resources/arial.ttf"
WINDOW_TITLE = "HexEscape: Fábrica de Rompecabezas Elite"
FRAME_RATE = 60
BACKGROUND = (5, 10, 20)

_KEYMAP = {
    pygame.K_w: Key.W,
    pygame.K_e: Key.E,
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_z: Key.Z,
    pygame.K_x: Key.X,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_p: Key.P,
}


def map_key(pygame_key: int) -> Optional[Key]:
    """Translate a pygame key code to a game key, or None if the game ignores it."""
    return _KEYMAP.get(pygame_key)


class Game:
    """A game in progress on one map."""

    def __init__(self, grid: HexGrid, rng: Optional[random.Random] = None) -> None:
        start = find_start_cell(grid)
        goal = find_goal_cell(grid)
        if start is None:
            raise ValueError("the map has no start cell")
        if goal is None:
            raise ValueError("the map has no goal cell")
        self.grid = grid
        self.goal = goal
        self.player = Player(start.row, start.col)
        self.turns = TurnSystem(rng=rng)
        self.path_cells: set[tuple[int, int]] = set()
        self.game_won = False
        self.show_victory_screen = False
        self.running = True
        self.victory_started_at: Optional[float] = None

    @property
    def turn_count(self) -> int:
        return self.turns.turn_count

    def press(self, key: Key) -> None:
        """React to one key press."""
        if key is Key.ESCAPE:
            if self.show_victory_screen:
                self.running = False
            return
        handle_player_movement(key, self.player, self.grid, self.turns)

    def update(self) -> None:
        """Advance the game by one frame: detect victory and apply conveyors."""
        if not self.game_won and self.player.has_won:
            self.game_won = True
            self.show_victory_screen = True
            self.victory_started_at = time.monotonic()
        if not self.show_victory_screen:
            handle_conveyor_movement(self.player, self.grid)


def _font_factory(path: str):
    @functools.lru_cache(maxsize=None)
    def factory(size: int, bold: bool) -> pygame.font.Font:
        font = pygame.font.Font(path, size)
        font.set_bold(bold)
        return font

    return factory


def _run(game: Game, font_path: str) -> int:
    surface = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    pygame.display.set_caption(WINDOW_TITLE)

    fonts = _font_factory(font_path)
    try:
        fonts(16, False)
    except (OSError, pygame.error) as exc:
        print(f"No se pudo cargar la fuente {font_path}: {exc}", file=sys.stderr)
        return 1

    clock = pygame.time.Clock()
    anim_start = bg_start = time.monotonic()

    while game.running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                game.running = False
            elif event.type == pygame.KEYDOWN:
                key = map_key(event.key)
                if key is not None:
                    game.press(key)

        game.update()
        if not game.running:
            break

        now = time.monotonic()
        surface.fill(BACKGROUND)
        if game.show_victory_screen:
            victory_time = now - (game.victory_started_at or now)
            draw_victory_screen(surface, fonts, game.player.win_time,
                                game.turn_count, victory_time)
        else:
            anim_time = now - anim_start
            draw_grid(surface, game.grid, game.player, fonts, anim_time,
                      now - bg_start, game.path_cells)
            draw_energy_bar(surface, game.player, fonts, anim_time)
            draw_game_info(surface, fonts, game.turn_count, anim_time)
            draw_controls(surface, fonts, anim_time)

        pygame.display.flip()
        clock.tick(FRAME_RATE)

    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load a map and play it in a window; return the exit status."""
    parser = argparse.ArgumentParser(prog="hexescape", description="Hexagonal maze game.")
    parser.add_argument("--map", default=MAP_PATH, help="map file to play")
    parser.add_argument("--font", default=FONT_PATH, help="TrueType font for the interface")
    args = parser.parse_args(argv)

    try:
        grid = load_grid(args.map)
    except OSError:
        print(f"Error al abrir el archivo: {args.map}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Mapa no válido: {exc}", file=sys.stderr)
        return 1

    try:
        game = Game(grid)
    except ValueError:
        return 1

    pygame.init()
    try:
        return _run(game, args.font)
    finally:
        pygame.quit()
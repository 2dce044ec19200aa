"""Drawing of the background, title, HUD panels and victory screen."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Callable, Sequence

import pygame

from hexescape.turns import DEFAULT_TURNS_PER_WALL

if TYPE_CHECKING:
    from hexescape.player import Player

Color = tuple[int, int, int, int]
Point = tuple[float, float]
FontFactory = Callable[[int, bool], "pygame.font.Font"]

NEON_BLUE: Color = (0, 200, 255, 255)
NEON_GREEN: Color = (0, 255, 150, 255)
NEON_PURPLE: Color = (180, 100, 255, 255)
NEON_ORANGE: Color = (255, 150, 0, 255)
ELECTRIC_YELLOW: Color = (255, 255, 0, 255)
CYBER_WHITE: Color = (240, 240, 255, 255)
TECH_GRAY: Color = (70, 90, 120, 255)
DARK_BLUE: Color = (20, 40, 80, 255)
PANEL_FILL: Color = (20, 40, 80, 200)
LOW_ENERGY: Color = (255, 100, 100, 255)
VICTORY_GRADIENT_END: Color = (40, 20, 80, 255)

_BG_TOP: Color = (15, 25, 60, 255)
_BG_MID: Color = (25, 45, 90, 255)
_BG_BOTTOM: Color = (35, 55, 110, 255)

_CONTROLS = ("W/E: UP", "A/D: SIDE", "Z/X: DOWN", "SPACE: POWER")


def _clamp(value: float) -> int:
    return max(0, min(255, int(value)))


def _rgba(color: Sequence[int]) -> Color:
    if len(color) == 3:
        return (int(color[0]), int(color[1]), int(color[2]), 255)
    return (int(color[0]), int(color[1]), int(color[2]), int(color[3]))


def _with_alpha(color: Sequence[int], alpha: float) -> Color:
    r, g, b, _ = _rgba(color)
    return (r, g, b, _clamp(alpha))


def _pulsed(color: Sequence[int], factor: float) -> Color:
    """Scale red and green by factor, keeping blue: the glow used for yellow."""
    r, g, b, _ = _rgba(color)
    return (_clamp(r * factor), _clamp(g * factor), b, 255)


def _scaled(color: Sequence[int], factor: float) -> Color:
    r, g, b, _ = _rgba(color)
    return (_clamp(r * factor), _clamp(g * factor), _clamp(b * factor), 255)


def lerp_color(a: Sequence[int], b: Sequence[int], t: float) -> Color:
    """Linear interpolation between two colours, component by component."""
    return tuple(_clamp(x + (y - x) * t) for x, y in zip(_rgba(a), _rgba(b)))  # type: ignore[return-value]


def performance_rating(win_time: float, turn_count: int) -> tuple[str, Color]:
    """Label and colour rating how fast the level was finished."""
    if win_time < 30 and turn_count < 20:
        return "RENDIMIENTO LEGENDARIO", ELECTRIC_YELLOW
    if win_time < 60 and turn_count < 35:
        return "EXCELENTE ESTRATEGIA", NEON_PURPLE
    if win_time < 120:
        return "BUEN TRABAJO", NEON_GREEN
    return "MISION CUMPLIDA", NEON_BLUE


def turns_until_wall(turn_count: int, turns_per_wall: int = DEFAULT_TURNS_PER_WALL) -> int:
    """Turns left before the next wall appears; 0 right after one appeared."""
    if turns_per_wall < 1:
        raise ValueError(f"turns_per_wall must be at least 1, got {turns_per_wall}")
    remaining = turns_per_wall - (turn_count % turns_per_wall)
    return 0 if remaining == turns_per_wall else remaining


def _hexagon(center: Point, radius: float, angle: float) -> list[Point]:
    cx, cy = center
    points = []
    for i in range(6):
        theta = math.radians(angle + i * 60.0 - 90.0)
        points.append((cx + radius * math.cos(theta), cy + radius * math.sin(theta)))
    return points


def _layer_for(points: Sequence[Point], pad: int) -> tuple[pygame.Surface, int, int]:
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    left = math.floor(min(xs)) - pad
    top = math.floor(min(ys)) - pad
    width = math.ceil(max(xs)) - left + pad + 1
    height = math.ceil(max(ys)) - top + pad + 1
    return pygame.Surface((width, height), pygame.SRCALPHA), left, top


def _draw_polygon(
    surface: pygame.Surface, color: Sequence[int], points: Sequence[Point], width: int = 0
) -> None:
    rgba = _rgba(color)
    if rgba[3] == 0:
        return
    if rgba[3] == 255:
        pygame.draw.polygon(surface, rgba, points, width)
        return
    layer, left, top = _layer_for(points, width + 2)
    pygame.draw.polygon(layer, rgba, [(x - left, y - top) for x, y in points], width)
    surface.blit(layer, (left, top))


def _draw_rect(
    surface: pygame.Surface, color: Sequence[int], rect: pygame.Rect, width: int = 0
) -> None:
    rgba = _rgba(color)
    if rgba[3] == 0 or rect.width <= 0 or rect.height <= 0:
        return
    if rgba[3] == 255:
        if width == 0:
            surface.fill(rgba, rect)
        else:
            pygame.draw.rect(surface, rgba, rect, width)
        return
    layer = pygame.Surface(rect.size, pygame.SRCALPHA)
    pygame.draw.rect(layer, rgba, layer.get_rect(), width)
    surface.blit(layer, rect.topleft)


def _rect(x: float, y: float, w: float, h: float) -> pygame.Rect:
    return pygame.Rect(round(x), round(y), round(w), round(h))


def _panel(
    surface: pygame.Surface,
    rect: pygame.Rect,
    fill: Sequence[int],
    outline: Sequence[int],
    thickness: int,
) -> None:
    """Filled rectangle with an outline drawn outside its bounds."""
    _draw_rect(surface, fill, rect)
    _draw_rect(surface, outline, rect.inflate(2 * thickness, 2 * thickness), thickness)


def _draw_circle(
    surface: pygame.Surface, color: Sequence[int], center: Point, radius: float
) -> None:
    rgba = _rgba(color)
    cx, cy = center
    pad = math.ceil(radius) + 1
    layer = pygame.Surface((2 * pad + 1, 2 * pad + 1), pygame.SRCALPHA)
    pygame.draw.circle(layer, rgba, (pad, pad), radius)
    surface.blit(layer, (round(cx) - pad, round(cy) - pad))


def _text(
    surface: pygame.Surface,
    font_factory: FontFactory,
    string: str,
    size: int,
    color: Sequence[int],
    *,
    bold: bool = False,
    topleft: Point | None = None,
    center: Point | None = None,
) -> pygame.Rect:
    rgba = _rgba(color)
    image = font_factory(size, bold).render(string, True, rgba[:3])
    if rgba[3] < 255:
        image.set_alpha(rgba[3])
    rect = image.get_rect()
    if center is not None:
        rect.center = (round(center[0]), round(center[1]))
    elif topleft is not None:
        rect.topleft = (round(topleft[0]), round(topleft[1]))
    surface.blit(image, rect)
    return rect


def draw_decorative_hex(
    surface: pygame.Surface,
    position: Point,
    size: float,
    color: Sequence[int],
    angle: float,
) -> None:
    """Hexagon outline of the given radius centred at position, rotated by angle degrees."""
    _draw_polygon(surface, color, _hexagon(position, size, angle), 2)


def draw_victory_screen(
    surface: pygame.Surface,
    font_factory: FontFactory,
    win_time: float,
    turn_count: int,
    time: float,
) -> None:
    """Full-screen victory panel with the game statistics."""
    width, height = surface.get_size()

    for y in range(0, height, 4):
        color = lerp_color(DARK_BLUE, VICTORY_GRADIENT_END, y / height)
        surface.fill(color, pygame.Rect(0, y, width, 4))

    for i in range(20):
        x = 100 + (i % 4) * 200 + math.sin(time + i) * 50
        y = 100 + (i // 4) * 100 + math.cos(time * 1.5 + i) * 30
        base = (NEON_BLUE, NEON_GREEN, NEON_PURPLE)[i % 3]
        draw_decorative_hex(
            surface, (x, y), 15 + (i % 3) * 5, _with_alpha(base, 100),
            time * (1 + i % 3) * 30.0,
        )

    cx, cy = width / 2.0, height / 2.0

    for i, base in enumerate((ELECTRIC_YELLOW, NEON_BLUE, NEON_PURPLE)):
        _draw_polygon(
            surface,
            _with_alpha(base, 150 - i * 30),
            _hexagon((cx, cy), 120 + i * 25, time * 20.0 * (i + 1)),
            3,
        )

    _panel(surface, _rect(cx - 200, cy - 125, 400, 250), PANEL_FILL, NEON_BLUE, 2)

    for i in range(6):
        intensity = math.sin(time * 4.0 + i) * 0.5 + 0.5
        px = cx + (i % 3 - 1) * 100
        py = cy - 80 + (i // 3) * 160
        _draw_rect(surface, _with_alpha(NEON_GREEN, 100 + 100 * intensity),
                   _rect(px - 75, py - 1, 150, 2))

    glow = math.sin(time * 6.0) * 0.4 + 0.6
    _text(surface, font_factory, "VICTORY", 48, _pulsed(ELECTRIC_YELLOW, glow),
          bold=True, center=(cx, cy - 60))
    _text(surface, font_factory, "MISION COMPLETADA", 16, CYBER_WHITE, center=(cx, cy - 20))
    _text(surface, font_factory, f"TIEMPO TOTAL: {int(win_time)} SEGUNDOS", 14,
          NEON_GREEN, center=(cx, cy + 15))
    _text(surface, font_factory, f"TURNOS EJECUTADOS: {turn_count}", 14,
          NEON_BLUE, center=(cx, cy + 35))

    label, label_color = performance_rating(win_time, turn_count)
    _text(surface, font_factory, label, 13, label_color, center=(cx, cy + 65))

    exit_alpha = math.sin(time * 3.0) * 100 + 155
    _text(surface, font_factory, "PRESIONA ESC PARA SALIR", 11,
          _with_alpha(CYBER_WHITE, exit_alpha), center=(cx, cy + 95))


def draw_game_title(surface: pygame.Surface, font_factory: FontFactory, time: float) -> None:
    """Game title and subtitle at the top of the window."""
    width, _ = surface.get_size()
    cx = width / 2.0

    for i in range(8):
        angle = (i / 8.0) * 2 * 3.14159
        x = cx + math.cos(angle + time * 0.5) * 120
        y = 30 + math.sin(angle + time * 0.5) * 15
        base = NEON_BLUE if i % 2 == 0 else NEON_GREEN
        draw_decorative_hex(surface, (x, y), 8, _with_alpha(base, 120), time * 45.0 * 30.0)

    title = "HexEscape"
    title_width, _ = font_factory(36, True).size(title)
    title_y = 15.0
    _text(surface, font_factory, title, 36, ELECTRIC_YELLOW, bold=True,
          topleft=((width - title_width) / 2.0, title_y))

    subtitle = "FABRICA DE ROMPECABEZAS ELITE"
    subtitle_width, _ = font_factory(12, False).size(subtitle)
    subtitle_x = (width - subtitle_width) / 2.0
    subtitle_y = title_y + 40.0

    _draw_rect(surface, NEON_BLUE, _rect(subtitle_x - 90, subtitle_y + 8, 80, 2))
    _text(surface, font_factory, subtitle, 12, CYBER_WHITE, topleft=(subtitle_x, subtitle_y))
    _draw_rect(surface, NEON_BLUE,
               _rect(subtitle_x + subtitle_width + 10, subtitle_y + 8, 80, 2))


def draw_animated_background(surface: pygame.Surface, time: float) -> None:
    """Moving gradient with drifting hexagons and faint circuit lines."""
    width, height = surface.get_size()

    for y in range(0, height, 3):
        gradient = y / height
        wave = math.sin(time * 2.0 + gradient * 8.0) * 0.2 + 0.8
        if gradient < 0.5:
            color = lerp_color(_BG_TOP, _BG_MID, gradient * 2.0 * wave)
        else:
            color = lerp_color(_BG_MID, _BG_BOTTOM, (gradient - 0.5) * 2.0 * wave)
        surface.fill(color, pygame.Rect(0, y, width, 3))

    palette = (NEON_BLUE, NEON_GREEN, NEON_PURPLE, NEON_ORANGE)
    for i in range(25):
        x = math.fmod(time * 40.0 + i * 50.0, width + 100.0) - 50.0
        y = 100.0 + math.sin(time * 1.2 + i * 0.5) * 40.0 + i * 20.0
        if y < height:
            draw_decorative_hex(surface, (x, y), 3 + (i % 3),
                                _with_alpha(palette[i % 4], 80 + (i % 50)),
                                time * 60.0 * 30.0)

    for i in range(8):
        y = i * height / 8.0 + math.sin(time * 1.5 + i) * 20
        intensity = math.sin(time * 3.0 + i * 0.8) * 0.3 + 0.4
        _draw_rect(surface, _with_alpha(NEON_BLUE, 50 * intensity), _rect(0, y, width, 1))


def draw_energy_bar(
    surface: pygame.Surface, player: "Player", font_factory: FontFactory, time: float
) -> None:
    """Energy bar in the lower-left corner with the ability hint above it."""
    _, height = surface.get_size()
    bar_width, bar_height = 240.0, 20.0
    bar_x, bar_y = 25.0, height - 80.0

    for i in range(3):
        draw_decorative_hex(surface, (bar_x - 20 + i * 20, bar_y + 10), 6,
                            _with_alpha(NEON_GREEN, 100), time * 90.0 * 30.0)

    _panel(surface, _rect(bar_x, bar_y, bar_width, bar_height),
           (20, 40, 80, 180), TECH_GRAY, 2)

    for i in range(1, 10):
        _draw_rect(surface, _with_alpha(TECH_GRAY, 100),
                   _rect(bar_x + (bar_width / 10.0) * i, bar_y, 1, bar_height))

    percentage = player.energy_percentage()
    fill_width = bar_width * percentage
    if fill_width > 0:
        if player.is_energy_full():
            pulse = math.sin(time * 8.0) * 0.4 + 0.6
            energy_color = _pulsed(ELECTRIC_YELLOW, pulse)
            for i in range(5):
                spark_x = bar_x + fill_width * 0.8 + i * 10
                spark_y = bar_y + 10 + math.sin(time * 12.0 + i) * 5
                _draw_circle(surface, (255, 255, 255, 200), (spark_x + 2, spark_y + 2), 2)
        elif percentage > 0.6:
            energy_color = NEON_GREEN
        elif percentage > 0.3:
            energy_color = NEON_ORANGE
        else:
            energy_color = LOW_ENERGY

        _draw_rect(surface, energy_color, _rect(bar_x, bar_y, fill_width, bar_height))

        for i in range(3):
            line_x = bar_x + fill_width * 0.3 + i * (fill_width * 0.25)
            if line_x < bar_x + fill_width - 5:
                intensity = math.sin(time * 10.0 + i * 2.0) * 0.5 + 0.5
                _draw_rect(surface, (255, 255, 255, _clamp(150 * intensity)),
                           _rect(line_x, bar_y + 3, 2, bar_height - 6))

    _text(surface, font_factory, f"ENERGIA: {player.energy}/{player.MAX_ENERGY}", 14,
          CYBER_WHITE, bold=True, topleft=(bar_x, bar_y - 22))

    if player.can_use_wall_break():
        pulse = math.sin(time * 8.0) * 0.5 + 0.5
        _text(surface, font_factory, "SPACE: DESTRUIR PARED", 13,
              _pulsed(ELECTRIC_YELLOW, pulse), bold=True, topleft=(bar_x, bar_y - 42))
    elif player.is_selecting_wall:
        _text(surface, font_factory, "SELECCIONA DIRECCION - ESC: CANCELAR", 12,
              NEON_ORANGE, topleft=(bar_x, bar_y - 42))
    else:
        _text(surface, font_factory, "ACUMULA ENERGIA PARA HABILIDADES", 11,
              (150, 180, 200, 255), topleft=(bar_x, bar_y - 42))


def draw_game_info(
    surface: pygame.Surface, font_factory: FontFactory, turn_count: int, time: float
) -> None:
    """Status panel on the right: turns, next wall and elapsed time."""
    width, _ = surface.get_size()
    _panel(surface, _rect(width - 160, 80, 140, 100), PANEL_FILL, NEON_BLUE, 2)

    corners = ((width - 155, 85), (width - 25, 85), (width - 155, 175), (width - 25, 175))
    for i, corner in enumerate(corners):
        base = NEON_GREEN if i % 2 == 0 else NEON_PURPLE
        draw_decorative_hex(surface, corner, 6, _with_alpha(base, 120), time * 60.0 * 30.0)

    for i in range(2):
        _draw_rect(surface, _with_alpha(NEON_GREEN, 80), _rect(width - 150, 105 + i * 25, 120, 1))

    left = width - 145
    _text(surface, font_factory, "STATUS", 12, CYBER_WHITE, bold=True, topleft=(left, 90))
    _text(surface, font_factory, f"TURNS: {turn_count}", 11, CYBER_WHITE, topleft=(left, 110))
    _text(surface, font_factory, f"WALL: {turns_until_wall(turn_count)}", 11, CYBER_WHITE,
          topleft=(left, 125))
    _text(surface, font_factory, f"TIME: {int(time)}S", 10, CYBER_WHITE, topleft=(left, 140))
    _text(surface, font_factory, "SYSTEM: ONLINE", 10, CYBER_WHITE, topleft=(left, 155))


def draw_controls(surface: pygame.Surface, font_factory: FontFactory, time: float) -> None:
    """Panel listing the keyboard controls."""
    width, _ = surface.get_size()
    _panel(surface, _rect(width - 160, 190, 140, 100), PANEL_FILL, NEON_PURPLE, 2)

    for i in range(4):
        base = NEON_BLUE if i % 2 == 0 else NEON_GREEN
        draw_decorative_hex(surface, (width - 145 + (i % 2) * 30, 205 + (i // 2) * 50), 5,
                            _with_alpha(base, 80), (time * 45.0 + i * 60) * 30.0)

    left = width - 145
    _text(surface, font_factory, "CONTROLS", 12, CYBER_WHITE, bold=True, topleft=(left, 200))
    for i, label in enumerate(_CONTROLS):
        _text(surface, font_factory, label, 10, CYBER_WHITE, topleft=(left, 220 + i * 14))

    _draw_rect(surface, _with_alpha(NEON_PURPLE, 150), _rect(width - 150, 275, 120, 1))
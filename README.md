# hexescape

A puzzle game played on a hexagonal grid. You start on the `S` cell and must
reach the `G` cell. Conveyor belts carry you along, every fifth move a new wall
appears on a random empty cell, and once your energy bar is full you can break
a wall next to you.

## Installing

```
pip install .
```

## Playing

```
hexescape [--map MAP_FILE] [--font FONT_FILE]
```

`--map` defaults to `resources/map.txt` and `--font` to
`resources/arial.ttf`, both relative to the current directory. The package
ships neither a map nor a font: supply your own. The command exits with
status 1 if the map cannot be read, is malformed, or has no start or no goal
cell, or if the font cannot be loaded.

The window is 900×600 and runs at 60 frames per second.

Controls:

| Key         | Action                                                  |
|-------------|---------------------------------------------------------|
| `W` / `E`   | move up-left / up-right                                 |
| `A` / `D`   | move left / right                                       |
| `Z` / `X`   | move down-left / down-right                             |
| `SPACE`     | enter wall-break mode (needs full energy); again to cancel |
| direction   | in wall-break mode: break the wall in that direction    |
| `ESC`       | quit from the victory screen                            |

Rules:

- Each successful step, manual or by conveyor, earns one point of energy; ten
  points fill the bar. Breaking a wall empties it.
- Only manual steps count as turns. On every fifth turn a wall is placed on a
  random empty cell other than the player's.
- Standing still on a conveyor moves you one cell in its direction, unless a
  wall or the edge of the grid is in the way.
- Reaching the goal shows a victory screen with the time taken, the number of
  turns and a rating.

## Map files

A map is a plain UTF-8 text file, one row per line. Blank lines are ignored.
The width is taken from the first row; a shorter later row is an error, and
characters beyond the width are ignored.

| Char  | Cell                 |
|-------|----------------------|
| `S`   | start                |
| `G`   | goal                 |
| `#`   | wall                 |
| `K`   | item                 |
| `A`   | conveyor up-right    |
| `B`   | conveyor right       |
| `C`   | conveyor down-right  |
| `D`   | conveyor down-left   |
| `E`   | conveyor left        |
| `F`   | conveyor up-left     |
| other | empty                |

Odd rows are shifted half a cell to the right.

## Using the library

```python
from hexescape.maploader import parse_grid
from hexescape.logic import find_start_cell, find_goal_cell

grid = parse_grid("S..#\n.B.G\n")
start = find_start_cell(grid)
goal = find_goal_cell(grid)
print(start.row, start.col, goal.row, goal.col)
```

The game can be driven without a window through `hexescape.app.Game`. Its
constructor takes a `HexGrid` and an optional `random.Random` for wall
placement, and raises `ValueError` if the grid has no start or goal cell.
`Game.press` takes a `hexescape.logic.Key`; `Game.update` applies conveyors
and detects victory. The modules are:

- `hexescape.grid` – `CellType`, `HexCell`, `HexGrid`
- `hexescape.player` – `Player` (position, energy, move animation)
- `hexescape.maploader` – `parse_grid`, `load_grid`, character mapping
- `hexescape.conveyor` – `conveyor_offset`
- `hexescape.turns` – `TurnSystem`
- `hexescape.logic` – `Key` and the movement and wall-breaking rules
- `hexescape.render_grid`, `hexescape.render_hud` – drawing with pygame
- `hexescape.app` – `Game`, `map_key` and the `main` entry point

## What it does not do

The game does not search for a path to the goal. `Game.path_cells` is drawn
with a red outline, but nothing in the package fills it, and the `P` key has
no effect.

## Running the tests

```
pip install .[test]
pytest
```
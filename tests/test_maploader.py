import pytest

from hexescape.grid import CellType
from hexescape.maploader import (
    cell_type_from_char,
    cell_type_to_string,
    load_grid,
    parse_grid,
)


@pytest.mark.parametrize("ch", list("SG#KABCDEF"))
def test_char_round_trip(ch):
    assert cell_type_to_string(cell_type_from_char(ch)) == ch


def test_every_type_round_trips_through_its_string():
    for cell_type in CellType:
        if cell_type is CellType.EMPTY:
            continue
        assert cell_type_from_char(cell_type_to_string(cell_type)) is cell_type


@pytest.mark.parametrize("ch", [".", " ", "x", "0", "?"])
def test_unknown_chars_are_empty(ch):
    assert cell_type_from_char(ch) is CellType.EMPTY


def test_empty_displays_as_space():
    assert cell_type_to_string(CellType.EMPTY) == " "


def test_specific_letters():
    assert cell_type_from_char("S") is CellType.START
    assert cell_type_from_char("#") is CellType.WALL
    assert cell_type_from_char("A") is CellType.UP_RIGHT
    assert cell_type_from_char("F") is CellType.UP_LEFT


def test_parse_grid_skips_blank_lines():
    grid = parse_grid("S.#\n\n.BG\n\n")
    assert grid.rows == 2
    assert grid.cols == 3
    assert grid.at(0, 0).type is CellType.START
    assert grid.at(0, 2).type is CellType.WALL
    assert grid.at(1, 1).type is CellType.RIGHT
    assert grid.at(1, 2).type is CellType.GOAL
    assert grid.at(1, 0).type is CellType.EMPTY


def test_parse_grid_rendering_round_trip():
    text = "S.#K\nABCD\nEF.G"
    grid = parse_grid(text)
    rendered = [
        "".join(cell_type_to_string(grid.at(r, c).type) for c in range(grid.cols))
        for r in range(grid.rows)
    ]
    assert rendered == [line.replace(".", " ") for line in text.splitlines()]


def test_parse_grid_empty_text():
    grid = parse_grid("")
    assert (grid.rows, grid.cols) == (0, 0)
    assert list(grid.cells()) == []


def test_parse_grid_short_line_raises():
    with pytest.raises(ValueError):
        parse_grid("S..\n.G")


def test_parse_grid_long_line_truncated_to_first_width():
    grid = parse_grid("S.\n.G#")
    assert grid.cols == 2
    assert grid.at(1, 1).type is CellType.GOAL


def test_load_grid_matches_parse(tmp_path):
    text = "S..#\n.AB.\n#..G\n"
    path = tmp_path / "map.txt"
    path.write_text(text, encoding="utf-8")
    loaded = load_grid(path)
    parsed = parse_grid(text)
    assert (loaded.rows, loaded.cols) == (parsed.rows, parsed.cols)
    assert [c.type for c in loaded.cells()] == [c.type for c in parsed.cells()]


def test_load_grid_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_grid(tmp_path / "missing.txt")
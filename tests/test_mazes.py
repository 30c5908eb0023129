import random

import pytest

from cses_kit.mazes import escape_monsters, labyrinth

_STEPS = {"D": (1, 0), "U": (-1, 0), "L": (0, -1), "R": (0, 1)}


def _locate(grid, mark):
    return next((i, j) for i, row in enumerate(grid) for j, char in enumerate(row) if char == mark)


def _walk(grid, path):
    x, y = _locate(grid, "A")
    cells = [(x, y)]
    for move in path:
        dx, dy = _STEPS[move]
        x, y = x + dx, y + dy
        assert 0 <= x < len(grid) and 0 <= y < len(grid[0])
        assert grid[x][y] != "#"
        cells.append((x, y))
    return cells


def test_labyrinth_neighbouring_goal():
    assert labyrinth(["AB"]) == "R"


def test_labyrinth_blocked():
    assert labyrinth(["A#B"]) is None


def test_labyrinth_around_wall():
    assert labyrinth(["A.", "#B"]) == "RD"


def test_labyrinth_missing_goal_raises():
    with pytest.raises(ValueError):
        labyrinth(["A.."])


def test_labyrinth_ragged_grid_raises():
    with pytest.raises(ValueError):
        labyrinth(["A..", "B"])


@pytest.mark.parametrize("seed", range(6))
def test_labyrinth_path_reaches_goal(seed):
    rng = random.Random(seed)
    cells = [["#" if rng.random() < 0.25 else "." for _ in range(7)] for _ in range(6)]
    cells[0][0] = "A"
    cells[5][6] = "B"
    grid = ["".join(row) for row in cells]
    path = labyrinth(grid)
    if path is not None:
        walked = _walk(grid, path)
        assert walked[-1] == (5, 6)
        assert len(path) >= 5 + 6
        assert len(set(walked)) == len(walked)


def test_escape_already_on_border():
    assert escape_monsters(["A"]) == ""


def test_escape_single_exit():
    assert escape_monsters(["###", "#A.", "###"]) == "R"


def test_escape_monster_guards_exit():
    assert escape_monsters(["###", "#A.", "##M"]) is None


def test_escape_walled_in():
    assert escape_monsters(["###", "#A#", "###"]) is None


def test_escape_missing_person_raises():
    with pytest.raises(ValueError):
        escape_monsters(["..", ".M"])


@pytest.mark.parametrize("seed", range(6))
def test_escape_path_ends_on_border(seed):
    rng = random.Random(seed)
    cells = [["#" if rng.random() < 0.2 else "." for _ in range(9)] for _ in range(9)]
    cells[4][4] = "A"
    cells[rng.randrange(9)][0] = "M"
    grid = ["".join(row) for row in cells]
    path = escape_monsters(grid)
    if path is not None:
        x, y = _walk(grid, path)[-1]
        assert x in (0, 8) or y in (0, 8)
        assert grid[x][y] != "M"
        assert len(path) >= 4
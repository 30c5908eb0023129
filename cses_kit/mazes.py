"""Shortest escapes through character grids."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Iterator, Sequence

WALL = "#"
START = "A"
GOAL = "B"
MONSTER = "M"

Cell = tuple[int, int]

_MOVES = ((1, 0, "D"), (-1, 0, "U"), (0, -1, "L"), (0, 1, "R"))


def _rows(grid: Sequence[str]) -> list[str]:
    rows = list(grid)
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("grid must be rectangular")
    return rows


def _cells(rows: list[str], mark: str) -> list[Cell]:
    return [(i, j) for i, row in enumerate(rows) for j, char in enumerate(row) if char == mark]


def _find(rows: list[str], mark: str) -> Cell:
    found = _cells(rows, mark)
    if not found:
        raise ValueError(f"grid has no {mark!r} cell")
    return found[-1]


def _bfs(rows: list[str], sources: Iterable[Cell]) -> tuple[dict[Cell, int], dict[Cell, tuple[Cell, str]]]:
    height, width = len(rows), len(rows[0])
    dist: dict[Cell, int] = {}
    parent: dict[Cell, tuple[Cell, str]] = {}
    queue: deque[Cell] = deque()
    for cell in sources:
        if cell not in dist:
            dist[cell] = 0
            queue.append(cell)
    while queue:
        x, y = queue.popleft()
        for dx, dy, letter in _MOVES:
            nx, ny = x + dx, y + dy
            if 0 <= nx < height and 0 <= ny < width and rows[nx][ny] != WALL and (nx, ny) not in dist:
                dist[(nx, ny)] = dist[(x, y)] + 1
                parent[(nx, ny)] = ((x, y), letter)
                queue.append((nx, ny))
    return dist, parent


def _path(parent: dict[Cell, tuple[Cell, str]], start: Cell, end: Cell) -> str:
    letters = []
    current = end
    while current != start:
        current, letter = parent[current]
        letters.append(letter)
    return "".join(reversed(letters))


def labyrinth(grid: Sequence[str]) -> str | None:
    """Shortest route from ``A`` to ``B`` as moves ``UDLR``, or None if blocked."""
    rows = _rows(grid)
    start, goal = _find(rows, START), _find(rows, GOAL)
    dist, parent = _bfs(rows, [start])
    if goal not in dist:
        return None
    return _path(parent, start, goal)


def _border(height: int, width: int) -> Iterator[Cell]:
    for col in range(width):
        yield 0, col
        yield height - 1, col
    for row in range(height):
        yield row, 0
        yield row, width - 1


def escape_monsters(grid: Sequence[str]) -> str | None:
    """Moves taking ``A`` to the border before any monster can reach that cell.

    Returns the move string (empty when ``A`` is on the border), or None.
    """
    rows = _rows(grid)
    start = _find(rows, START)
    monster_dist, _ = _bfs(rows, _cells(rows, MONSTER))
    person_dist, parent = _bfs(rows, [start])
    for cell in _border(len(rows), len(rows[0])):
        x, y = cell
        if rows[x][y] == WALL:
            continue
        if person_dist.get(cell, math.inf) < monster_dist.get(cell, math.inf):
            return _path(parent, start, cell)
    return None
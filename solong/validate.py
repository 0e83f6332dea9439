"""Checks that a map grid is a playable, enclosed and solvable level."""

from __future__ import annotations

from typing import Optional, Sequence

from solong.mapfile import MapError

WALL = "1"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
FILLED = "F"

Position = tuple[int, int]


def find_player(grid: Sequence[str]) -> Optional[Position]:
    """Return the (x, y) of the first player tile, or None if there is none."""
    for y, row in enumerate(grid):
        x = row.find(PLAYER)
        if x >= 0:
            return x, y
    return None


def check_walls(grid: Sequence[str]) -> bool:
    """True for a rectangle of at least 3x3 whose border is all walls."""
    if len(grid) < 3:
        return False
    width = len(grid[0])
    if width < 3:
        return False
    if any(len(row) != width for row in grid):
        return False
    if set(grid[0]) != {WALL} or set(grid[-1]) != {WALL}:
        return False
    return all(row[0] == WALL and row[-1] == WALL for row in grid)


def check_components(grid: Sequence[str]) -> bool:
    """True for exactly one player, exactly one exit and at least one collectible."""
    text = "".join(grid)
    return (
        text.count(PLAYER) == 1
        and text.count(EXIT) == 1
        and text.count(COLLECTIBLE) > 0
    )


def flood_fill(grid: Sequence[str], start: Position, barrier: str = WALL) -> list[str]:
    """Return a copy of the grid with every tile reachable from ``start`` set to 'F'.

    Movement is orthogonal and stops at ``barrier`` tiles and the grid edge.
    """
    cells = [list(row) for row in grid]
    stack = [start]
    while stack:
        x, y = stack.pop()
        if not (0 <= y < len(cells) and 0 <= x < len(cells[y])):
            continue
        if cells[y][x] in (FILLED, barrier):
            continue
        cells[y][x] = FILLED
        stack.extend(((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)))
    return ["".join(row) for row in cells]


def all_reachable(grid: Sequence[str]) -> bool:
    """True when the player can reach every collectible and the exit."""
    start = find_player(grid)
    if start is None:
        raise ValueError("map has no player")
    filled = flood_fill(grid, start, WALL)
    return not any(COLLECTIBLE in row or EXIT in row for row in filled)


def validate_map(grid: Sequence[str]) -> list[str]:
    """Return the rows of a valid map; raise :class:`MapError` otherwise."""
    if not check_walls(grid):
        raise MapError("map must be a rectangle enclosed by walls")
    if not check_components(grid):
        raise MapError("map needs one player, one exit and at least one collectible")
    if not all_reachable(grid):
        raise MapError("not every collectible and the exit can be reached")
    return list(grid)
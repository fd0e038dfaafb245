"""Map extraction and validation for scene files.

A grid is a list of map rows as read from the file; rows may keep their
trailing newline, which counts as an open cell.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

_MAP_RUN = re.compile(r"[1 \t]{4,}")
_ALLOWED = frozenset("10NSWE \n\t")
_DIRECTIONS = "NSWE"
_WALKABLE = frozenset("0NSWE")
_OPEN = frozenset(" \n")


def is_map_line(line: str | None) -> bool:
    """Tell whether ``line`` looks like a map row: a run of four or more of '1', space, tab."""
    if line is None:
        return False
    return _MAP_RUN.search(line) is not None


def is_blank(line: str | None) -> bool:
    """Tell whether ``line`` holds nothing but spaces, tabs and newlines."""
    if line is None:
        return True
    return all(ch in " \n\t" for ch in line)


def extract_map(lines: Iterable[str]) -> list[str]:
    """Return the rows from the first map-looking line to the end."""
    grid: list[str] = []
    started = False
    for line in lines:
        if not started and is_map_line(line):
            started = True
        if started:
            grid.append(line)
    return grid


def has_invalid_chars(grid: Sequence[str]) -> bool:
    """Tell whether any row holds a character that is not allowed in a map."""
    return any(ch not in _ALLOWED for row in grid for ch in row)


def find_player_direction(grid: Sequence[str]) -> str | None:
    """Return the player's facing letter, or None unless exactly one player is present."""
    found = [ch for row in grid for ch in row if ch in _DIRECTIONS]
    if len(found) != 1:
        return None
    return found[0]


def has_gap_lines(grid: Sequence[str]) -> bool:
    """Tell whether a blank row is followed by a non-blank one."""
    return any(is_blank(row) and not is_blank(nxt) for row, nxt in zip(grid, grid[1:]))


def _cell(grid: Sequence[str], y: int, x: int) -> str:
    if y < 0 or y >= len(grid) or x < 0:
        return ""
    row = grid[y]
    return row[x] if x < len(row) else ""


def _is_open(cell: str) -> bool:
    return cell == "" or cell in _OPEN


def borders_open(grid: Sequence[str]) -> bool:
    """Tell whether any walkable cell touches the edge or an empty cell."""
    height = len(grid)
    for y, row in enumerate(grid):
        if (y == 0 or y == height - 1) and any(ch in _WALKABLE for ch in row):
            return True
        for x, ch in enumerate(row):
            if ch not in _WALKABLE:
                continue
            if x == 0:
                return True
            neighbours = (
                _cell(grid, y, x + 1),
                _cell(grid, y, x - 1),
                _cell(grid, y - 1, x),
                _cell(grid, y + 1, x),
            )
            if any(_is_open(cell) for cell in neighbours):
                return True
    return False


def validate_map(grid: Sequence[str]) -> str:
    """Check the map and return the player's facing letter.

    Raises ValueError when the map holds a bad character, does not have
    exactly one player, has a blank row inside it, or is not closed.
    """
    if has_invalid_chars(grid):
        raise ValueError("map contains an invalid character")
    direction = find_player_direction(grid)
    if direction is None:
        raise ValueError("map must contain exactly one player")
    if has_gap_lines(grid):
        raise ValueError("map contains an empty line")
    if borders_open(grid):
        raise ValueError("map is not closed by walls")
    return direction


def count_width(grid: Sequence[str]) -> int:
    """Length of the longest row, newline included."""
    return max((len(row) for row in grid), default=0)


def count_height(grid: Sequence[str]) -> int:
    """Number of rows."""
    return len(grid)
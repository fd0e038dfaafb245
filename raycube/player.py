"""The player: position, view angle, rotation and collision-checked movement."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from raycube.angles import normalize_angle, start_angle

UNIT_SIZE = 30
MOVE_SPEED = 5
ROTATE_SPEED = 5 * (math.pi / 180)

_PLAYER_CELLS = frozenset("NSWE")


def _blocked(grid: Sequence[str], py: int, px: int) -> bool:
    if py < 0 or px < 0:
        return True
    row, col = py // UNIT_SIZE, px // UNIT_SIZE
    if row >= len(grid) or col >= len(grid[row]):
        return True
    return grid[row][col] == "1"


def can_move_to(grid: Sequence[str], x: float, y: float) -> bool:
    """Tell whether a point keeps MOVE_SPEED clearance from walls along both axes."""
    tx, ty = math.floor(x), math.floor(y)
    offsets = range(-MOVE_SPEED, MOVE_SPEED + 1)
    if any(_blocked(grid, ty + i, tx) for i in offsets):
        return False
    return not any(_blocked(grid, ty, tx + i) for i in offsets)


def find_player(grid: Sequence[str]) -> tuple[float, float]:
    """Return the centre of the (last) player cell in world coordinates."""
    position: tuple[float, float] | None = None
    for row_index, row in enumerate(grid):
        for col_index, ch in enumerate(row):
            if ch in _PLAYER_CELLS:
                position = (
                    float(col_index * UNIT_SIZE + UNIT_SIZE // 2),
                    float(row_index * UNIT_SIZE + UNIT_SIZE // 2),
                )
    if position is None:
        raise ValueError("map has no player")
    return position


@dataclass
class Player:
    """Player state in world coordinates, angle in radians (y grows downwards)."""

    x: float
    y: float
    angle: float
    rotate_speed: float = ROTATE_SPEED
    move_speed: float = MOVE_SPEED

    @classmethod
    def from_grid(cls, grid: Sequence[str], direction: str) -> Player:
        """Place a player on its map cell, facing ``direction``."""
        x, y = find_player(grid)
        return cls(x=x, y=y, angle=start_angle(direction))

    def rotate_right(self) -> None:
        """Turn clockwise by one rotation step."""
        self.angle = normalize_angle(self.angle + self.rotate_speed)

    def rotate_left(self) -> None:
        """Turn anticlockwise by one rotation step."""
        self.angle = normalize_angle(self.angle - self.rotate_speed)

    def _step(self, grid: Sequence[str], heading: float, steps: float) -> bool:
        new_x = self.x + math.cos(heading) * steps
        new_y = self.y + math.sin(heading) * steps
        if not can_move_to(grid, new_x, new_y):
            return False
        self.x, self.y = new_x, new_y
        return True

    def move_forward(self, grid: Sequence[str]) -> bool:
        """Step along the view direction; return whether the move happened."""
        return self._step(grid, self.angle, self.move_speed)

    def move_backward(self, grid: Sequence[str]) -> bool:
        """Step against the view direction; return whether the move happened."""
        return self._step(grid, self.angle, -self.move_speed)

    def move_right(self, grid: Sequence[str]) -> bool:
        """Strafe to the right; return whether the move happened."""
        return self._step(grid, self.angle + math.pi / 2, self.move_speed)

    def move_left(self, grid: Sequence[str]) -> bool:
        """Strafe to the left; return whether the move happened."""
        return self._step(grid, self.angle + math.pi / 2, -self.move_speed)
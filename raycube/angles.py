"""Angle helpers for a y-down screen coordinate system."""

from __future__ import annotations

import math

TWO_PI = 2 * math.pi

_START_ANGLES = {
    "N": (3 * math.pi) / 2,
    "S": math.pi / 2,
    "E": 2 * math.pi,
    "W": math.pi,
}


def normalize_angle(angle: float) -> float:
    """Bring ``angle`` into the range [0, 2π)."""
    angle = math.fmod(angle, TWO_PI)
    if angle < 0:
        angle += TWO_PI
    return angle


def is_facing_down(angle: float) -> bool:
    """Tell whether the angle points towards increasing y."""
    return 0 < angle < math.pi


def is_facing_up(angle: float) -> bool:
    """Tell whether the angle points towards decreasing y."""
    return math.pi < angle < TWO_PI


def is_facing_right(angle: float) -> bool:
    """Tell whether the angle points towards increasing x."""
    return angle > 3 * math.pi / 2 or angle < math.pi / 2


def is_facing_left(angle: float) -> bool:
    """Tell whether the angle points towards decreasing x."""
    return math.pi / 2 < angle < 3 * math.pi / 2


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(x2 - x1, y2 - y1)


def start_angle(direction: str) -> float:
    """Return the initial view angle for a player facing letter N, S, E or W."""
    try:
        return _START_ANGLES[direction]
    except KeyError:
        raise ValueError(f"unknown direction {direction!r}") from None
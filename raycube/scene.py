"""Scene description files: texture paths, colours and the map."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from itertools import takewhile

from raycube.linereader import read_lines
from raycube.mapgrid import count_height, count_width, extract_map, is_map_line, validate_map
from raycube.textutil import atoi, is_digits, split_any, trim

_TEXTURE_KEYS = ("NO", "SO", "WE", "EA")
_COLOR_KEYS = ("F", "C")
_ALL_KEYS = _TEXTURE_KEYS + _COLOR_KEYS


class SceneError(ValueError):
    """Raised when a scene file or its contents are not valid."""


@dataclass
class Scene:
    """A fully validated scene."""

    north: str
    south: str
    west: str
    east: str
    floor: tuple[int, int, int]
    ceiling: tuple[int, int, int]
    grid: list[str] = field(default_factory=list)
    direction: str = "N"
    width: int = 0
    height: int = 0


def check_filename(name: str) -> str:
    """Return ``name`` if it holds exactly one '.', which starts a final ".cub"."""
    dots = name.count(".")
    if dots != 1 or not name.endswith(".cub"):
        raise SceneError(f"not a .cub file name: {name!r}")
    return name


def parse_color(text: str) -> tuple[int, int, int]:
    """Parse "R,G,B" with each part 0-255, at most three digits."""
    if text.count(",") != 2:
        raise SceneError(f"colour must have exactly two commas: {text!r}")
    parts = split_any(text, ",\n")
    for part in parts:
        value = atoi(part)
        if value < 0 or value > 255 or len(part) > 3 or not is_digits(part):
            raise SceneError(f"bad colour component {part!r}")
    if len(parts) != 3:
        raise SceneError(f"colour must have three components: {text!r}")
    red, green, blue = (atoi(part) for part in parts)
    return red, green, blue


def element_lines(lines: Iterable[str]) -> list[str]:
    """Return the lines that come before the first map row."""
    return list(takewhile(lambda line: not is_map_line(line), lines))


def parse_elements(lines: Iterable[str]) -> dict[str, str]:
    """Read the six identifier lines into a mapping of identifier to value.

    Raises SceneError when there are no lines, when the identifiers do not
    add up to six, when an unknown identifier appears, or when one of the
    six is missing.
    """
    lines = list(lines)
    if not lines:
        raise SceneError("no scene elements")
    values: dict[str, str | None] = {}
    count = 0
    unknown: str | None = None
    for line in lines:
        fields = split_any(line, " \t")
        if not fields:
            continue
        key = fields[0]
        if key in _ALL_KEYS:
            values[key] = trim(fields[1], "\n") if len(fields) > 1 else None
            count += 1
        elif 33 <= ord(key[0]) <= 126:
            unknown = key
    if count != len(_ALL_KEYS):
        raise SceneError("expected exactly six scene elements")
    if unknown:
        raise SceneError(f"unknown scene element {unknown!r}")
    missing = [key for key in _ALL_KEYS if values.get(key) is None]
    if missing:
        raise SceneError(f"missing scene elements: {', '.join(missing)}")
    return {key: value for key, value in values.items() if value is not None}


def parse_scene_lines(lines: Iterable[str]) -> Scene:
    """Build a Scene from the lines of a scene file."""
    lines = list(lines)
    elements = parse_elements(element_lines(lines))
    grid = extract_map(lines)
    if not grid:
        raise SceneError("scene has no map")
    try:
        direction = validate_map(grid)
    except ValueError as exc:
        raise SceneError(str(exc)) from exc
    return Scene(
        north=elements["NO"],
        south=elements["SO"],
        west=elements["WE"],
        east=elements["EA"],
        floor=parse_color(elements["F"]),
        ceiling=parse_color(elements["C"]),
        grid=grid,
        direction=direction,
        width=count_width(grid),
        height=count_height(grid),
    )


def parse_scene(path: str | os.PathLike[str]) -> Scene:
    """Check the file name, read the file and parse it."""
    check_filename(os.fspath(path))
    try:
        lines = read_lines(path)
    except OSError as exc:
        raise SceneError(f"cannot read scene: {exc}") from exc
    return parse_scene_lines(lines)
# raycube

The game-logic core of a grid-based first-person raycasting game: it reads
and validates `.cub` scene files and moves a player through the map with
wall collision. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

## The `.cub` format

A scene file holds six element lines, in any order, followed by the map:

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png
F 220,100,0
C 225,30,0

111111
100101
1010N1
111111
```

- `NO`, `SO`, `WE`, `EA`: paths to the wall textures (kept as text; the
  files are not opened).
- `F`, `C`: floor and ceiling colours as `R,G,B`: exactly two commas,
  three parts, each made only of digits, at most three characters, 0–255.
- Each of the six identifiers must appear, six element lines in all, and
  any other word before the map is an error.
- The map starts at the first line holding a run of four or more of `1`,
  space or tab, and runs to the end of the file. It may contain only `1`,
  `0`, `N`, `S`, `E`, `W`, spaces, tabs and newlines, exactly one of
  `N`, `S`, `E`, `W` (the player's start and facing), and no blank line
  followed by a non-blank one. A `0` or player cell may not lie on the first
  or last row or the first column, nor next to a space, a line end or a
  missing cell.

The file name must contain exactly one `.`, and end in `.cub`.

## Usage

```python
from raycube.scene import SceneError, parse_scene
from raycube.player import Player

try:
    scene = parse_scene("level.cub")
except SceneError as exc:
    print("Error:", exc)
else:
    player = Player.from_grid(scene.grid, scene.direction)
    player.rotate_right()
    moved = player.move_forward(scene.grid)   # False if a wall is in the way
    print(player.x, player.y, player.angle, moved)
```

### Modules

- `raycube.scene`: `parse_scene(path)` checks the name, reads the file and
  returns a `Scene` (`north`, `south`, `west`, `east`, `floor`, `ceiling`,
  `grid`, `direction`, `width`, `height`). `parse_scene_lines`,
  `parse_elements`, `element_lines`, `parse_color` and `check_filename` do
  the individual steps. Every problem is raised as `SceneError`, a
  subclass of `ValueError`.
- `raycube.mapgrid`: `extract_map`, `validate_map` (returns the facing
  letter, raises `ValueError`), and the separate checks `has_invalid_chars`,
  `find_player_direction`, `has_gap_lines`, `borders_open`, plus
  `is_map_line`, `is_blank`, `count_width`, `count_height`.
- `raycube.player`: `Player` holds `x`, `y` and `angle` in world units of
  30 per map cell, with y growing downwards. `Player.from_grid` puts the
  player at the centre of its cell; `rotate_left`/`rotate_right` turn by
  5°; `move_forward`, `move_backward`, `move_left`, `move_right` step 5
  units and return whether the move happened. `can_move_to` and
  `find_player` are available on their own.
- `raycube.angles`: `normalize_angle`, `is_facing_up`/`down`/`left`/`right`,
  `distance`, and `start_angle` (`N` 3π/2, `S` π/2, `E` 2π, `W` π).
- `raycube.linereader`: `LineReader` reads lines from a text stream in
  fixed-size chunks, keeping newlines; `read_lines(path)` reads a whole file.
- `raycube.textutil`: `split_any`, `trim`, `atoi`, `substr`, `is_digits`.

## What it does not do

This package casts no rays, draws nothing, opens no window and loads no
texture images, and it installs no command to run. It gives you a
validated scene and a movable player; drawing the view is left to the
program that uses it.

## Tests

```
pip install .[test]
pytest
```
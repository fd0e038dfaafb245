import pytest

from raycube.scene import (
    Scene,
    SceneError,
    check_filename,
    element_lines,
    parse_color,
    parse_elements,
    parse_scene,
    parse_scene_lines,
)

ELEMENTS = [
    "NO ./north.png\n",
    "SO ./south.png\n",
    "WE ./west.png\n",
    "EA ./east.png\n",
    "\n",
    "F 220,100,0\n",
    "C 225,30,0\n",
    "\n",
]
MAP = [
    "111111\n",
    "100001\n",
    "10N001\n",
    "100001\n",
    "111111\n",
]


def test_parse_scene_lines_full():
    scene = parse_scene_lines(ELEMENTS + MAP)
    assert isinstance(scene, Scene)
    assert scene.north == "./north.png"
    assert scene.south == "./south.png"
    assert scene.west == "./west.png"
    assert scene.east == "./east.png"
    assert scene.floor == (220, 100, 0)
    assert scene.ceiling == (225, 30, 0)
    assert scene.direction == "N"
    assert scene.grid == MAP
    assert scene.height == len(MAP)
    assert scene.width == len("111111\n")


def test_element_lines_stops_at_map():
    assert element_lines(ELEMENTS + MAP) == ELEMENTS


def test_parse_elements_values():
    values = parse_elements(ELEMENTS)
    assert values["NO"] == "./north.png"
    assert values["F"] == "220,100,0"
    assert set(values) == {"NO", "SO", "WE", "EA", "F", "C"}


def test_parse_elements_empty():
    with pytest.raises(SceneError):
        parse_elements([])


def test_parse_elements_duplicate_replaces_missing():
    lines = [line.replace("SO", "NO") for line in ELEMENTS]
    with pytest.raises(SceneError):
        parse_elements(lines)


def test_parse_elements_unknown_identifier():
    with pytest.raises(SceneError):
        parse_elements(ELEMENTS + ["XX ./x.png\n"])


def test_parse_elements_missing_one():
    with pytest.raises(SceneError):
        parse_elements(ELEMENTS[1:])


def test_parse_elements_identifier_without_value_is_unknown():
    lines = ["NO\n"] + ELEMENTS[1:]
    with pytest.raises(SceneError):
        parse_elements(lines)


@pytest.mark.parametrize("text", ["220,100,0", "220,100,0\n"])
def test_parse_color_valid(text):
    assert parse_color(text) == (220, 100, 0)


@pytest.mark.parametrize(
    "text",
    ["256,0,0", "1,2", "1,2,3,4", "a,1,2", "1,,2", "0010,1,1", "-1,2,3", "+1,2,3"],
)
def test_parse_color_invalid(text):
    with pytest.raises(SceneError):
        parse_color(text)


def test_scene_error_is_value_error():
    with pytest.raises(ValueError):
        parse_color("nope")


@pytest.mark.parametrize("name", ["map.cub", "maps/level.cub"])
def test_check_filename_valid(name):
    assert check_filename(name) == name


@pytest.mark.parametrize("name", ["map.cu", "a.b.cub", "./a.cub", "map", "map.cubx"])
def test_check_filename_invalid(name):
    with pytest.raises(SceneError):
        check_filename(name)


def test_map_without_elements():
    with pytest.raises(SceneError):
        parse_scene_lines(MAP)


def test_open_map_rejected():
    open_map = ["111111\n", "100001\n", "10N00 \n", "100001\n", "111111\n"]
    with pytest.raises(SceneError):
        parse_scene_lines(ELEMENTS + open_map)


def test_gap_in_map_rejected():
    gapped = MAP[:3] + ["\n"] + MAP[3:]
    with pytest.raises(SceneError):
        parse_scene_lines(ELEMENTS + gapped)


def test_two_players_rejected():
    two = ["111111\n", "1S0001\n", "10N001\n", "100001\n", "111111\n"]
    with pytest.raises(SceneError):
        parse_scene_lines(ELEMENTS + two)


def test_bad_color_in_scene_rejected():
    lines = [line.replace("220,100,0", "300,100,0") for line in ELEMENTS]
    with pytest.raises(SceneError):
        parse_scene_lines(lines + MAP)


def test_parse_scene_from_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "scene.cub").write_text("".join(ELEMENTS + MAP), encoding="utf-8")
    scene = parse_scene("scene.cub")
    assert scene.direction == "N"
    assert scene.grid == MAP
    assert scene.ceiling == (225, 30, 0)


def test_parse_scene_missing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SceneError):
        parse_scene("missing.cub")


def test_parse_scene_bad_extension(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "scene").write_text("".join(ELEMENTS + MAP), encoding="utf-8")
    with pytest.raises(SceneError):
        parse_scene("scene")
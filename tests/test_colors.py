import pytest

from cubscene.colors import get_colors, parse_color_value, parse_rgb
from cubscene.scene import SceneError


def test_parse_rgb_plain():
    assert parse_rgb("F 220,100,0") == (220, 100, 0)


def test_parse_rgb_with_spaces_around_components():
    assert parse_rgb("C 0 , 0 ,255 ") == (0, 0, 255)


def test_parse_rgb_with_tabs():
    assert parse_rgb("F\t12,\t34,\t56") == (12, 34, 56)


@pytest.mark.parametrize(
    "line",
    [
        "F 256,0,0",
        "F 1,2",
        "F 1,2,3,4",
        "F 1a,2,3",
        "F 0001,2,3",
        "F ,1,2,3",
        "F -1,2,3",
        "F 1,2,3 x",
        "F",
    ],
)
def test_parse_rgb_rejects_malformed_lines(line):
    with pytest.raises(SceneError):
        parse_rgb(line)


def test_parse_color_value_stops_before_comma():
    text = "F 42,7,9"
    value, pos = parse_color_value(text, 1)
    assert value == 42
    assert text[pos] == ","


def test_parse_color_value_at_end_of_text():
    text = "F 255"
    value, pos = parse_color_value(text, 1)
    assert value == 255
    assert pos == len(text)


def test_parse_color_value_rejects_letter():
    with pytest.raises(SceneError):
        parse_color_value("F x", 1)


def test_get_colors_finds_floor_and_ceiling():
    lines = ["NO ./a.xpm", "F 1,2,3", "C 4,5,6", "111"]
    assert get_colors(lines) == ((1, 2, 3), (4, 5, 6))


def test_get_colors_missing_gives_none():
    assert get_colors(["NO ./a.xpm", "111"]) == (None, None)


def test_get_colors_later_line_wins():
    floor, _ = get_colors(["F 1,2,3", "F 7,8,9"])
    assert floor == (7, 8, 9)


def test_get_colors_raises_on_bad_line():
    with pytest.raises(SceneError):
        get_colors(["F 1,2,3", "C 300,0,0"])
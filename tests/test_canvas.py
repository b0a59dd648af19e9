import math

import pytest
from PIL import Image

from playlab.painter.canvas import (
    BLUE_COLOR,
    GREEN_COLOR,
    RED_COLOR,
    WHITE_COLOR,
    Color,
    Painter,
    valid_color_value,
)


@pytest.fixture
def painter():
    return Painter()


@pytest.mark.parametrize(
    "rgb", [(0, 255, 0), (0, 255, 255), (0, 255, 1), (100, 255, 0)]
)
def test_set_color(painter, rgb):
    painter.color = Color(*rgb)
    painter.move_forward(20)
    assert painter.color.rgb == rgb
    assert painter.image.getpixel((painter.x, painter.y)) == rgb


@pytest.mark.parametrize(
    "num, angle, x, y, dx, dy",
    [
        (30, 0, 0, 0, 30, 0),
        (30, 90, 90, 90, 0, -30),
        (30, 60, 90, 90, 15, -25),
        (50, 120, 90, 90, -24, -43),
    ],
)
def test_jump_forward(painter, num, angle, x, y, dx, dy):
    painter.set_position(x, y)
    painter.angle = angle
    painter.jump_forward(num)
    assert abs(painter.x - x - dx) < 2
    assert abs(painter.y - y - dy) < 2


@pytest.mark.parametrize(
    "num, angle, x, y, dx, dy",
    [
        (50, 0, 90, 90, -50, 0),
        (40, 45, 90, 90, -28, 28),
        (40, 150, 90, 90, 34, 19),
        (15, 120, 90, 90, 7, 12),
    ],
)
def test_jump_backward(painter, num, angle, x, y, dx, dy):
    painter.set_position(x, y)
    painter.angle = angle
    painter.jump_backward(num)
    assert abs(painter.x - x - dx) < 2
    assert abs(painter.y - y - dy) < 2


@pytest.mark.parametrize(
    "degree, current, expected",
    [(30, 360, 30), (30, 180, 210), (-30, 120, 90), (0, 90, 90)],
)
def test_turn_left(painter, degree, current, expected):
    painter.angle = current
    painter.turn_left(degree)
    assert abs(painter.angle - expected) < 1e-6


@pytest.mark.parametrize(
    "degree, current, expected",
    [(-30, 360, 30), (30, 180, 150), (30, 0, -30), (0, 90, 90)],
)
def test_turn_right(painter, degree, current, expected):
    painter.angle = current
    painter.turn_right(degree)
    assert abs(painter.angle - expected) < 1e-6


@pytest.mark.parametrize("attempt", range(4))
def test_random_color_is_valid(painter, attempt):
    painter.random_color()
    assert all(valid_color_value(v) for v in painter.color.rgb)


def test_valid_color_value_bounds():
    assert valid_color_value(0)
    assert valid_color_value(255)
    assert not valid_color_value(-1)
    assert not valid_color_value(256)


def test_color_rejects_out_of_range():
    with pytest.raises(ValueError):
        Color(0, 300, 0)


def test_new_painter_starts_centered_on_blue(painter):
    assert (painter.x, painter.y) == (painter.width // 2, painter.height // 2)
    assert painter.angle == 0
    assert painter.color == WHITE_COLOR
    assert painter.image.getpixel((0, 0)) == BLUE_COLOR.rgb


def test_clear_keeps_pen_color(painter):
    painter.color = RED_COLOR
    painter.clear_with_bg_color(GREEN_COLOR)
    assert painter.color == RED_COLOR
    assert painter.image.getpixel((5, 5)) == GREEN_COLOR.rgb


def test_move_forward_draws_line(painter):
    start = (painter.x, painter.y)
    painter.move_forward(50)
    assert painter.image.getpixel(start) == WHITE_COLOR.rgb
    assert painter.image.getpixel((painter.x, painter.y)) == WHITE_COLOR.rgb
    assert painter.x - start[0] == 50


def test_move_backward_is_reverse_of_forward(painter):
    start = (painter.x, painter.y)
    painter.angle = 37
    painter.move_forward(40)
    painter.move_backward(40)
    assert (painter.x, painter.y) == start


def test_square_returns_to_start(painter):
    start = (painter.x, painter.y)
    painter.create_square(100)
    assert (painter.x, painter.y) == start
    assert math.isclose(math.fmod(painter.angle, 360), 0, abs_tol=1e-9)


def test_parallelogram_returns_to_start(painter):
    start = (painter.x, painter.y)
    painter.create_parallelogram(80)
    assert (painter.x, painter.y) == start
    assert math.isclose(painter.angle, 0, abs_tol=1e-9)


def test_circle_passes_through_pen(painter):
    painter.color = RED_COLOR
    start = (painter.x, painter.y)
    painter.create_circle(50)
    assert (painter.x, painter.y) == start
    assert painter.image.getpixel(start) == RED_COLOR.rgb
    assert painter.image.getpixel((start[0] + 50, start[1])) == BLUE_COLOR.rgb


def test_circle_off_canvas_does_not_fail(painter):
    painter.set_position(0, 0)
    painter.angle = 180
    painter.create_circle(30)
    assert painter.image.getpixel((0, 0)) == WHITE_COLOR.rgb


def test_save_round_trip(painter, tmp_path):
    painter.move_forward(30)
    path = tmp_path / "out.png"
    painter.save(path)
    with Image.open(path) as loaded:
        assert loaded.size == (painter.width, painter.height)
        assert list(loaded.convert("RGB").getdata()) == list(painter.image.getdata())
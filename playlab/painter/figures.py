"""A gallery of figures drawn with the painter, and a command to render them."""

import argparse

from .canvas import (
    BLACK_COLOR,
    GREEN_COLOR,
    RED_COLOR,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    WHITE_COLOR,
    YELLOW_COLOR,
    Painter,
)

FIGURE_COUNT = 15


def _square(p):
    p.color = WHITE_COLOR
    for _ in range(4):
        p.move_forward(100)
        p.turn_right(90)


def _triangle(p):
    p.color = WHITE_COLOR
    p.clear_with_bg_color(GREEN_COLOR)
    for _ in range(3):
        p.turn_left(120)
        p.move_forward(100)


def _filled_triangle(p):
    cur_x, cur_y = p.x, p.y
    p.color = WHITE_COLOR
    p.turn_left(60)
    size = 150
    for i in range(size):
        for _ in range(3):
            p.turn_left(120)
            p.move_forward(size - i)
        p.set_position(cur_x, cur_y)
        p.jump_backward(i + 1)
    p.set_position(cur_x, cur_y)


def _octagon(p):
    p.set_position(350, 500)
    p.color = YELLOW_COLOR
    for _ in range(8):
        p.move_forward(150)
        p.turn_left(45)


def _five_star(p):
    p.set_position(350, 200)
    p.color = YELLOW_COLOR
    for _ in range(5):
        p.move_forward(200)
        p.turn_right(144)


def _star_of_david(p):
    p.set_position(350, 400)
    p.color = YELLOW_COLOR
    p.turn_left(60)
    for _ in range(3):
        p.move_forward(150)
        p.turn_left(120)
    p.turn_left(30)
    p.jump_forward(int(150 * 2 / 1.73205080757))
    p.turn_left(150)
    for _ in range(3):
        p.move_forward(150)
        p.turn_left(120)


def _crossing_lines(p):
    p.color = WHITE_COLOR
    for _ in range(8):
        p.move_forward(100)
        p.move_backward(100)
        p.turn_left(45)


def _six_squares(p):
    for _ in range(6):
        for _ in range(4):
            p.move_forward(100)
            p.turn_right(90)
        p.turn_left(60)


def _circles_in_line(p):
    p.color = RED_COLOR
    p.set_position(150, 150)
    for _ in range(10):
        p.create_circle(100)
        p.jump_forward(30)


def _circles_in_circle(p):
    p.set_position(350, 150)
    p.clear_with_bg_color(BLACK_COLOR)
    for _ in range(20):
        p.random_color()
        p.create_circle(100)
        p.jump_forward(1)
        p.create_circle(100)
        p.jump_forward(50)
        p.turn_right(18)


def _ten_squares(p):
    p.color = WHITE_COLOR
    for _ in range(10):
        p.create_square(100)
        p.turn_right(36)


def _radiating_lines(p):
    for _ in range(90):
        p.random_color()
        p.move_forward(150)
        p.jump_backward(150)
        p.turn_right(4)


def _ten_parallelograms(p):
    p.color = WHITE_COLOR
    for _ in range(10):
        p.create_parallelogram(100)
        p.turn_right(36)


def _five_and_five_circles(p):
    p.color = WHITE_COLOR
    p.clear_with_bg_color(GREEN_COLOR)
    for _ in range(5):
        p.create_circle(100)
        p.create_circle(50)
        p.turn_right(72)


def _snow_flake(p):
    p.color = WHITE_COLOR
    size = 40
    for _ in range(8):
        p.move_forward(size)
        for _ in range(3):
            p.turn_left(45)
            p.move_forward(size)
            p.jump_backward(size)
            p.turn_right(90)
            p.move_forward(size)
            p.jump_backward(size)
            p.turn_left(45)
            p.move_forward(size)
        p.jump_backward(4 * size)
        p.turn_right(45)


_FIGURES = (
    _square,
    _triangle,
    _filled_triangle,
    _octagon,
    _five_star,
    _star_of_david,
    _crossing_lines,
    _six_squares,
    _circles_in_line,
    _circles_in_circle,
    _ten_squares,
    _radiating_lines,
    _ten_parallelograms,
    _five_and_five_circles,
    _snow_flake,
)


def draw_figure(painter, number):
    """Draw figure *number* (0..14) with *painter*.

    Raises ValueError for any other number.
    """
    if not 0 <= number < len(_FIGURES):
        raise ValueError(f"figure number must be in 0..{len(_FIGURES) - 1}, got {number}")
    _FIGURES[number](painter)


def main(argv=None):
    """Render one figure to an image file."""
    parser = argparse.ArgumentParser(description="Draw a painter figure.")
    parser.add_argument("figure", nargs="?", type=int, default=0)
    parser.add_argument("--output", "-o", default="painter.png")
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH)
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT)
    args = parser.parse_args(argv)

    painter = Painter(args.width, args.height)
    draw_figure(painter, args.figure % FIGURE_COUNT)
    painter.save(args.output)
    print(f"Figure {args.figure % FIGURE_COUNT} written to {args.output}")
    return 0
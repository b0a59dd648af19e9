import random

import pytest

from playlab.snake import app
from playlab.snake.app import direction_for_key, render_board
from playlab.snake.game import BOARD_COLOR, CELL_SIZE, LINE_COLOR, Game
from playlab.snake.position import Direction, Position


def _game():
    return Game(rng=random.Random(0))


def _center(pos):
    return (pos.x * CELL_SIZE + CELL_SIZE // 2, pos.y * CELL_SIZE + CELL_SIZE // 2)


@pytest.mark.parametrize(
    "key, expected",
    [
        (app.KEY_UP, Direction.UP),
        (app.KEY_DOWN, Direction.DOWN),
        (app.KEY_LEFT, Direction.LEFT),
        (app.KEY_RIGHT, Direction.RIGHT),
    ],
)
def test_arrow_keys_map_to_directions(key, expected):
    assert direction_for_key(key) == expected


def test_other_keys_give_none():
    assert direction_for_key(ord("x")) is None
    assert direction_for_key(-1) is None


def test_image_size_follows_board():
    game = Game(10, 8, rng=random.Random(1))
    image = render_board(game)
    assert image.size == (10 * CELL_SIZE, 8 * CELL_SIZE)


def test_grid_lines_and_background():
    image = render_board(_game())
    assert image.getpixel((0, 0)) == LINE_COLOR
    assert image.getpixel((CELL_SIZE, 7)) == LINE_COLOR
    assert image.getpixel((2, 2)) == BOARD_COLOR


def test_cherry_and_head_are_drawn():
    game = _game()
    image = render_board(game)
    assert image.getpixel(_center(game.cherry_position)) == app.CHERRY_COLOR
    head = game.snake_positions()[-1]
    assert image.getpixel(_center(head)) == app.HEAD_COLOR


def test_cell_margin_left_as_background():
    game = _game()
    head = game.snake_positions()[-1]
    image = render_board(game)
    corner = (head.x * CELL_SIZE + 2, head.y * CELL_SIZE + 2)
    assert image.getpixel(corner) == BOARD_COLOR


def test_body_segments_show_orientation():
    game = _game()
    start = game.snake_positions()[-1]
    right = Position(start.x + 1, start.y)
    down = Position(right.x, right.y + 1)
    game.snake.grow_at_front(right)
    game.snake.grow_at_front(down)
    image = render_board(game)
    assert image.getpixel(_center(down)) == app.HEAD_COLOR
    assert image.getpixel(_center(right)) == app.VERTICAL_BODY_COLOR
    assert image.getpixel(_center(start)) == app.HORIZONTAL_BODY_COLOR


def test_rendering_does_not_change_game():
    game = _game()
    before = (game.snake_positions(), game.cherry_position, game.score)
    render_board(game)
    assert (game.snake_positions(), game.cherry_position, game.score) == before


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as info:
        app.main(["--help"])
    assert info.value.code == 0
    assert "--snapshot" in capsys.readouterr().out
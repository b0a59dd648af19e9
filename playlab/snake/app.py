"""Front end for the snake game: board rendering and a terminal player."""

import argparse
import random
import time

from PIL import Image, ImageDraw

from .game import (
    BOARD_COLOR,
    BOARD_HEIGHT,
    BOARD_WIDTH,
    CELL_SIZE,
    LINE_COLOR,
    STEP_DELAY,
    WINDOW_TITLE,
    Game,
)
from .position import Direction

# Key codes as reported by curses for the arrow keys.
KEY_DOWN = 258
KEY_UP = 259
KEY_LEFT = 260
KEY_RIGHT = 261

_KEY_DIRECTIONS = {
    KEY_UP: Direction.UP,
    KEY_DOWN: Direction.DOWN,
    KEY_LEFT: Direction.LEFT,
    KEY_RIGHT: Direction.RIGHT,
}

CELL_MARGIN = 5

CHERRY_COLOR = (220, 20, 60)
HEAD_COLOR = (0, 200, 0)
HORIZONTAL_BODY_COLOR = (0, 150, 0)
VERTICAL_BODY_COLOR = (0, 110, 0)

_EMPTY_GLYPH = "."
_CHERRY_GLYPH = "*"
_HEAD_GLYPH = "@"
_HORIZONTAL_GLYPH = "-"
_VERTICAL_GLYPH = "|"


def direction_for_key(key):
    """Return the Direction an arrow key code stands for, or None for other keys."""
    return _KEY_DIRECTIONS.get(key)


def _snake_cells(positions):
    """Yield (position, is_head, is_horizontal) for each body segment, head first."""
    if not positions:
        return
    yield positions[-1], True, True
    for current, following in zip(reversed(positions[:-1]), reversed(positions[1:])):
        yield current, False, current.y == following.y


def render_board(game):
    """Draw the board, its grid, the cherry and the snake onto a new RGB image."""
    width = game.width * CELL_SIZE
    height = game.height * CELL_SIZE
    image = Image.new("RGB", (width, height), BOARD_COLOR)
    draw = ImageDraw.Draw(image)

    for column in range(game.width + 1):
        x = column * CELL_SIZE
        draw.line([(x, 0), (x, height)], fill=LINE_COLOR)
    for row in range(game.height + 1):
        y = row * CELL_SIZE
        draw.line([(0, y), (width, y)], fill=LINE_COLOR)

    def fill_cell(pos, color):
        left = pos.x * CELL_SIZE + CELL_MARGIN
        top = pos.y * CELL_SIZE + CELL_MARGIN
        size = CELL_SIZE - 2 * CELL_MARGIN
        draw.rectangle((left, top, left + size - 1, top + size - 1), fill=color)

    fill_cell(game.cherry_position, CHERRY_COLOR)
    for pos, is_head, horizontal in _snake_cells(game.snake_positions()):
        if is_head:
            color = HEAD_COLOR
        elif horizontal:
            color = HORIZONTAL_BODY_COLOR
        else:
            color = VERTICAL_BODY_COLOR
        fill_cell(pos, color)
    return image


def _board_lines(game):
    rows = [[_EMPTY_GLYPH] * game.width for _ in range(game.height)]

    def put(pos, glyph):
        if pos.is_inside_box(0, 0, game.width, game.height):
            rows[pos.y][pos.x] = glyph

    put(game.cherry_position, _CHERRY_GLYPH)
    for pos, is_head, horizontal in _snake_cells(game.snake_positions()):
        if is_head:
            glyph = _HEAD_GLYPH
        elif horizontal:
            glyph = _HORIZONTAL_GLYPH
        else:
            glyph = _VERTICAL_GLYPH
        put(pos, glyph)
    return ["".join(row) for row in rows]


def _show(screen, lines, curses):
    screen.erase()
    for row, line in enumerate(lines):
        try:
            screen.addstr(row, 0, line)
        except curses.error:
            pass
    screen.refresh()


def _draw_game(screen, game, curses):
    lines = [WINDOW_TITLE, *_board_lines(game), f"Score: {game.score}"]
    _show(screen, lines, curses)


def _run(screen, game, delay, curses):
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    screen.keypad(True)

    screen.nodelay(False)
    _show(screen, ["Press any key to start game"], curses)
    screen.getch()

    screen.nodelay(True)
    _draw_game(screen, game, curses)
    start = time.monotonic()
    while game.is_game_running():
        key = screen.getch()
        while key != -1:
            direction = direction_for_key(key)
            if direction is not None:
                game.process_user_input(direction)
            key = screen.getch()

        now = time.monotonic()
        if now - start > delay:
            game.next_step()
            _draw_game(screen, game, curses)
            start = now
        time.sleep(0.001)

    screen.nodelay(False)
    _show(
        screen,
        [*_board_lines(game), f"Game over. Score: {game.score}", "Press any key"],
        curses,
    )
    screen.getch()


def main(argv=None):
    """Play the snake game in the terminal."""
    parser = argparse.ArgumentParser(description="Play the snake game.")
    parser.add_argument("--width", type=int, default=BOARD_WIDTH)
    parser.add_argument("--height", type=int, default=BOARD_HEIGHT)
    parser.add_argument("--delay", type=float, default=STEP_DELAY)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--snapshot", default=None, help="save the final board as an image")
    args = parser.parse_args(argv)

    import curses

    game = Game(args.width, args.height, rng=random.Random(args.seed))
    curses.wrapper(_run, game, args.delay, curses)
    print(f"Score: {game.score}")
    if args.snapshot:
        render_board(game).save(args.snapshot)
    return 0
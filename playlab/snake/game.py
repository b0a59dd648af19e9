"""Board state and rules of the snake game."""

import random
from collections import deque
from enum import Enum, IntEnum

from .position import Direction, Position
from .snake import Snake

SCREEN_WIDTH = 900
SCREEN_HEIGHT = 600
WINDOW_TITLE = "Snake Game"

BOARD_WIDTH = 30
BOARD_HEIGHT = 20
CELL_SIZE = 30

BOARD_COLOR = (0, 0, 0)
LINE_COLOR = (128, 128, 128)

STEP_DELAY = 0.2


class GameStatus(IntEnum):
    """State of a game; the stopped states carry the STOP bit."""

    RUNNING = 1
    STOP = 2
    WON = 4 | 2
    OVER = 8 | 2


class CellType(Enum):
    """What occupies a board cell."""

    EMPTY = 0
    SNAKE = 1
    CHERRY = 2
    OFF_BOARD = 3


_VERTICAL = (Direction.UP, Direction.DOWN)
_HORIZONTAL = (Direction.LEFT, Direction.RIGHT)


class Game:
    """A snake game on a width x height board."""

    def __init__(self, width=BOARD_WIDTH, height=BOARD_HEIGHT, rng=None):
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.squares = [[CellType.EMPTY] * width for _ in range(height)]
        self.status = GameStatus.RUNNING
        self.score = 0
        self.current_direction = Direction.RIGHT
        self.cherry_position = Position()
        self._input_queue = deque()
        self.snake = Snake(self, Position(width // 2, height // 2))
        self.add_cherry()

    def is_game_running(self):
        """Return True while the game has not stopped."""
        return self.status == GameStatus.RUNNING

    def is_game_over(self):
        """Return True once the snake has crashed."""
        return self.status == GameStatus.OVER

    def process_user_input(self, direction):
        """Queue a direction requested by the player."""
        self._input_queue.append(direction)

    def can_change(self, current, next_direction):
        """Return True when the snake may turn from *current* to *next_direction*."""
        if current in _VERTICAL:
            return next_direction in _HORIZONTAL
        return next_direction in _VERTICAL

    def next_step(self):
        """Apply the first allowed queued turn, then move the snake one step."""
        while self._input_queue:
            candidate = self._input_queue.popleft()
            if self.can_change(self.current_direction, candidate):
                self.current_direction = candidate
                break
        self.snake.move(self.current_direction)

    def snake_move_to(self, position):
        """Update the board for the snake's head entering *position*."""
        cell = self.cell_type(position)
        if cell in (CellType.OFF_BOARD, CellType.SNAKE):
            self.status = GameStatus.OVER
            return
        self.set_cell_type(position, CellType.SNAKE)
        if cell is CellType.CHERRY:
            self.score += 1
            self.snake.eat_cherry()
            self.add_cherry()

    def snake_leave(self, position):
        """Mark *position* empty once the snake has left it."""
        self.set_cell_type(position, CellType.EMPTY)

    def add_cherry(self):
        """Place a cherry on a random empty cell.

        If no empty cell is left, the board is full and the game is won.
        """
        if not any(CellType.EMPTY in row for row in self.squares):
            self.status = GameStatus.WON
            return
        while True:
            pos = Position(self.rng.randrange(self.width), self.rng.randrange(self.height))
            if self.cell_type(pos) is CellType.EMPTY:
                self.cherry_position = pos
                self.set_cell_type(pos, CellType.CHERRY)
                return

    def set_cell_type(self, pos, cell_type):
        """Set the cell at *pos*; positions off the board are ignored."""
        if pos.is_inside_box(0, 0, self.width, self.height):
            self.squares[pos.y][pos.x] = cell_type

    def cell_type(self, pos):
        """Return what occupies *pos*, or OFF_BOARD outside the board."""
        if pos.is_inside_box(0, 0, self.width, self.height):
            return self.squares[pos.y][pos.x]
        return CellType.OFF_BOARD

    def snake_positions(self):
        """Return the snake's body positions from tail to head."""
        return self.snake.positions()
"""Grid positions and movement directions for the snake game."""

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """A direction the snake can head in."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


_STEPS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class Position:
    """A cell on the board; y grows downwards."""

    x: int = 0
    y: int = 0

    def move(self, direction):
        """Return the neighbouring position one step towards *direction*.

        Raises ValueError for anything that is not a Direction.
        """
        try:
            dx, dy = _STEPS[direction]
        except (KeyError, TypeError):
            raise ValueError(f"unknown direction: {direction!r}") from None
        return Position(self.x + dx, self.y + dy)

    def is_inside_box(self, left, top, width, height):
        """Return True when the position lies in the given half-open box."""
        return left <= self.x < left + width and top <= self.y < top + height
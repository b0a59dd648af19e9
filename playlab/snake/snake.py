"""The snake: a chain of board positions from tail to head."""

from collections import deque


class Snake:
    """A snake living on a game board.

    The game object must provide snake_move_to, snake_leave and
    is_game_over.
    """

    def __init__(self, game, start):
        self._game = game
        self._body = deque([start])
        self.cherry = 0
        game.snake_move_to(start)

    @property
    def head(self):
        """Position of the snake's head."""
        return self._body[-1]

    @property
    def tail(self):
        """Position of the snake's tail."""
        return self._body[0]

    def __len__(self):
        return len(self._body)

    def positions(self):
        """Return the body positions ordered from tail to head."""
        return list(self._body)

    def eat_cherry(self):
        """Store one more eaten cherry, to be used for growing."""
        self.cherry += 1

    def grow_at_front(self, new_position):
        """Add a new head at *new_position*, keeping the tail."""
        self._body.append(new_position)

    def slide_to(self, new_position):
        """Move the tail segment to *new_position*, making it the new head."""
        self._body.popleft()
        self._body.append(new_position)

    def move(self, direction):
        """Advance the head one step in *direction*, growing if a cherry is stored."""
        new_position = self.head.move(direction)
        self._game.snake_move_to(new_position)
        if self._game.is_game_over():
            return
        if self.cherry > 0:
            self.cherry -= 1
            self.grow_at_front(new_position)
        else:
            self._game.snake_leave(self.tail)
            self.slide_to(new_position)
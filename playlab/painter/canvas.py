"""A turtle-style painter drawing on an in-memory RGB image."""

import math
import random
from dataclasses import dataclass

from PIL import Image, ImageDraw

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600


def valid_color_value(value):
    """Return True when *value* is a valid 8-bit colour component."""
    return 0 <= value <= 255


@dataclass(frozen=True)
class Color:
    """An RGB colour with components in 0..255."""

    r: int
    g: int
    b: int

    def __post_init__(self):
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not valid_color_value(value):
                raise ValueError(f"colour component {name}={value} out of range 0..255")

    @property
    def rgb(self):
        """The colour as an (r, g, b) tuple."""
        return (self.r, self.g, self.b)


CYAN_COLOR = Color(0, 255, 255)
BLUE_COLOR = Color(0, 0, 255)
ORANGE_COLOR = Color(255, 165, 0)
YELLOW_COLOR = Color(255, 255, 0)
LIME_COLOR = Color(0, 255, 0)
PURPLE_COLOR = Color(128, 0, 128)
RED_COLOR = Color(255, 0, 0)
WHITE_COLOR = Color(255, 255, 255)
BLACK_COLOR = Color(0, 0, 0)
GREEN_COLOR = Color(0, 128, 0)

DEFAULT_COLOR = BLACK_COLOR


class Painter:
    """Moves a pen over a canvas, drawing lines and circles as it goes.

    Angles are in degrees, counter-clockwise from the positive x axis;
    the y axis points down, as on screen.
    """

    def __init__(self, width=SCREEN_WIDTH, height=SCREEN_HEIGHT):
        self.width = width
        self.height = height
        self.image = Image.new("RGB", (width, height), DEFAULT_COLOR.rgb)
        self._draw = ImageDraw.Draw(self.image)
        self.x = 0
        self.y = 0
        self.angle = 0.0
        self.color = WHITE_COLOR
        self.set_position(width // 2, height // 2)
        self.clear_with_bg_color(BLUE_COLOR)

    def set_position(self, x, y):
        """Place the pen at (x, y) without drawing."""
        self.x = x
        self.y = y

    def clear_with_bg_color(self, bg_color):
        """Fill the whole canvas with *bg_color*; the pen colour is kept."""
        self._draw.rectangle(
            (0, 0, self.width - 1, self.height - 1), fill=bg_color.rgb
        )

    def jump_forward(self, num_pixel):
        """Move the pen *num_pixel* pixels along its heading without drawing."""
        rad = math.radians(self.angle)
        self.x += round(math.cos(rad) * num_pixel)
        self.y -= round(math.sin(rad) * num_pixel)

    def jump_backward(self, num_pixel):
        """Move the pen *num_pixel* pixels against its heading without drawing."""
        self.jump_forward(-num_pixel)

    def move_forward(self, num_pixel):
        """Move the pen forward, drawing a line in the current colour."""
        start = (self.x, self.y)
        self.jump_forward(num_pixel)
        self._draw.line([start, (self.x, self.y)], fill=self.color.rgb)

    def move_backward(self, num_pixel):
        """Move the pen backward, drawing a line in the current colour."""
        self.move_forward(-num_pixel)

    def turn_left(self, degree):
        """Rotate the heading counter-clockwise by *degree*."""
        self.angle = math.fmod(self.angle + degree, 360)

    def turn_right(self, degree):
        """Rotate the heading clockwise by *degree*."""
        self.turn_left(-degree)

    def random_color(self):
        """Switch the pen to a random colour."""
        self.color = Color(
            random.randint(0, 255), random.randint(0, 255), random.randint(0, 255)
        )

    def create_circle(self, radius):
        """Draw a circle of *radius* whose edge passes through the pen.

        The centre lies *radius* pixels ahead along the heading; the pen
        does not move.
        """
        rad = math.radians(self.angle)
        cx = self.x + int(math.cos(rad) * radius)
        cy = self.y - int(math.sin(rad) * radius)

        points = []
        dx, dy, err = radius, 0, 0
        while dx >= dy:
            points.extend(
                [
                    (cx + dx, cy + dy),
                    (cx + dy, cy + dx),
                    (cx - dy, cy + dx),
                    (cx - dx, cy + dy),
                    (cx - dx, cy - dy),
                    (cx - dy, cy - dx),
                    (cx + dy, cy - dx),
                    (cx + dx, cy - dy),
                ]
            )
            if err <= 0:
                dy += 1
                err += 2 * dy + 1
            if err > 0:
                dx -= 1
                err -= 2 * dx + 1
        visible = [
            (px, py) for px, py in points if 0 <= px < self.width and 0 <= py < self.height
        ]
        if visible:
            self._draw.point(visible, fill=self.color.rgb)

    def create_parallelogram(self, size):
        """Draw a rhombus with sides of *size*, ending where it started."""
        for _ in range(2):
            self.move_forward(size)
            self.turn_left(60)
            self.move_forward(size)
            self.turn_left(120)

    def create_square(self, size):
        """Draw a square with sides of *size*, ending where it started."""
        for _ in range(4):
            self.move_forward(size)
            self.turn_left(90)

    def save(self, path):
        """Write the canvas to an image file; the format follows the extension."""
        self.image.save(path)
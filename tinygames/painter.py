"""A turtle-style painter that draws on an in-memory RGB canvas."""

from __future__ import annotations

import math
import random
from os import PathLike
from typing import NamedTuple

from PIL import Image, ImageDraw


class Color(NamedTuple):
    """An RGB colour."""

    r: int
    g: int
    b: int


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
    """A pen with a position, a heading and a colour, drawing on ``canvas``.

    Angles are in degrees, counter-clockwise, with 0 pointing right; ``y``
    grows downwards as on screen.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.canvas = Image.new("RGB", (width, height), BLACK_COLOR)
        self._draw = ImageDraw.Draw(self.canvas)
        self.x = 0.0
        self.y = 0.0
        self.angle = 0.0
        self.color = WHITE_COLOR
        self.set_position(width / 2, height / 2)
        self.set_angle(0)
        self.set_color(WHITE_COLOR)
        self.clear_with_bg_color(BLUE_COLOR)

    def set_position(self, x: float, y: float) -> None:
        """Move the pen without drawing."""
        self.x = x
        self.y = y

    def set_angle(self, angle: float) -> None:
        """Set the heading, normalised into ``[0, 360)``."""
        self.angle = angle - math.floor(angle / 360) * 360

    def set_color(self, color: tuple[int, int, int]) -> None:
        """Set the pen colour."""
        self.color = Color(*color)

    def clear_with_bg_color(self, color: tuple[int, int, int]) -> None:
        """Fill the whole canvas with ``color``, keeping the pen colour."""
        self._draw.rectangle((0, 0, self.width - 1, self.height - 1), fill=tuple(color))

    def draw_point(self, x: int, y: int) -> None:
        """Paint one pixel in the pen colour; points off the canvas are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.canvas.putpixel((x, y), self.color)

    def move_forward(self, length: float) -> None:
        """Move along the heading, drawing a line."""
        prev_x, prev_y = self.x, self.y
        self.jump_forward(length)
        self._draw.line(
            ((int(prev_x), int(prev_y)), (int(self.x), int(self.y))), fill=self.color
        )

    def jump_forward(self, length: float) -> None:
        """Move along the heading without drawing."""
        rad = self.angle / 180 * math.pi
        self.x += math.cos(rad) * length
        self.y -= math.sin(rad) * length

    def move_backward(self, length: float) -> None:
        """Move against the heading, drawing a line."""
        self.move_forward(-length)

    def jump_backward(self, length: float) -> None:
        """Move against the heading without drawing."""
        self.jump_forward(-length)

    def turn_left(self, angle: float) -> None:
        """Turn counter-clockwise by ``angle`` degrees."""
        self.set_angle(self.angle + angle)

    def turn_right(self, angle: float) -> None:
        """Turn clockwise by ``angle`` degrees."""
        self.turn_left(-angle)

    def set_random_color(self, rng: random.Random | None = None) -> None:
        """Pick a random pen colour."""
        source = rng or random
        self.set_color(Color(source.randint(0, 255), source.randint(0, 255), source.randint(0, 255)))

    def create_circle(self, radius: float) -> None:
        """Draw a circle ahead of the pen whose edge passes through the pen."""
        rad = self.angle / 180 * math.pi
        center_x = int(self.x + math.cos(rad) * radius)
        center_y = int(self.y - math.sin(rad) * radius)

        dx = int(radius)
        dy = 0
        err = 0
        while dx >= dy:
            for px, py in (
                (center_x + dx, center_y + dy),
                (center_x + dy, center_y + dx),
                (center_x - dy, center_y + dx),
                (center_x - dx, center_y + dy),
                (center_x - dx, center_y - dy),
                (center_x - dy, center_y - dx),
                (center_x + dy, center_y - dx),
                (center_x + dx, center_y - dy),
            ):
                self.draw_point(px, py)
            if err <= 0:
                dy += 1
                err += 2 * dy + 1
            if err > 0:
                dx -= 1
                err -= 2 * dx + 1

    def create_square(self, size: float) -> None:
        """Draw a square, turning left at each corner."""
        for _ in range(4):
            self.move_forward(size)
            self.turn_left(90)

    def create_parallelogram(self, size: float) -> None:
        """Draw a rhombus with 60 and 120 degree corners."""
        for _ in range(2):
            self.move_forward(size)
            self.turn_left(60)
            self.move_forward(size)
            self.turn_left(120)

    def load_image(self, path: str | PathLike[str]) -> Image.Image | None:
        """Load a picture, or report the failure and return ``None``."""
        try:
            with Image.open(path) as loaded:
                return loaded.convert("RGB")
        except (OSError, ValueError) as exc:
            print(f"Unable to load image {path} Error: {exc}")
            return None

    def create_image(self, image: Image.Image | None) -> bool:
        """Stretch ``image`` over the whole canvas; return whether it was drawn."""
        if image is None:
            return False
        picture = image.convert("RGB")
        if picture.size != self.canvas.size:
            picture = picture.resize(self.canvas.size)
        self.canvas.paste(picture, (0, 0))
        return True
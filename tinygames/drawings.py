"""Figures drawn with the painter, and a command that shows one in a window."""

from __future__ import annotations

import math
import os
import random
import re
import sys
from collections.abc import Sequence
from typing import TextIO

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from tinygames.painter import (  # noqa: E402
    BLACK_COLOR,
    GREEN_COLOR,
    RED_COLOR,
    WHITE_COLOR,
    YELLOW_COLOR,
    Color,
    Painter,
)

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
WINDOW_TITLE = "An Implementation of Code.org Painter"
DEFAULT_FIGURE = 17

MAX_ITERATION = 1000

PALETTE: tuple[Color, ...] = (
    Color(66, 30, 15),
    Color(25, 7, 26),
    Color(9, 1, 47),
    Color(4, 4, 73),
    Color(0, 7, 100),
    Color(12, 44, 138),
    Color(24, 82, 177),
    Color(57, 125, 209),
    Color(134, 181, 229),
    Color(211, 236, 248),
    Color(241, 233, 191),
    Color(248, 201, 95),
    Color(255, 170, 0),
    Color(204, 128, 0),
    Color(153, 87, 0),
    Color(106, 52, 3),
)


def random_walk(painter: Painter, rng: random.Random | None = None) -> None:
    """Draw ten lines of random length, colour and direction."""
    source = rng or random
    steps, max_length = 10, 100
    for _ in range(steps):
        painter.set_random_color(rng)
        painter.move_forward(source.random() * max_length)
        painter.turn_left(source.random() * 360)


def _escape_color(x0: float, y0: float) -> Color:
    x = y = 0.0
    iteration = 0
    while x * x + y * y < 2 and iteration < MAX_ITERATION:
        x, y = x * x - y * y + x0, 2 * x * y + y0
        iteration += 1
    if iteration < MAX_ITERATION:
        return PALETTE[iteration % len(PALETTE)]
    return BLACK_COLOR


def draw_mandelbrot(
    painter: Painter,
    xmin: float = -2,
    ymin: float = -1.5,
    xmax: float = 2,
    ymax: float = 1.5,
) -> None:
    """Colour every pixel by how fast its point escapes the Mandelbrot iteration."""
    width, height = painter.width, painter.height
    pixels = [
        _escape_color(px / width * (xmax - xmin) + xmin, py / height * (ymax - ymin) + ymin)
        for py in range(height)
        for px in range(width)
    ]
    painter.canvas.putdata(pixels)
    if pixels:
        painter.set_color(pixels[-1])


def draw_recursive_circle(painter: Painter, radius: float = 400) -> None:
    """Draw nested circles, each three quarters the size of the last."""
    painter.create_circle(radius)
    if radius > 2:
        painter.jump_forward(radius * 0.25)
        radius *= 0.75
        draw_recursive_circle(painter, radius)
        painter.jump_backward(radius * 0.25)


def draw_recursive_circle2(painter: Painter, radius: float) -> None:
    """Draw a circle with two half-size circles inside it, recursively."""
    painter.create_circle(radius)
    if radius > 2:
        painter.jump_backward(radius / 2)
        draw_recursive_circle2(painter, radius / 2)
        painter.jump_forward(radius * 2)
        draw_recursive_circle2(painter, radius / 2)
        painter.jump_backward(radius * 3 / 2)


def draw_recursive_circle4(painter: Painter, radius: float) -> None:
    """Draw a circle with four half-size circles around it, recursively."""
    painter.create_circle(radius)
    if radius > 8:
        x, y = painter.x, painter.y
        half = radius / 2
        for px, py in (
            (x - half, y),
            (x + half, y - radius),
            (x + radius * 3 / 2, y),
            (x + half, y + radius),
        ):
            painter.set_position(px, py)
            draw_recursive_circle4(painter, half)
        painter.set_position(x, y)


def draw_cantor(painter: Painter, length: float, out: TextIO | None = None) -> None:
    """Draw the Cantor set as thick bars, writing each bar length to ``out``."""
    stream = out if out is not None else sys.stdout
    stream.write(f"{length:g}\n")
    if length >= 1:
        x, y = painter.x, painter.y
        for i in range(7):
            painter.move_forward(math.floor(length))
            painter.set_position(x, y + i)
        painter.set_position(x, y + 20)
        draw_cantor(painter, length / 3, out)
        painter.set_position(x + length * 2 / 3, y + 20)
        draw_cantor(painter, length / 3, out)
        painter.set_position(x, y)


def draw_koch(painter: Painter, length: float, levels: int) -> None:
    """Draw a Koch curve with the given number of levels."""
    if levels == 1:
        painter.move_forward(length)
        return
    part = length / 3
    draw_koch(painter, part, levels - 1)
    painter.turn_left(60)
    draw_koch(painter, part, levels - 1)
    painter.turn_right(120)
    draw_koch(painter, part, levels - 1)
    painter.turn_left(60)
    draw_koch(painter, part, levels - 1)


def _filled_triangle(painter: Painter) -> None:
    cur_x, cur_y = painter.x, painter.y
    painter.set_color(WHITE_COLOR)
    painter.turn_left(60)
    size = 150
    for i in range(size):
        for _ in range(3):
            painter.turn_left(120)
            painter.move_forward(size - i)
        painter.set_position(cur_x, cur_y)
        painter.jump_backward(i + 1)
    painter.set_position(cur_x, cur_y)


def _star_of_david(painter: Painter) -> None:
    painter.set_position(350, 400)
    painter.set_color(YELLOW_COLOR)
    painter.turn_left(60)
    for _ in range(3):
        painter.move_forward(150)
        painter.turn_left(120)
    painter.turn_left(30)
    painter.jump_forward(int(150 * 2 / 1.73205080757))
    painter.turn_left(150)
    for _ in range(3):
        painter.move_forward(150)
        painter.turn_left(120)


def _snow_flake(painter: Painter) -> None:
    painter.set_color(WHITE_COLOR)
    painter.turn_left(20)
    size = 40
    for _ in range(8):
        painter.move_forward(size)
        for _ in range(3):
            painter.turn_left(45)
            painter.move_forward(size)
            painter.jump_backward(size)
            painter.turn_right(90)
            painter.move_forward(size)
            painter.jump_backward(size)
            painter.turn_left(45)
            painter.move_forward(size)
        painter.jump_backward(4 * size)
        painter.turn_right(45)


def draw_figure(painter: Painter, number: int, image_path: str | None = None) -> None:
    """Draw figure ``number`` (0 to 23); other numbers draw nothing."""
    if number == 0:
        painter.set_color(WHITE_COLOR)
        for _ in range(4):
            painter.move_forward(100)
            painter.turn_right(90)
    elif number == 1:
        painter.set_color(WHITE_COLOR)
        painter.clear_with_bg_color(GREEN_COLOR)
        for _ in range(3):
            painter.turn_left(120)
            painter.move_forward(100)
    elif number == 2:
        _filled_triangle(painter)
    elif number == 3:
        painter.set_position(350, 500)
        painter.set_color(YELLOW_COLOR)
        for _ in range(8):
            painter.move_forward(150)
            painter.turn_left(45)
    elif number == 4:
        painter.set_position(350, 200)
        painter.set_color(YELLOW_COLOR)
        for _ in range(5):
            painter.move_forward(200)
            painter.turn_right(144)
    elif number == 5:
        _star_of_david(painter)
    elif number == 6:
        painter.set_color(WHITE_COLOR)
        for _ in range(8):
            painter.move_forward(100)
            painter.move_backward(100)
            painter.turn_left(45)
    elif number == 7:
        for _ in range(6):
            for _ in range(4):
                painter.move_forward(100)
                painter.turn_right(90)
            painter.turn_left(60)
    elif number == 8:
        painter.clear_with_bg_color(GREEN_COLOR)
        painter.set_color(RED_COLOR)
        painter.set_position(150, 150)
        for _ in range(10):
            painter.create_circle(100)
            painter.jump_forward(30)
    elif number == 9:
        painter.set_position(350, 150)
        painter.clear_with_bg_color(BLACK_COLOR)
        for _ in range(20):
            painter.set_random_color()
            painter.create_circle(100)
            painter.jump_forward(1)
            painter.create_circle(100)
            painter.jump_forward(50)
            painter.turn_right(18)
    elif number == 10:
        painter.set_color(WHITE_COLOR)
        for _ in range(10):
            painter.create_square(100)
            painter.turn_right(36)
    elif number == 11:
        for _ in range(90):
            painter.set_random_color()
            painter.move_forward(150)
            painter.jump_backward(150)
            painter.turn_right(4)
    elif number == 12:
        painter.set_color(WHITE_COLOR)
        for _ in range(10):
            painter.create_parallelogram(100)
            painter.turn_right(36)
    elif number == 13:
        painter.set_color(WHITE_COLOR)
        painter.clear_with_bg_color(GREEN_COLOR)
        for _ in range(5):
            painter.create_circle(100)
            painter.create_circle(50)
            painter.turn_right(72)
    elif number == 14:
        _snow_flake(painter)
    elif number == 15:
        random_walk(painter)
    elif number == 16:
        if image_path is None:
            print("Please provide image file path")
            return
        image = painter.load_image(image_path)
        painter.clear_with_bg_color(WHITE_COLOR)
        painter.create_image(image)
    elif number == 17:
        draw_mandelbrot(painter, 2 * 0.17, 1.5 * 0.17, 2 * 0.25, 1.5 * 0.25)
    elif number == 18:
        painter.jump_backward(400)
        draw_recursive_circle(painter, 400)
    elif number == 19:
        painter.jump_backward(400)
        draw_recursive_circle2(painter, 400)
    elif number == 20:
        painter.jump_backward(400)
        draw_recursive_circle4(painter, 400)
    elif number == 21:
        painter.jump_backward(728 // 2)
        draw_cantor(painter, 729)
    elif number == 22:
        painter.jump_backward(728 // 2)
        draw_koch(painter, 27 * 27, 5)
    elif number == 23:
        painter.set_position(painter.x - 100, painter.y - 100)
        for _ in range(3):
            draw_koch(painter, 27 * 27 // 3, 5)
            painter.turn_right(120)


def _atoi(text: str) -> int:
    match = re.match(r"\s*[+-]?\d+", text)
    return int(match.group()) if match else 0


def _wait_until_key_pressed() -> None:
    while True:
        event = pygame.event.wait()
        if event.type in (pygame.KEYDOWN, pygame.QUIT):
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Show one figure: ``[figure_number [image_path]]``."""
    args = list(sys.argv[1:] if argv is None else argv)
    number = _atoi(args[0]) if args else DEFAULT_FIGURE
    image_path = args[1] if len(args) > 1 else None

    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        except pygame.error as exc:
            print(f"CreateWindow Error: {exc}")
            return 1
        pygame.display.set_caption(WINDOW_TITLE)
        painter = Painter(SCREEN_WIDTH, SCREEN_HEIGHT)
        draw_figure(painter, number, image_path)
        surface = pygame.image.frombuffer(
            painter.canvas.tobytes(), painter.canvas.size, "RGB"
        )
        screen.blit(surface, (0, 0))
        pygame.display.flip()
        _wait_until_key_pressed()
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())
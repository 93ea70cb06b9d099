"""Window, pictures and main loop of the snake game."""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Sequence
from enum import Enum
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from tinygames.snake_game import Direction, Game, Position  # noqa: E402

SCREEN_WIDTH = 900
SCREEN_HEIGHT = 600
WINDOW_TITLE = "Snake Game"

BOARD_WIDTH = 30
BOARD_HEIGHT = 20
CELL_SIZE = 30

BOARD_COLOR = (0, 0, 0)
LINE_COLOR = (128, 128, 128)

STEP_DELAY = 0.2


class PictureId(Enum):
    """The pictures the game draws."""

    CHERRY = 0
    SNAKE_VERTICAL = 1
    SNAKE_HORIZONTAL = 2
    SNAKE_HEAD = 3


PICTURE_FILES: dict[PictureId, str] = {
    PictureId.CHERRY: "cherry.png",
    PictureId.SNAKE_VERTICAL: "snake_vertical.png",
    PictureId.SNAKE_HORIZONTAL: "snake_horizontal.png",
    PictureId.SNAKE_HEAD: "snake_head.png",
}


class Gallery:
    """Loads the game's pictures from a directory.

    A picture that cannot be loaded is reported and left out.
    """

    def __init__(self, directory: str | os.PathLike[str] = ".") -> None:
        self.directory = Path(directory)
        self._pictures: dict[PictureId, pygame.Surface | None] = {
            picture_id: self._load(self.directory / name)
            for picture_id, name in PICTURE_FILES.items()
        }

    @staticmethod
    def _load(path: Path) -> pygame.Surface | None:
        try:
            image = pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            print(f"Unable to load image {path} Error: {exc}")
            return None
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        return image

    def image(self, picture_id: PictureId) -> pygame.Surface | None:
        """Return a loaded picture, or ``None`` if it failed to load."""
        return self._pictures[picture_id]


def cell_rect(left: int, top: int, pos: Position) -> tuple[int, int, int, int]:
    """Return the ``(x, y, w, h)`` screen rectangle a picture fills in a cell."""
    return (
        left + pos.x * CELL_SIZE + 5,
        top + pos.y * CELL_SIZE + 5,
        CELL_SIZE - 10,
        CELL_SIZE - 10,
    )


def body_picture(position: Position, next_position: Position) -> PictureId:
    """Choose the body picture for a segment from its neighbour toward the head."""
    if position.y == next_position.y:
        return PictureId.SNAKE_HORIZONTAL
    return PictureId.SNAKE_VERTICAL


_KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def key_to_direction(key: int) -> Direction | None:
    """Map an arrow key to a direction; other keys give ``None``."""
    return _KEY_DIRECTIONS.get(key)


def _draw_cell(
    surface: pygame.Surface, left: int, top: int, pos: Position, image: pygame.Surface | None
) -> None:
    if image is None:
        return
    x, y, w, h = cell_rect(left, top, pos)
    surface.blit(pygame.transform.scale(image, (w, h)), (x, y))


def _render_game_play(surface: pygame.Surface, game: Game, gallery: Gallery) -> None:
    left = top = 0
    surface.fill(BOARD_COLOR)
    for x in range(BOARD_WIDTH + 1):
        sx = left + x * CELL_SIZE
        pygame.draw.line(surface, LINE_COLOR, (sx, top), (sx, top + BOARD_HEIGHT * CELL_SIZE))
    for y in range(BOARD_HEIGHT + 1):
        sy = top + y * CELL_SIZE
        pygame.draw.line(surface, LINE_COLOR, (left, sy), (left + BOARD_WIDTH * CELL_SIZE, sy))

    if game.cherry_position is not None:
        _draw_cell(surface, left, top, game.cherry_position, gallery.image(PictureId.CHERRY))

    positions = game.snake_positions()
    _draw_cell(surface, left, top, positions[-1], gallery.image(PictureId.SNAKE_HEAD))
    for pos, nxt in reversed(list(zip(positions, positions[1:]))):
        _draw_cell(surface, left, top, pos, gallery.image(body_picture(pos, nxt)))
    pygame.display.flip()


def _wait_until_key_pressed() -> bool:
    while True:
        event = pygame.event.wait()
        if event.type == pygame.KEYDOWN:
            return True
        if event.type == pygame.QUIT:
            return False


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and play one game; an optional argument names the picture directory."""
    args = list(sys.argv[1:] if argv is None else argv)
    directory = args[0] if args else "."
    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        except pygame.error as exc:
            print(f"CreateWindow Error: {exc}")
            return 1
        pygame.display.set_caption(WINDOW_TITLE)
        gallery = Gallery(directory)
        game = Game(BOARD_WIDTH, BOARD_HEIGHT)

        print("Press any key to start game")
        if not _wait_until_key_pressed():
            return 0

        start = time.monotonic()
        _render_game_play(screen, game, gallery)
        while game.is_running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYUP:
                    direction = key_to_direction(event.key)
                    if direction is not None:
                        game.process_user_input(direction)
            now = time.monotonic()
            if now - start > STEP_DELAY:
                game.next_step()
                _render_game_play(screen, game, gallery)
                start = now
            pygame.time.delay(1)
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())
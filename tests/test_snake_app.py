import pygame
import pytest

from tinygames.snake_app import (
    CELL_SIZE,
    PICTURE_FILES,
    Gallery,
    PictureId,
    body_picture,
    cell_rect,
    key_to_direction,
)
from tinygames.snake_game import Direction, Position


def test_cell_rect_origin():
    assert cell_rect(0, 0, Position(0, 0)) == (5, 5, CELL_SIZE - 10, CELL_SIZE - 10)


@pytest.mark.parametrize("left, top", [(0, 0), (12, 40), (100, 3)])
def test_cell_rect_shifts_with_origin_and_cell(left, top):
    base = cell_rect(0, 0, Position(2, 3))
    moved = cell_rect(left, top, Position(2, 3))
    assert moved == (base[0] + left, base[1] + top, base[2], base[3])
    next_cell = cell_rect(left, top, Position(3, 3))
    assert next_cell[0] - moved[0] == CELL_SIZE
    assert next_cell[1] == moved[1]


def test_body_picture_orientation():
    assert body_picture(Position(1, 1), Position(2, 1)) is PictureId.SNAKE_HORIZONTAL
    assert body_picture(Position(1, 1), Position(1, 2)) is PictureId.SNAKE_VERTICAL


@pytest.mark.parametrize(
    "key, direction",
    [
        (pygame.K_UP, Direction.UP),
        (pygame.K_DOWN, Direction.DOWN),
        (pygame.K_LEFT, Direction.LEFT),
        (pygame.K_RIGHT, Direction.RIGHT),
        (pygame.K_a, None),
    ],
)
def test_key_to_direction(key, direction):
    assert key_to_direction(key) is direction


def test_gallery_loads_pictures(tmp_path):
    for picture_id, name in PICTURE_FILES.items():
        surface = pygame.Surface((7 + picture_id.value, 3))
        pygame.image.save(surface, str(tmp_path / name))
    gallery = Gallery(tmp_path)
    for picture_id in PictureId:
        assert gallery.image(picture_id).get_size() == (7 + picture_id.value, 3)


def test_gallery_reports_missing_pictures(tmp_path, capsys):
    gallery = Gallery(tmp_path)
    assert all(gallery.image(picture_id) is None for picture_id in PictureId)
    out = capsys.readouterr().out
    assert "Unable to load image" in out
    assert "cherry.png" in out
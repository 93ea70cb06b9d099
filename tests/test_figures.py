import io
from itertools import islice

import pytest

from tinygames.figures import (
    DANCING,
    HANGING,
    clear_screen,
    dancing_frames,
    get_drawing,
    hanging_frames,
)


@pytest.mark.parametrize("n", range(8))
def test_drawing_has_seven_lines(n):
    assert get_drawing(n).count("\n") == 7


def test_drawing_wraps_around():
    assert get_drawing(8) == get_drawing(0)
    assert get_drawing(15) == get_drawing(7)


def test_drawing_progression():
    assert "O" not in get_drawing(1)
    assert "O" in get_drawing(2)
    assert "/ \\" in get_drawing(7)
    assert get_drawing(0).startswith("   -------------")


def test_hanging_frames_cycle():
    frames = list(islice(hanging_frames(), 2 * len(HANGING)))
    assert frames[: len(HANGING)] == list(HANGING)
    assert frames[len(HANGING):] == list(HANGING)
    assert frames[1] == frames[3]


def test_dancing_frames_cycle():
    frames = list(islice(dancing_frames(), len(DANCING) + 1))
    assert frames[-1] == frames[0]
    assert len(set(frames)) < len(DANCING)


def test_clear_screen_writes_blank_lines():
    buf = io.StringIO()
    clear_screen(buf)
    assert buf.getvalue() == "\n" * 30


def test_all_drawings_distinct():
    drawings = [get_drawing(n) for n in range(8)]
    assert len(set(drawings)) == 8
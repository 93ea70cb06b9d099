"""Text drawings for the hangman games."""

from __future__ import annotations

import itertools
import os
import subprocess
import sys
from collections.abc import Iterator
from typing import TextIO

CLEAR_LINES = 30

DRAWINGS: tuple[str, ...] = (
    (
        "   -------------    \n"
        "   |                \n"
        "   |                \n"
        "   |                \n"
        "   |                \n"
        "   |     \n"
        " -----   \n"
    ),
    (
        "   -------------    \n"
        "   |           |    \n"
        "   |                \n"
        "   |                \n"
        "   |                \n"
        "   |     \n"
        " -----   \n"
    ),
    (
        "   -------------    \n"
        "   |           |    \n"
        "   |           O    \n"
        "   |                \n"
        "   |                \n"
        "   |     \n"
        " -----   \n"
    ),
    (
        "   -------------    \n"
        "   |           |    \n"
        "   |           O    \n"
        "   |           |    \n"
        "   |                \n"
        "   |     \n"
        " -----   \n"
    ),
    (
        "   -------------    \n"
        "   |           |    \n"
        "   |           O    \n"
        "   |          /|    \n"
        "   |                \n"
        "   |     \n"
        " -----   \n"
    ),
    (
        "   -------------    \n"
        "   |           |    \n"
        "   |           O    \n"
        "   |          /|\\  \n"
        "   |                \n"
        "   |     \n"
        " -----   \n"
    ),
    (
        "   -------------    \n"
        "   |           |    \n"
        "   |           O    \n"
        "   |          /|\\  \n"
        "   |          /     \n"
        "   |     \n"
        " -----   \n"
    ),
    (
        "   -------------    \n"
        "   |           |    \n"
        "   |           O    \n"
        "   |          /|\\  \n"
        "   |          / \\  \n"
        "   |     \n"
        " -----   \n"
    ),
)

_HANGING_CENTRE = (
    "   ------------+     \n"
    "   |           |     \n"
    "   |           O     \n"
    "   |          /|\\   \n"
    "   |          / \\   \n"
    "   |        \n"
    " -----      \n"
)

HANGING: tuple[str, ...] = (
    (
        "   ------------+    \n"
        "   |          /     \n"
        "   |         O      \n"
        "   |        /|\\    \n"
        "   |        / \\    \n"
        "   |        \n"
        " -----      \n"
    ),
    _HANGING_CENTRE,
    (
        "   ------------+      \n"
        "   |            \\    \n"
        "   |            O     \n"
        "   |           /|\\   \n"
        "   |           / \\   \n"
        "   |      \n"
        " -----    \n"
    ),
    _HANGING_CENTRE,
)

_STANDING = "     O     \n    /|\\   \n    / \\   \n"
_ARMS_OUT = "   __O__   \n     |     \n    / \\   \n"

DANCING: tuple[str, ...] = (
    "     O     \n    /|\\   \n    | |    \n",
    _STANDING,
    _ARMS_OUT,
    "    \\O/   \n     |     \n    / \\   \n",
    _ARMS_OUT,
    _STANDING,
    "    O     \n    /|\\   \n    / \\   \n",
    _STANDING,
    "      O     \n    /|\\   \n    / \\   \n",
    _STANDING,
)


def get_drawing(incorrect_guess: int) -> str:
    """Return the gallows drawing for a number of wrong guesses."""
    return DRAWINGS[incorrect_guess % len(DRAWINGS)]


def hanging_frames() -> Iterator[str]:
    """Yield the swinging-man animation frames forever."""
    return itertools.cycle(HANGING)


def dancing_frames() -> Iterator[str]:
    """Yield the dancing-man animation frames forever."""
    return itertools.cycle(DANCING)


def clear_screen(out: TextIO | None = None) -> None:
    """Clear the terminal, or push old output off screen with blank lines."""
    if out is None and os.name == "nt":
        subprocess.run(["cmd", "/c", "cls"], check=False)
        return
    stream = out if out is not None else sys.stdout
    stream.write("\n" * CLEAR_LINES)
    stream.flush()
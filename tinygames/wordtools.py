"""Word helpers for the hangman games and a mask-generating command."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence
from os import PathLike


def generate_random_number(low: int, high: int, rng: random.Random | None = None) -> int:
    """Return a random integer in ``[low, high)``."""
    return (rng or random).randrange(low, high)


def is_char_in_word(ch: str, word: str) -> bool:
    """Tell whether the single character ``ch`` occurs in ``word``."""
    return bool(ch) and ch in word


def read_word_list(path: str | PathLike[str]) -> list[str]:
    """Read whitespace-separated words from a file."""
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read().split()
    except OSError as exc:
        raise OSError(f"Unable to open vocabulary file {path}") from exc


def is_all_dash(s: str) -> bool:
    """Tell whether every character is a dash."""
    return all(c == "-" for c in s)


def is_all_not_dash(s: str) -> bool:
    """Tell whether no character is a dash."""
    return "-" not in s


def make_mask(word: str, guess: str) -> str:
    """Show only the positions of ``guess`` in ``word``, case-insensitively."""
    guess = guess.lower()
    return "".join(guess if c.lower() == guess else "-" for c in word)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the mask of a word for a guessed character."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2 or not args[1]:
        print("Usage: genmask <word> <char>")
        return 1
    print(make_mask(args[0], args[1][0]))
    return 0


if __name__ == "__main__":
    sys.exit(main())
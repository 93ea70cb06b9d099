"""Guess-the-number game."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable, Sequence

PROMPT = "\nEnter your number between 1 and 100: "
HIGHER = "Your number is higher."
LOWER = "Your number is lower."
WIN = "Congratulation! You win."


def generate_random_number(rng: random.Random | None = None) -> int:
    """Return a secret number between 1 and 100 inclusive."""
    return (rng or random).randint(1, 100)


def judge(number: int, target: int) -> str:
    """Describe how a guess compares with the target."""
    if number > target:
        return HIGHER
    if number < target:
        return LOWER
    return WIN


def play(
    read_guess: Callable[[str], int],
    write: Callable[[str], object],
    rng: random.Random | None = None,
) -> int:
    """Play one round and return the number of guesses it took."""
    target = generate_random_number(rng)
    guesses = 0
    while True:
        number = int(read_guess(PROMPT))
        guesses += 1
        write(judge(number, target))
        if number == target:
            return guesses


def _read_guess(prompt: str) -> int:
    while True:
        text = input(prompt)
        try:
            return int(text.strip())
        except ValueError:
            continue


def main(argv: Sequence[str] | None = None) -> int:
    """Play rounds until the player declines another."""
    try:
        while True:
            play(_read_guess, print)
            answer = input("\nDo you want to play again (y/n) ?  ").strip()
            if answer[:1] not in ("y", "Y"):
                break
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""A hangman player that guesses letters from a vocabulary."""

from __future__ import annotations

import string
from collections.abc import Iterable
from os import PathLike

from tinygames.wordtools import is_all_dash, is_all_not_dash, read_word_list

DEFAULT_WORD_FILE = "data/Ogden_Picturable_200.txt"
VOWELS = "eaoiu"


class MaskError(ValueError):
    """Raised when a host's answer mask contradicts the guess or the game."""


def remaining_chars(previous_guesses: Iterable[str]) -> set[str]:
    """Return the lower-case letters not guessed yet."""
    return set(string.ascii_lowercase) - set(previous_guesses)


def vowel_guess(remaining: set[str]) -> str | None:
    """Return the first vowel still available, in order of frequency."""
    return next((c for c in VOWELS if c in remaining), None)


def is_suitable_word(word: str, secret_word: str, remaining: set[str]) -> bool:
    """Tell whether ``word`` fits the revealed letters of ``secret_word``.

    Hidden positions may only hold letters that have not been guessed.
    """
    if len(word) != len(secret_word):
        return False
    for actual, shown in zip(word, secret_word):
        if shown != "-":
            if actual.lower() != shown.lower():
                return False
        elif actual not in remaining:
            return False
    return True


def occurrence_count(remaining: set[str], words: Iterable[str]) -> dict[str, int]:
    """Count how often each remaining letter occurs across ``words``."""
    count = dict.fromkeys(remaining, 0)
    for word in words:
        for c in word:
            if c in count:
                count[c] += 1
    return count


def max_occurrence_char(count: dict[str, int]) -> str | None:
    """Return the most frequent letter, the earliest one on ties.

    Letters that never occur are not candidates; ``None`` means none is left.
    """
    best: str | None = None
    best_count = 0
    for c, n in sorted(count.items()):
        if n > best_count:
            best, best_count = c, n
    return best


class Guesser:
    """Plays the guessing side of hangman against a host who gives masks."""

    MAX_GUESSES = 7

    def __init__(self, words: Iterable[str]) -> None:
        self.words = list(words)
        self.new_game(0)

    @classmethod
    def from_file(cls, path: str | PathLike[str] = DEFAULT_WORD_FILE) -> Guesser:
        """Build a guesser from a whitespace-separated vocabulary file."""
        return cls(read_word_list(path))

    def new_game(self, word_length: int) -> None:
        """Start guessing a new word of the given length."""
        self.secret_word = "-" * word_length
        self.incorrect_guess = 0
        self.previous_guesses: set[str] = set()
        self.stopped = False
        self._candidates = list(self.words)

    def is_good_mask(self, guess: str, mask: str) -> bool:
        """Tell whether ``mask`` is a consistent answer to ``guess``."""
        if len(mask) != len(self.secret_word):
            return False
        for m, s in zip(mask, self.secret_word):
            if m != "-" and (m != guess or (s != "-" and s != m)):
                return False
        return True

    def receive_host_answer(self, guess: str, mask: str) -> None:
        """Take the host's mask for ``guess`` and update the game."""
        if not self.is_good_mask(guess, mask):
            raise MaskError("mistake entering answer")
        self.previous_guesses.add(guess)
        if is_all_dash(mask):
            self.incorrect_guess += 1
            if self.incorrect_guess == self.MAX_GUESSES:
                self.stopped = True
        else:
            self.secret_word = "".join(
                m if m != "-" else s for m, s in zip(mask, self.secret_word)
            )
            if is_all_not_dash(self.secret_word):
                self.stopped = True

    def next_guess(self) -> str | None:
        """Return the next letter to try, or ``None`` to give up."""
        remaining = remaining_chars(self.previous_guesses)
        if not remaining:
            return None
        if is_all_dash(self.secret_word):
            return vowel_guess(remaining)
        self._candidates = [
            word
            for word in self._candidates
            if is_suitable_word(word, self.secret_word, remaining)
        ]
        return max_occurrence_char(occurrence_count(remaining, self._candidates))
"""Console hangman: guess the secret word one letter at a time."""

from __future__ import annotations

import random
import sys
import time
from collections.abc import Iterator, Sequence
from os import PathLike

from tinygames.figures import clear_screen, dancing_frames, get_drawing, hanging_frames
from tinygames.wordtools import read_word_list

MAX_BAD_GUESSES = 7
DATA_FILE = "data/Ogden_Picturable_200.txt"
FRAME_DELAY = 0.5


def choose_word(path: str | PathLike[str] = DATA_FILE, rng: random.Random | None = None) -> str:
    """Pick a random word from a vocabulary file, lower-cased.

    Raises ``OSError`` if the file cannot be read and ``ValueError`` if it
    holds no words.
    """
    words = read_word_list(path)
    if not words:
        raise ValueError(f"No words in vocabulary file {path}")
    return (rng or random).choice(words).lower()


def update_guessed_word(guessed_word: str, word: str, guess: str) -> str:
    """Reveal every position of ``guess`` in ``word``."""
    return "".join(
        guess if actual == guess else shown for shown, actual in zip(guessed_word, word)
    )


def render_game(guessed_word: str, bad_guesses: str) -> str:
    """Return the text of the board: gallows, secret word and wrong guesses."""
    count = len(bad_guesses)
    lines = [get_drawing(count), f"Secret word: {guessed_word}\n"]
    if count > 0:
        noun = "guess" if count == 1 else "guesses"
        lines.append(f"You've made {count} wrong {noun}: {bad_guesses}\n")
    return "\n".join([lines[0], "".join(lines[1:])])


def final_message(won: bool, word: str) -> str:
    """Return the closing line of a game."""
    if won:
        return "Congratulations! You win!"
    return f"You lost. The correct word is {word}"


class HangmanGame:
    """The state of one hangman game."""

    def __init__(self, word: str, max_bad_guesses: int = MAX_BAD_GUESSES) -> None:
        if not word:
            raise ValueError("The secret word must not be empty")
        self.word = word
        self.max_bad_guesses = max_bad_guesses
        self.guessed_word = "-" * len(word)
        self.bad_guesses = ""

    @property
    def bad_guess_count(self) -> int:
        return len(self.bad_guesses)

    @property
    def won(self) -> bool:
        return self.guessed_word == self.word

    @property
    def lost(self) -> bool:
        return self.bad_guess_count >= self.max_bad_guesses

    @property
    def is_over(self) -> bool:
        return self.won or self.lost

    def guess(self, letter: str) -> bool:
        """Play one letter; return whether it occurs in the word."""
        if len(letter) != 1:
            raise ValueError(f"A guess is a single character, not {letter!r}")
        if self.is_over:
            raise ValueError("The game is already over")
        letter = letter.lower()
        if letter in self.word:
            self.guessed_word = update_guessed_word(self.guessed_word, self.word, letter)
            return True
        self.bad_guesses += letter
        return False

    def render(self) -> str:
        """Return the text of the current board."""
        return render_game(self.guessed_word, self.bad_guesses)


def _read_guess() -> str:
    while True:
        text = input("Your guess: ").strip()
        if text:
            return text[0]


def _animate(won: bool, word: str, frames: Iterator[str]) -> None:
    try:
        for frame in frames:
            clear_screen()
            print(final_message(won, word))
            print(frame, end="", flush=True)
            time.sleep(FRAME_DELAY)
    except KeyboardInterrupt:
        pass


def main(argv: Sequence[str] | None = None) -> int:
    """Play one game with a word from the vocabulary file."""
    args = list(sys.argv[1:] if argv is None else argv)
    path = args[0] if args else DATA_FILE
    try:
        word = choose_word(path)
    except (OSError, ValueError):
        print(f"Error reading vocabulary file {path}")
        return 1

    game = HangmanGame(word)
    try:
        while not game.is_over:
            clear_screen()
            print(game.render())
            game.guess(_read_guess())
    except EOFError:
        return 0

    frames = dancing_frames() if game.won else hanging_frames()
    _animate(game.won, word, frames)
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Measure how many wrong guesses the guesser makes over a word list."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from tinygames.guesser import Guesser
from tinygames.wordtools import read_word_list

DEFAULT_TEST_FILE = "data/Ogden_Picturable_200.txt"
DEFAULT_DICT_FILE = "data/dictionary.txt"


@dataclass(frozen=True)
class WordCount:
    """A test word and the wrong guesses it cost."""

    word: str
    count: int


def get_mask(guess: str, word: str) -> str:
    """Return the host's mask of ``word`` for ``guess``."""
    return "".join(guess if c.lower() == guess else "-" for c in word)


class Assessment:
    """Runs a guesser against every word of a test list."""

    def __init__(self, test_words: Iterable[str], guesser: Guesser) -> None:
        self.test_words = list(test_words)
        self.guesser = guesser
        self.word_incorrect_guess: list[WordCount] = []

    def play_simulation(self) -> list[WordCount]:
        """Play every test word; return results, most wrong guesses first."""
        guesser = self.guesser
        results: list[WordCount] = []
        for word in self.test_words:
            guesser.new_game(len(word))
            while not guesser.stopped:
                guess = guesser.next_guess()
                if guess is None:
                    results.append(WordCount(word, guesser.MAX_GUESSES))
                    break
                guesser.receive_host_answer(guess, get_mask(guess, word))
                if guesser.stopped:
                    results.append(WordCount(word, guesser.incorrect_guess))
        results.sort(key=lambda result: result.count, reverse=True)
        self.word_incorrect_guess = results
        return results

    def average_incorrect_guess(self) -> float:
        """Return the mean wrong guesses per word, NaN if nothing was played."""
        if not self.word_incorrect_guess:
            return math.nan
        total = sum(result.count for result in self.word_incorrect_guess)
        return total / len(self.word_incorrect_guess)


def main(argv: Sequence[str] | None = None) -> int:
    """Report the average wrong guesses: ``[test_file [dict_file]]``."""
    args = list(sys.argv[1:] if argv is None else argv)
    test_file = args[0] if args else DEFAULT_TEST_FILE
    dict_file = args[1] if len(args) > 1 else DEFAULT_DICT_FILE
    try:
        guesser = Guesser.from_file(dict_file)
        assessment = Assessment(read_word_list(test_file), guesser)
    except OSError as exc:
        print(exc)
        return 1

    assessment.play_simulation()
    print(f"Using dictFile {dict_file}")
    print(f"on testFile {test_file}")
    print(f"average #guesses = {assessment.average_incorrect_guess():g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Hangman where the computer guesses a word the player thinks of."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Sequence

from tinygames.figures import clear_screen, dancing_frames, get_drawing, hanging_frames
from tinygames.guesser import DEFAULT_WORD_FILE, Guesser, MaskError
from tinygames.wordtools import is_all_not_dash

FRAME_DELAY = 0.5


def render(guesser: Guesser) -> str:
    """Return the board as seen by the player."""
    n = guesser.incorrect_guess
    previous = "".join(sorted(guesser.previous_guesses))
    return (
        f"\nIncorrect guess = {n}   previous guesses = {previous}"
        f"   secretWord = {guesser.secret_word}\n{get_drawing(n)}\n"
    )


def ask_mask(
    guess: str, read_line: Callable[[], str], write: Callable[[str], object]
) -> str:
    """Ask the player for the mask of ``guess`` and return it lower-cased."""
    write(f"\nI guess {guess}, please enter your mask: ")
    while True:
        line = read_line()
        if not line:
            raise EOFError("no answer from the player")
        tokens = line.split()
        if tokens:
            return tokens[0].lower()


def play(
    guesser: Guesser,
    word_length: int,
    read_line: Callable[[], str],
    write: Callable[[str], object],
) -> bool:
    """Play one game; return whether the guesser revealed the whole word.

    If the guesser gives up, the game ends with ``guesser.stopped`` false.
    """
    guesser.new_game(word_length)
    write(render(guesser))
    while not guesser.stopped:
        guess = guesser.next_guess()
        if guess is None:
            write("I give up, hang me\n")
            return False
        while True:
            mask = ask_mask(guess, read_line, write)
            try:
                guesser.receive_host_answer(guess, mask)
                break
            except MaskError:
                write("Invalid mask, try again\n")
        write(render(guesser))
    return is_all_not_dash(guesser.secret_word)


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _read_word_length(read_line: Callable[[], str]) -> int:
    while True:
        _write("\nEnter your word length: ")
        line = read_line()
        if not line:
            raise EOFError("no word length given")
        try:
            length = int(line.strip())
        except ValueError:
            continue
        if length > 0:
            return length


def _animate(losing: bool, word: str) -> None:
    frames = hanging_frames() if losing else dancing_frames()
    try:
        clear_screen()
        for frame in frames:
            if losing:
                print(f"\nI lost :(. My best word is: {word}")
            else:
                print(f"\nHaha, I win :D. The word is: {word}")
            print(frame, end="", flush=True)
            time.sleep(FRAME_DELAY)
            clear_screen()
    except KeyboardInterrupt:
        pass


def main(argv: Sequence[str] | None = None) -> int:
    """Let the computer guess the player's word."""
    args = list(sys.argv[1:] if argv is None else argv)
    path = args[0] if args else DEFAULT_WORD_FILE
    try:
        guesser = Guesser.from_file(path)
    except OSError as exc:
        print(exc)
        return 1

    read_line = sys.stdin.readline
    try:
        word_length = _read_word_length(read_line)
        play(guesser, word_length, read_line, _write)
    except EOFError:
        return 0
    if not guesser.stopped:
        return 0
    _animate(guesser.incorrect_guess == Guesser.MAX_GUESSES, guesser.secret_word)
    return 0


if __name__ == "__main__":
    sys.exit(main())
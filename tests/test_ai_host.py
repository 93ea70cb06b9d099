import io

import pytest

from tinygames.ai_host import ask_mask, main, play, render
from tinygames.figures import get_drawing
from tinygames.guesser import Guesser
from tinygames.wordtools import make_mask


def _host(secret):
    """Return a read_line that answers each prompt with the right mask."""
    state = {"guess": None}

    def write(text):
        output.append(text)
        marker = "I guess "
        if marker in text:
            state["guess"] = text.split(marker)[1][0]

    def read_line():
        return make_mask(secret, state["guess"]) + "\n"

    output = []
    return read_line, write, output


def test_render_shows_state():
    guesser = Guesser(["cat"])
    guesser.new_game(3)
    text = render(guesser)
    assert "Incorrect guess = 0" in text
    assert "secretWord = ---" in text
    assert get_drawing(0) in text


def test_render_lists_previous_guesses_sorted():
    guesser = Guesser(["cat"])
    guesser.new_game(3)
    guesser.receive_host_answer("o", "---")
    guesser.receive_host_answer("e", "---")
    assert "previous guesses = eo " in render(guesser)


def test_ask_mask_lowercases_first_token():
    written = []
    lines = iter(["\n", "  C-T extra\n"])
    mask = ask_mask("c", lambda: next(lines), written.append)
    assert mask == "c-t"
    assert written == ["\nI guess c, please enter your mask: "]


def test_ask_mask_end_of_input():
    with pytest.raises(EOFError):
        ask_mask("c", lambda: "", lambda text: None)


def test_play_finds_word():
    guesser = Guesser(["cat", "dog", "cow"])
    read_line, write, _ = _host("dog")
    assert play(guesser, 3, read_line, write) is True
    assert guesser.secret_word == "dog"
    assert guesser.stopped is True


def test_play_retries_after_invalid_mask():
    guesser = Guesser(["cat", "dog", "cow"])
    read_line, write, output = _host("dog")
    answers = iter(["xx\n"])

    def flaky_read():
        return next(answers, None) or read_line()

    assert play(guesser, 3, flaky_read, write) is True
    assert "Invalid mask, try again\n" in output


def test_play_gives_up():
    guesser = Guesser(["cat"])
    read_line, write, output = _host("dog")
    assert play(guesser, 3, read_line, write) is False
    assert "I give up, hang me\n" in output
    assert guesser.stopped is False


def test_main_gives_up_without_vowels(tmp_path, monkeypatch, capsys):
    path = tmp_path / "words.txt"
    path.write_text("cat\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n" + "--\n" * 5))
    assert main([str(path)]) == 0
    assert "I give up, hang me" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "Unable to open vocabulary file" in capsys.readouterr().out
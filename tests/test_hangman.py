import random
from unittest import mock

import pytest

from tinygames.figures import DRAWINGS
from tinygames.hangman import (
    HangmanGame,
    choose_word,
    final_message,
    main,
    render_game,
    update_guessed_word,
)


def test_update_guessed_word_reveals_all_positions():
    assert update_guessed_word("----", "book", "o") == "-oo-"


def test_update_guessed_word_keeps_previous_letters():
    assert update_guessed_word("b---", "book", "k") == "b--k"


def test_update_guessed_word_missing_letter_changes_nothing():
    assert update_guessed_word("-oo-", "book", "z") == "-oo-"


def test_render_game_without_bad_guesses():
    text = render_game("----", "")
    assert text.startswith(DRAWINGS[0])
    assert "Secret word: ----" in text
    assert "wrong" not in text


def test_render_game_single_bad_guess():
    text = render_game("-oo-", "x")
    assert text.startswith(DRAWINGS[1])
    assert "You've made 1 wrong guess: x" in text


def test_render_game_several_bad_guesses():
    text = render_game("-oo-", "xyz")
    assert text.startswith(DRAWINGS[3])
    assert "You've made 3 wrong guesses: xyz" in text


def test_final_message():
    assert final_message(True, "book") == "Congratulations! You win!"
    assert final_message(False, "book") == "You lost. The correct word is book"


def test_game_starts_hidden():
    game = HangmanGame("book")
    assert game.guessed_word == "----"
    assert game.bad_guesses == ""
    assert not game.is_over


def test_game_win():
    game = HangmanGame("book")
    assert game.guess("b") is True
    assert game.guess("O") is True
    assert game.guess("k") is True
    assert game.won
    assert game.is_over
    assert game.guessed_word == "book"


def test_game_loss_after_max_bad_guesses():
    game = HangmanGame("book", max_bad_guesses=3)
    for letter in "xyz":
        assert game.guess(letter) is False
    assert game.lost
    assert game.bad_guess_count == 3
    with pytest.raises(ValueError):
        game.guess("b")


def test_repeated_bad_guess_counts_again():
    game = HangmanGame("book")
    game.guess("x")
    game.guess("x")
    assert game.bad_guesses == "xx"


def test_game_render_matches_render_game():
    game = HangmanGame("book")
    game.guess("o")
    game.guess("q")
    assert game.render() == render_game("-oo-", "q")


def test_guess_must_be_single_character():
    game = HangmanGame("book")
    with pytest.raises(ValueError):
        game.guess("ab")
    with pytest.raises(ValueError):
        game.guess("")


def test_empty_word_rejected():
    with pytest.raises(ValueError):
        HangmanGame("")


def test_choose_word_lowercases(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("Apple\nBANANA  Cherry\n", encoding="utf-8")
    word = choose_word(path, random.Random(1))
    assert word in {"apple", "banana", "cherry"}


def test_choose_word_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("  \n", encoding="utf-8")
    with pytest.raises(ValueError):
        choose_word(path)


def test_choose_word_missing_file(tmp_path):
    with pytest.raises(OSError):
        choose_word(tmp_path / "missing.txt")


def test_main_reports_missing_file(tmp_path, capsys):
    path = tmp_path / "missing.txt"
    assert main([str(path)]) == 1
    assert f"Error reading vocabulary file {path}" in capsys.readouterr().out


def test_main_plays_winning_game(tmp_path, capsys):
    path = tmp_path / "words.txt"
    path.write_text("Dog\n", encoding="utf-8")
    answers = iter(["d", "O", "g"])
    with mock.patch("builtins.input", side_effect=lambda prompt: next(answers)), mock.patch(
        "time.sleep", side_effect=KeyboardInterrupt
    ):
        assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Congratulations! You win!" in out
    assert "Secret word: d--" in out
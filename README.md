# tinygames

A collection of small games and toys that run in a terminal or in a window:

- a command-line calculator,
- a game-over banner,
- a number guessing game,
- hangman, where you guess the word,
- hangman in reverse, where the computer guesses your word,
- an assessment tool that measures how well the computer guesser does,
- snake,
- a turtle-style painter that draws shapes and fractals.

## Installation

```
pip install .
```

The windowed games (snake and the painter) use `pygame`; the painter draws on an in-memory canvas made with `pillow`. Both are installed as dependencies.

## Commands

### Calculator

```
tinygames-calc 12 + 30
tinygames-calc 7 % 3
tinygames-calc sqrt 2
tinygames-calc "7/2"
```

- Three arguments are a number, an operator and a number. The operators are `+`, `-`, `*` (or `x`), `/` and `%`; only the first character of the operator argument counts. Numbers are read as floating point, and the result is printed in short form.
- Two arguments are a function (`sin`, `cos`, `sqrt`) and a number.
- One argument is a whole-number expression such as `7/2` or `-7 % 3`; division and remainder truncate toward zero.
- With no arguments one expression is read from standard input.

Division or remainder by zero (`Invalid divisor`), an unknown operator or function, and a malformed expression are printed and the command exits with status 1.

### Game over

```
tinygames-gameover
```

Prints `Game Over !`.

### Guess it

```
tinygames-guessit
```

The computer picks a number between 1 and 100. After each guess you are told whether your number is higher or lower, until you find it. Answer `y` or `Y` to play again.

### Hangman

```
tinygames-hangman [WORD_FILE]
```

The secret word is picked at random from a word list file (default `data/Ogden_Picturable_200.txt`, relative to the current directory), with words separated by whitespace, and lower-cased. You have seven wrong guesses. When the game ends an animation plays until you press Ctrl-C: a dancing man if you won, a swinging one if you lost.

### Computer guesser

```
tinygames-ai-host [WORD_FILE]
```

Think of a word and enter its length. The computer guesses letters, using the word list (default `data/Ogden_Picturable_200.txt`) to pick the most likely one; its first guess is a vowel. For each guess answer with a mask showing where the letter occurs, with `-` everywhere else. For the word `apple` and the guess `p` the mask is `-pp--`. If the letter is not in the word, answer with dashes only. An inconsistent mask is rejected and asked for again. If no word in the list fits, the computer gives up. After seven wrong guesses, or once the word is complete, an animation plays until Ctrl-C.

To make a mask for a word and a letter:

```
tinygames-genmask apple p
```

### Assessment

```
tinygames-assess [TEST_WORDS [DICTIONARY]]
```

Plays the computer guesser against every word in `TEST_WORDS` (default `data/Ogden_Picturable_200.txt`), using `DICTIONARY` (default `data/dictionary.txt`) as its vocabulary, and prints the average number of wrong guesses.

### Snake

```
tinygames-snake [PICTURE_DIRECTORY]
```

Press a key to start. Steer with the arrow keys, eat cherries to grow, and avoid the walls and your own tail. The game loads `cherry.png`, `snake_vertical.png`, `snake_horizontal.png` and `snake_head.png` from the given directory (default: the current directory); a picture that fails to load is reported and not drawn.

### Painter

```
tinygames-painter [FIGURE [IMAGE_PATH]]
```

Draws one of the numbered figures 0 to 23 in an 800×600 window: squares, stars, circle patterns, a random walk, a Mandelbrot set (figure 17, the default), recursive circles, the Cantor set (which also prints each bar length) and Koch curves. Figure 16 shows the image given as the second argument. Press a key to close the window.

## Using the library

The game logic can be used without a terminal or window:

```python
from tinygames.calculator import arithmetic, evaluate_expression
from tinygames.hangman import HangmanGame
from tinygames.guesser import Guesser
from tinygames.assessment import Assessment, get_mask
from tinygames.snake_game import Game, Direction
from tinygames.painter import Painter
from tinygames.drawings import draw_figure

print(arithmetic(7, 2, "/"))        # 3
print(evaluate_expression("-7 % 3"))  # -1

game = HangmanGame("apple", 7)
game.guess("p")
print(game.render())

print(get_mask("p", "apple"))  # -pp--

guesser = Guesser(["apple", "angle", "arch"])
guesser.new_game(5)
letter = guesser.next_guess()  # "e"; None would mean it gives up
guesser.receive_host_answer(letter, get_mask(letter, "apple"))

assessment = Assessment(["apple", "arch"], Guesser(["apple", "angle", "arch"]))
assessment.play_simulation()
print(assessment.average_incorrect_guess())

snake = Game(30, 20)
snake.process_user_input(Direction.UP)
snake.next_step()
print(snake.snake_positions())

painter = Painter(800, 600)
draw_figure(painter, 22)
painter.canvas.save("koch.png")
```

`Guesser.from_file(path)` builds a guesser from a word list file. An invalid mask raises `tinygames.guesser.MaskError`; calculator errors raise `tinygames.calculator.CalculatorError`.

## What it does not include

- No word list files are shipped. The hangman, computer guesser and assessment commands need them at the paths given above, or passed as arguments.
- No snake pictures are shipped; without them the board shows only its grid.
- Snake has no score display, game-over screen or high-score table: the window closes as soon as the game ends.

## Running the tests

```
pip install .[test]
pytest
```
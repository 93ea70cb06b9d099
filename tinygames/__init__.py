"""Small terminal and windowed games: calculator, number guessing, hangman with a computer guesser, snake and a turtle-style painter."""

__version__ = "0.1.0"
[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinygames"
version = "0.1.0"
description = "Small terminal and windowed games: calculator, number guessing, hangman with a computer guesser, snake and a turtle-style painter."
requires-python = ">=3.10"
keywords = ["games", "hangman", "snake", "turtle graphics", "calculator", "guessing game", "fractals"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pillow",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tinygames-calc = "tinygames.calculator:main"
tinygames-gameover = "tinygames.gameover:main"
tinygames-guessit = "tinygames.guessit:main"
tinygames-genmask = "tinygames.wordtools:main"
tinygames-hangman = "tinygames.hangman:main"
tinygames-ai-host = "tinygames.ai_host:main"
tinygames-assess = "tinygames.assessment:main"
tinygames-snake = "tinygames.snake_app:main"
tinygames-painter = "tinygames.drawings:main"

[tool.hatch.build.targets.wheel]
packages = ["tinygames"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true

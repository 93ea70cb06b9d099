"""Board, snake and rules of the snake game, free of any display code."""

from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass
from enum import Enum, IntEnum


class Direction(Enum):
    """A direction the snake can head in."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


_STEPS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class Position:
    """A cell on the board; ``y`` grows downwards."""

    x: int = 0
    y: int = 0

    def move(self, direction: Direction) -> Position:
        """Return the neighbouring position one step in ``direction``."""
        try:
            dx, dy = _STEPS[direction]
        except (KeyError, TypeError):
            raise ValueError("Unknown direction") from None
        return Position(self.x + dx, self.y + dy)

    def is_inside_box(self, left: int, top: int, width: int, height: int) -> bool:
        """Tell whether the position lies inside the given box."""
        return left <= self.x < left + width and top <= self.y < top + height


class CellType(Enum):
    """What occupies a board cell."""

    EMPTY = 0
    SNAKE = 1
    CHERRY = 2
    OFF_BOARD = 3


class GameStatus(IntEnum):
    """The state of a game; the finished states carry the STOP bit."""

    RUNNING = 1
    STOP = 2
    WON = 4 | 2
    OVER = 8 | 2


class Snake:
    """The snake's body, from tail to head, moving on a game board."""

    def __init__(self, game: Game, start: Position) -> None:
        self._game = game
        self._body: deque[Position] = deque([start])
        self._cherry = 0
        game.snake_move_to(start)

    @property
    def head(self) -> Position:
        return self._body[-1]

    def positions(self) -> list[Position]:
        """Return the body positions, tail first and head last."""
        return list(self._body)

    def eat_cherry(self) -> None:
        """Remember a cherry; the snake grows by one on a later move."""
        self._cherry += 1

    def move(self, direction: Direction) -> None:
        """Advance the head one cell, growing if a cherry is pending."""
        new_position = self.head.move(direction)
        game = self._game
        if self._cherry > 0:
            self._cherry -= 1
            game.snake_move_to(new_position)
            if game.is_over:
                return
            self._body.append(new_position)
        else:
            game.snake_leave(self._body[0])
            game.snake_move_to(new_position)
            if game.is_over:
                return
            self._body.popleft()
            self._body.append(new_position)


class Game:
    """A snake game on a ``width`` by ``height`` board."""

    def __init__(self, width: int, height: int, rng: random.Random | None = None) -> None:
        self.width = width
        self.height = height
        self._rng = rng if rng is not None else random.Random()
        self._squares = [[CellType.EMPTY] * width for _ in range(height)]
        self.status = GameStatus.RUNNING
        self.score = 0
        self._input_queue: deque[Direction] = deque()
        self.current_direction = Direction.RIGHT
        self.cherry_position: Position | None = None
        self.snake = Snake(self, Position(width // 2, height // 2))
        self._add_cherry()

    @property
    def is_running(self) -> bool:
        return self.status == GameStatus.RUNNING

    @property
    def is_over(self) -> bool:
        return self.status == GameStatus.OVER

    @property
    def squares(self) -> tuple[tuple[CellType, ...], ...]:
        """The board, row by row."""
        return tuple(tuple(row) for row in self._squares)

    def process_user_input(self, direction: Direction) -> None:
        """Queue a direction change requested by the player."""
        self._input_queue.append(direction)

    def can_change(self, current: Direction, next_direction: Direction) -> bool:
        """Tell whether the snake may turn from ``current`` to ``next_direction``."""
        if current in (Direction.UP, Direction.DOWN):
            return next_direction in (Direction.LEFT, Direction.RIGHT)
        return next_direction in (Direction.UP, Direction.DOWN)

    def next_step(self) -> None:
        """Apply the first acceptable queued turn and move the snake."""
        while self._input_queue:
            candidate = self._input_queue.popleft()
            if self.can_change(self.current_direction, candidate):
                self.current_direction = candidate
                break
        self.snake.move(self.current_direction)

    def cell_type(self, pos: Position) -> CellType:
        """Return what occupies ``pos``, or OFF_BOARD outside the board."""
        if pos.is_inside_box(0, 0, self.width, self.height):
            return self._squares[pos.y][pos.x]
        return CellType.OFF_BOARD

    def snake_positions(self) -> list[Position]:
        """Return the snake's positions, tail first and head last."""
        return self.snake.positions()

    def snake_move_to(self, pos: Position) -> None:
        """Occupy ``pos`` with the snake's head, applying the game rules."""
        cell = self.cell_type(pos)
        if cell in (CellType.OFF_BOARD, CellType.SNAKE):
            self.status = GameStatus.OVER
            return
        if cell is CellType.CHERRY:
            self.score += 1
            self.snake.eat_cherry()
            self._add_cherry()
        self._set_cell_type(pos, CellType.SNAKE)

    def snake_leave(self, pos: Position) -> None:
        """Free the cell the snake's tail leaves."""
        self._set_cell_type(pos, CellType.EMPTY)

    def _set_cell_type(self, pos: Position, cell_type: CellType) -> None:
        if pos.is_inside_box(0, 0, self.width, self.height):
            self._squares[pos.y][pos.x] = cell_type

    def _add_cherry(self) -> None:
        empty = [
            Position(x, y)
            for y, row in enumerate(self._squares)
            for x, cell in enumerate(row)
            if cell is CellType.EMPTY
        ]
        if not empty:
            self.cherry_position = None
            if self.status == GameStatus.RUNNING:
                self.status = GameStatus.WON
            return
        position = self._rng.choice(empty)
        self._set_cell_type(position, CellType.CHERRY)
        self.cherry_position = position
from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Iterable, List, Optional

from gridsnake.board import Board, Cell, Direction
from gridsnake.constants import SIZE

logger = logging.getLogger(__name__)


class EmptySnakeError(RuntimeError):
    """Raised when the snake has no head."""


class GameState(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    LOST = "lost"


@dataclass
class TickResult:
    snake: List[Cell]
    moved: bool
    ate_fruit: bool
    collision: bool
    lost: bool
    quit_requested: bool


class Snake:
    """Ordered body, head first."""

    def __init__(self, cells: Iterable[Cell], direction: Direction = Direction.UP) -> None:
        self.body: Deque[Cell] = deque(cells)
        self.direction = direction

    @property
    def head(self) -> Cell:
        if not self.body:
            raise EmptySnakeError("Snake is non existent and thus has no head")
        return self.body[0]

    def __contains__(self, cell: Cell) -> bool:
        return cell in self.body

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self):
        return iter(self.body)


class GameSession:
    """Single snake game advanced one tick at a time.

    Input is buffered in a single slot by :meth:`set_pending_direction` and only
    takes effect on the next :meth:`tick`. A self-collision is forgiven once;
    a second consecutive one loses the game.
    """

    def __init__(
        self,
        size: int = SIZE,
        seed: Optional[int] = None,
        snake: Optional[Iterable[Cell]] = None,
        direction: Direction = Direction.UP,
        fruit: Optional[Cell] = None,
    ) -> None:
        self.board = Board(size, rng=random.Random(seed))
        self.snake = Snake(snake if snake is not None else [self.board.center()], direction)
        if fruit is not None and fruit in self.snake:
            raise ValueError(f"fruit {fruit} is inside the snake")
        self.fruit: Cell = fruit if fruit is not None else self.board.random_outside_cell(self.snake.body)
        self.pending: Optional[Direction] = None
        self.started = False
        self.lost = False
        # A collision straight after start is not forgiven.
        self.grace_tick_used = True
        self.quit_requested = False
        self.score = 0

    @property
    def state(self) -> GameState:
        if self.lost:
            return GameState.LOST
        if self.started:
            return GameState.RUNNING
        return GameState.NOT_STARTED

    def set_pending_direction(self, direction: Direction) -> None:
        self.pending = direction

    def tick(self) -> TickResult:
        if not self.started:
            if self.pending is None:
                return self._result()
            self.started = True
            logger.debug("Game started heading %s", self.pending.name)

        if self.lost:
            if self.pending is not None:
                self.pending = None
                self.quit_requested = True
                logger.debug("Input received after loss, quit requested")
            return self._result()

        if self.pending is not None:
            self.snake.direction = self.pending
            self.pending = None

        target = self.board.neighbor(self.snake.head, self.snake.direction)
        if target in self.snake:
            if self.grace_tick_used:
                self.lost = True
                logger.debug("Collision at %s, game lost with length %d", target, len(self.snake))
            else:
                self.grace_tick_used = True
                logger.debug("Collision at %s, grace tick used", target)
            return self._result(collision=True)

        ate_fruit = target == self.fruit
        # Drawn before mutating so a full board leaves the session untouched.
        next_fruit = self.board.random_outside_cell({target, *self.snake.body}) if ate_fruit else self.fruit

        self.grace_tick_used = False
        self.snake.body.appendleft(target)
        if ate_fruit:
            self.score += 1
            self.fruit = next_fruit
            logger.debug("Fruit eaten, length %d, next fruit at %s", len(self.snake), self.fruit)
        else:
            self.snake.body.pop()
        return self._result(moved=True, ate_fruit=ate_fruit)

    def _result(self, moved: bool = False, ate_fruit: bool = False, collision: bool = False) -> TickResult:
        return TickResult(
            snake=list(self.snake.body),
            moved=moved,
            ate_fruit=ate_fruit,
            collision=collision,
            lost=self.lost,
            quit_requested=self.quit_requested,
        )


def create_session(board_size: int = SIZE, seed: Optional[int] = None) -> GameSession:
    return GameSession(size=board_size, seed=seed)


def set_pending_direction(session: GameSession, direction: Direction) -> None:
    session.set_pending_direction(direction)


def tick(session: GameSession) -> TickResult:
    return session.tick()

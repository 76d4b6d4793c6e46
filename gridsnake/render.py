from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from gridsnake import constants
from gridsnake.board import Cell
from gridsnake.game import GameSession

try:
    import pygame  # type: ignore
except ImportError:  # pragma: no cover - pygame not installed in some envs
    pygame = None

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class RenderModel:
    size: int
    snake: Tuple[Cell, ...]
    fruit: Cell
    lost: bool
    score: int

    def fillers(self) -> List[Tuple[float, float]]:
        """Midpoints between consecutive body cells, so the body draws as one piece."""
        return [
            ((a.x + b.x) / 2.0, (a.y + b.y) / 2.0)
            for a, b in zip(self.snake, self.snake[1:])
        ]

    def to_array(self) -> np.ndarray:
        """3-channel grid: body, head, fruit."""
        state = np.zeros((3, self.size, self.size), dtype=np.float32)
        for x, y in self.snake:
            state[0, y, x] = 1.0
        if self.snake:
            head_x, head_y = self.snake[0]
            state[1, head_y, head_x] = 1.0
        state[2, self.fruit.y, self.fruit.x] = 1.0
        return state


def render(session: GameSession) -> RenderModel:
    return RenderModel(
        size=session.board.size,
        snake=tuple(session.snake.body),
        fruit=session.fruit,
        lost=session.lost,
        score=session.score,
    )


@dataclass(frozen=True)
class Layout:
    smaller_side: float
    origin: Tuple[float, float]
    square_width: float

    @property
    def marker_side(self) -> float:
        return self.square_width / 2.0

    def marker_position(self, x: float, y: float) -> Tuple[float, float]:
        """Top-left pixel of the marker drawn for grid position (x, y)."""
        inset = self.square_width / 4.0
        return (
            self.origin[0] + self.square_width * x + inset,
            self.origin[1] + self.square_width * y + inset,
        )


def layout(window_size: Tuple[float, float], size: int) -> Layout:
    width, height = window_size
    smaller_side = float(min(width, height))
    origin = (width / 2.0 - smaller_side / 2.0, height / 2.0 - smaller_side / 2.0)
    return Layout(smaller_side=smaller_side, origin=origin, square_width=smaller_side / size)


class PygameRenderer:
    def __init__(self, window_size: Tuple[int, int] = constants.WINDOW_SIZE, title: str = constants.TITLE) -> None:
        if pygame is None:
            raise ImportError("pygame is required for rendering")

        pygame.init()
        self._window = pygame.display.set_mode(window_size, pygame.RESIZABLE)
        pygame.display.set_caption(title)

    def draw(self, model: RenderModel) -> None:
        window = self._window
        geometry = layout(window.get_size(), model.size)

        window.fill(constants.VOID)
        board_color = constants.FRUIT if model.lost else constants.BACKGROUND
        board_rect = pygame.Rect(
            round(geometry.origin[0]),
            round(geometry.origin[1]),
            round(geometry.smaller_side),
            round(geometry.smaller_side),
        )
        pygame.draw.rect(window, board_color, board_rect)

        for x, y in model.snake:
            self._marker(geometry, x, y, constants.SNAKE)
        for x, y in model.fillers():
            self._marker(geometry, x, y, constants.SNAKE)
        self._marker(geometry, model.fruit.x, model.fruit.y, constants.FRUIT)

        pygame.display.flip()

    def _marker(self, geometry: Layout, x: float, y: float, color: Color) -> None:
        left, top = geometry.marker_position(x, y)
        side = max(1, round(geometry.marker_side))
        pygame.draw.rect(self._window, color, pygame.Rect(round(left), round(top), side, side))

    def close(self) -> None:
        if pygame:
            pygame.quit()


class HeadlessRenderer:
    """Keeps every drawn frame as an array instead of showing it."""

    def __init__(self, max_frames: Optional[int] = None) -> None:
        self.max_frames = max_frames
        self.frames: List[np.ndarray] = []
        self.last: Optional[RenderModel] = None

    def draw(self, model: RenderModel) -> None:
        self.last = model
        self.frames.append(model.to_array())
        if self.max_frames is not None and len(self.frames) > self.max_frames:
            del self.frames[0]

    def close(self) -> None:
        self.frames.clear()

from __future__ import annotations

import random
from enum import Enum
from typing import Collection, Iterator, List, NamedTuple, Optional

from gridsnake.constants import SIZE


class Cell(NamedTuple):
    x: int
    y: int


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


class BoardFullError(RuntimeError):
    """Raised when every cell of the board is occupied."""


class Board:
    """Square grid with edge-clamped neighbour lookup."""

    def __init__(self, size: int = SIZE, rng: Optional[random.Random] = None) -> None:
        if size < 1:
            raise ValueError(f"board size must be positive, got {size}")
        self.size = size
        self.random = rng if rng is not None else random.Random()

    def center(self) -> Cell:
        mid = (self.size - 1) // 2
        return Cell(mid, mid)

    def contains(self, cell: Cell) -> bool:
        return 0 <= cell.x < self.size and 0 <= cell.y < self.size

    def cells(self) -> Iterator[Cell]:
        for x in range(self.size):
            for y in range(self.size):
                yield Cell(x, y)

    def neighbor(self, cell: Cell, direction: Direction) -> Cell:
        """Step one cell in ``direction``; stepping off the board is a no-op."""
        dx, dy = direction.value
        last = self.size - 1
        return Cell(min(max(cell.x + dx, 0), last), min(max(cell.y + dy, 0), last))

    def random_outside_cell(self, occupied: Collection[Cell]) -> Cell:
        available: List[Cell] = [cell for cell in self.cells() if cell not in occupied]
        if not available:
            raise BoardFullError(f"no free cell left on a {self.size}x{self.size} board")
        return self.random.choice(available)

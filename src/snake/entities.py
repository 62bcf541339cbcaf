# entities.py
from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterator, Tuple

import numpy as np  # type: ignore

from .config import CELL_SIZE, GRID_W, GRID_H, RIGHT, DIRECTIONS

Cell = Tuple[int, int]


def is_opposite(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


# ---------- Snake ----------
@dataclass
class Snake:
    head: Cell                              # pixel coords, multiple of cell_size
    direction: Tuple[int, int] = RIGHT
    cell_size: int = CELL_SIZE
    tail: Deque[Cell] = field(default_factory=deque)  # index 0 is nearest the head

    @property
    def length(self) -> int:
        return len(self.tail) + 1

    def segments(self) -> Iterator[Cell]:
        yield self.head
        yield from self.tail

    def turn(self, direction: Tuple[int, int]) -> None:
        """Change heading; reversals and non-unit moves are silently ignored."""
        if direction not in DIRECTIONS or is_opposite(direction, self.direction):
            return
        self.direction = direction

    def advance(self) -> None:
        """
        Move one cell along the current direction.
        The tail behaves as a fixed-length FIFO: the old head goes in front,
        the oldest segment drops off the back.
        """
        if self.tail:
            self.tail.appendleft(self.head)
            self.tail.pop()

        hx, hy = self.head
        dx, dy = self.direction
        self.head = (hx + dx * self.cell_size, hy + dy * self.cell_size)

    def grow(self) -> None:
        # The tail keeps its new length on every later advance.
        self.tail.append(self.head)


# ---------- Food ----------
def random_cell(rng: np.random.Generator, columns: int, rows: int, cell_size: int) -> Cell:
    """Uniformly random grid-aligned pixel position."""
    x = int(np.floor(rng.random() * columns)) * cell_size
    y = int(np.floor(rng.random() * rows)) * cell_size
    return (x, y)


@dataclass
class Food:
    position: Cell
    columns: int = GRID_W
    rows: int = GRID_H
    cell_size: int = CELL_SIZE

    @classmethod
    def random(
        cls,
        rng: np.random.Generator,
        columns: int = GRID_W,
        rows: int = GRID_H,
        cell_size: int = CELL_SIZE,
    ) -> "Food":
        return cls(random_cell(rng, columns, rows, cell_size), columns, rows, cell_size)

    def relocate(self, rng: np.random.Generator) -> None:
        # May land on the snake; nothing checks occupancy.
        self.position = random_cell(rng, self.columns, self.rows, self.cell_size)

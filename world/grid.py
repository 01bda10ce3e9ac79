"""
poo_snake module: world/grid.py

Toroidal grid primitives:
- Point is always normalized into [0, CELLS_X_LEN) x [0, CELLS_Y_LEN)
- neighbor() is the only way positions move, so everything wraps
- is_collide() is a plain axis-aligned box test for pixel-space checks
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import config


class Direction(Enum):
    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3

    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    @property
    def angle(self) -> float:
        # degrees, clockwise-positive (screen y grows downward)
        return _ANGLES[self]


_OPPOSITES = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}

_DELTAS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}

_ANGLES = {
    Direction.UP: 0.0,
    Direction.RIGHT: 90.0,
    Direction.DOWN: 180.0,
    Direction.LEFT: 270.0,
}


def wrap(value: int, size: int) -> int:
    return value % size


@dataclass(frozen=True, init=False)
class Point:
    x: int
    y: int

    def __init__(self, x: int = 0, y: int = 0):
        object.__setattr__(self, "x", wrap(int(x), config.CELLS_X_LEN))
        object.__setattr__(self, "y", wrap(int(y), config.CELLS_Y_LEN))

    def neighbor(self, direction: Direction) -> "Point":
        dx, dy = direction.delta
        return Point(self.x + dx, self.y + dy)

    @property
    def index(self) -> int:
        """Row-major cell index, used to address per-cell pools."""
        return self.y * config.CELLS_X_LEN + self.x

    @staticmethod
    def from_index(index: int) -> "Point":
        return Point(index % config.CELLS_X_LEN, index // config.CELLS_X_LEN)

    def to_pixels(self, cell_size: int = config.CELL_SIZE) -> Tuple[int, int]:
        return (self.x * cell_size, self.y * cell_size)


def direction_between(a: Point, b: Point) -> Optional[Direction]:
    """
    Direction d with a.neighbor(d) == b, or None when the cells are not adjacent.
    """
    for d in Direction:
        if a.neighbor(d) == b:
            return d
    return None


def is_collide(
    x1: float, y1: float, w1: float, h1: float,
    x2: float, y2: float, w2: float, h2: float,
) -> bool:
    # edges touching counts as a hit
    return (x1 <= x2 + w2 and x2 <= x1 + w1) and (y1 <= y2 + h2 and y2 <= y1 + h1)

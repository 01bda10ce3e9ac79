"""
poo_snake module: game/command.py

Per-frame player input.
"""

from __future__ import annotations
from enum import Enum
from typing import Optional

from world.grid import Direction


class Command(Enum):
    NONE = 0
    LEFT = 1
    RIGHT = 2
    UP = 3
    DOWN = 4

    @staticmethod
    def coerce(value) -> "Command":
        """Anything that isn't a known command is treated as NONE."""
        if isinstance(value, Command):
            return value
        return Command.NONE

    @property
    def direction(self) -> Optional[Direction]:
        return _DIRECTIONS.get(self)


_DIRECTIONS = {
    Command.LEFT: Direction.LEFT,
    Command.RIGHT: Direction.RIGHT,
    Command.UP: Direction.UP,
    Command.DOWN: Direction.DOWN,
}

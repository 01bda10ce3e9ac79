"""
poo_snake module: snake/player.py

The player: a head cell, a heading, and the trail of body segments
(head-to-tail order) that follows it around the grid.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

import config
from snake.growth import tail_extension
from world.grid import Direction, Point


def clamp_energy(value: int) -> int:
    return max(0, min(config.ENERGY_MAX, value))


@dataclass
class Player:
    p: Point = field(default_factory=Point)
    direction: Direction = Direction.UP
    bodies: List[Point] = field(default_factory=list)
    energy: int = config.ENERGY_START

    def set_direction(self, direction: Direction) -> None:
        self.direction = direction

    def get_angle(self) -> float:
        return self.direction.angle

    def do_move(self) -> None:
        """
        One step: each segment takes the cell of the one ahead of it,
        then the head steps forward. Costs one unit of energy.
        """
        self.energy -= 1
        for i in range(len(self.bodies) - 1, 0, -1):
            self.bodies[i] = self.bodies[i - 1]
        if self.bodies:
            self.bodies[0] = self.p
        self.p = self.p.neighbor(self.direction)

    def grow(self) -> Point:
        segment = tail_extension(self.p, self.direction, self.bodies)
        self.bodies.append(segment)
        return segment

    def shrink(self) -> bool:
        # empty trail: nothing to drop
        if not self.bodies:
            return False
        self.bodies.pop()
        return True

    def add_energy(self, amount: int) -> None:
        self.energy = clamp_energy(self.energy + amount)

    def hits_own_body(self) -> bool:
        return any(b == self.p for b in self.bodies)

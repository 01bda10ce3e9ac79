"""
poo_snake module: world/food.py

Food system:
- One preallocated slot per grid cell, toggled active/inactive
- Spawns at most one pellet per attempt, at a uniformly random cell
- Color is drawn from a fixed cumulative table and decides the reward
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import random
from typing import List, Optional

import config
from world.grid import Point


class FoodColor(Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    WHITE = "white"

    @staticmethod
    def spawn_order() -> List["FoodColor"]:
        # most common first, lines up with config.FOOD_COLOR_THRESHOLDS
        return [FoodColor.RED, FoodColor.GREEN, FoodColor.BLUE, FoodColor.WHITE]

    @property
    def energy(self) -> int:
        return config.FOOD_ENERGY[self.value]

    @property
    def is_neutral(self) -> bool:
        return self is FoodColor.WHITE


def color_for_roll(roll: int) -> FoodColor:
    """
    Map a 0..99 roll onto the cumulative color table (40/35/20/5).
    """
    for color, upper in zip(FoodColor.spawn_order(), config.FOOD_COLOR_THRESHOLDS):
        if roll < upper:
            return color
    return FoodColor.spawn_order()[-1]


@dataclass
class Food:
    p: Point
    color: FoodColor = FoodColor.RED
    exists: bool = False


class FoodPool:
    def __init__(self):
        cells = config.CELLS_X_LEN * config.CELLS_Y_LEN
        self.slots: List[Food] = [Food(p=Point.from_index(i)) for i in range(cells)]

    def active(self) -> List[Food]:
        return [f for f in self.slots if f.exists]

    def active_count(self) -> int:
        return sum(1 for f in self.slots if f.exists)

    def at(self, p: Point) -> Food:
        return self.slots[p.index]

    def try_spawn(self, rng: random.Random) -> Optional[Food]:
        """
        Pick one slot uniformly; if it's already taken the attempt is dropped.
        Returns the activated food, or None.
        """
        slot = self.slots[rng.randrange(len(self.slots))]
        if slot.exists:
            return None
        slot.color = color_for_roll(rng.randrange(100))
        slot.exists = True
        return slot

    def eat_at(self, p: Point) -> List[Food]:
        """
        Deactivate food on cell p and return what was there.
        """
        eaten: List[Food] = []
        for f in self.slots:
            if f.exists and f.p == p:
                f.exists = False
                eaten.append(f)
        return eaten

"""
poo_snake module: world/world.py

World state container (food + hazards on the toroidal grid).
"""

from __future__ import annotations
from dataclasses import dataclass

import config
from world.food import FoodPool
from world.poo import PooPool


@dataclass
class World:
    w: int
    h: int
    food: FoodPool
    poos: PooPool

    @staticmethod
    def create() -> "World":
        w, h = config.CELLS_X_LEN, config.CELLS_Y_LEN
        return World(w=w, h=h, food=FoodPool(), poos=PooPool(w * h))

    def update(self) -> int:
        """
        Hazards destroy any food sharing their cell. Returns how many went.
        """
        removed = 0
        for f in self.food.active():
            if self.poos.occupies(f.p):
                f.exists = False
                removed += 1
        return removed

"""
poo_snake module: world/poo.py

Hazards left behind by the player. Same pooled-slot lifecycle as food,
but placement takes the first free slot instead of a cell-indexed one.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

import config
from world.grid import Point


@dataclass
class Poo:
    p: Point = field(default_factory=Point)
    exists: bool = False


class PooPool:
    def __init__(self, capacity: int = config.CELLS_X_LEN * config.CELLS_Y_LEN):
        self.slots: List[Poo] = [Poo() for _ in range(capacity)]

    def active(self) -> List[Poo]:
        return [p for p in self.slots if p.exists]

    def place(self, p: Point) -> Optional[Poo]:
        for slot in self.slots:
            if not slot.exists:
                slot.p = p
                slot.exists = True
                return slot
        return None

    def hit_at(self, p: Point) -> List[Poo]:
        hits: List[Poo] = []
        for slot in self.slots:
            if slot.exists and slot.p == p:
                slot.exists = False
                hits.append(slot)
        return hits

    def occupies(self, p: Point) -> bool:
        return any(slot.exists and slot.p == p for slot in self.slots)

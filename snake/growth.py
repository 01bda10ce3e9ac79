"""
poo_snake module: snake/growth.py

Where a new trailing segment goes.

New growth always continues the tail in a straight line:
- no segments: one cell behind the head
- one segment: continue the head -> segment direction
- otherwise: continue the second-to-last -> last direction
"""

from __future__ import annotations
from typing import List

from world.grid import Direction, Point, direction_between


def tail_end(head: Point, bodies: List[Point]) -> Point:
    return bodies[-1] if bodies else head


def tail_extension(head: Point, direction: Direction, bodies: List[Point]) -> Point:
    fallback = direction.opposite()
    if not bodies:
        return head.neighbor(fallback)

    before = bodies[-2] if len(bodies) >= 2 else head
    last = bodies[-1]
    d = direction_between(before, last)
    if d is None:
        d = fallback
    return last.neighbor(d)

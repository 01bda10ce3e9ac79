"""
poo_snake module: game/demo.py

Movement demo: a lone head that steps every DEMO_MOVE_INTERVAL frames
(never on frame 0) and wraps around the grid. No body, food or game over.
"""

from __future__ import annotations
import logging
from typing import List

import config
from game.command import Command
from snake.player import Player
from world.grid import Point

logger = logging.getLogger(__name__)


class DemoGame:
    def __init__(self):
        self.is_over = False
        self.frame = 0
        self.score = 0
        self.player = Player(p=Point(0, 0))
        self.requested_sounds: List[str] = []

    def update(self, command: Command = Command.NONE) -> None:
        if self.is_over:
            return

        direction = Command.coerce(command).direction
        if direction is not None:
            self.player.set_direction(direction)

        if self.frame != 0 and self.frame % config.DEMO_MOVE_INTERVAL == 0:
            self.player.do_move()
            logger.debug("demo head at (%d, %d)", self.player.p.x, self.player.p.y)

        self.frame += 1

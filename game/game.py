"""
poo_snake module: game/game.py

Grid game state machine. One update() per rendered frame:
- the player steps every MOVE_INTERVAL frames and burns one energy per step
- food trickles in every FOOD_SPAWN_INTERVAL frames while fewer than FOOD_ACTIVE_LIMIT exist
- every POO_EAT_PERIOD-th meal schedules a hazard at the tail POO_DELAY_FRAMES later
- hazards, self-bites and running out of energy end the game

Renderers and the mixer only read the public fields; the mixer drains
requested_sounds after each frame.
"""

from __future__ import annotations
import logging
import random
import time
from typing import Dict, List, Optional

import config
from game import sounds
from game.command import Command
from snake.growth import tail_end
from snake.player import Player
from world.food import Food, FoodColor, FoodPool
from world.grid import Point
from world.poo import PooPool
from world.world import World

logger = logging.getLogger(__name__)

NO_SPAWN_SCHEDULED = -1


def wall_clock_seed() -> int:
    return int(time.time())


class Game:
    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        if seed is None:
            seed = wall_clock_seed()
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)

        self.is_over = False
        self.over_reason: Optional[str] = None
        self.frame = 0
        self.score = 0

        self.player = Player(p=Point(config.CELLS_X_LEN // 2, config.CELLS_Y_LEN // 2))
        self.world = World.create()

        self.ate_counts: Dict[FoodColor, int] = {c: 0 for c in FoodColor}
        self.ate_count = 0
        self.poo_spawn_frame = NO_SPAWN_SCHEDULED
        self.requested_sounds: List[str] = []

        logger.debug("new game seed=%d", seed)

    @property
    def foods(self) -> FoodPool:
        return self.world.food

    @property
    def poos(self) -> PooPool:
        return self.world.poos

    @property
    def energy(self) -> int:
        return self.player.energy

    def update(self, command: Command = Command.NONE) -> None:
        if self.is_over:
            return

        self._apply_command(Command.coerce(command))

        if self.frame % config.MOVE_INTERVAL == 0:
            self.player.do_move()

        if self.frame % config.FOOD_SPAWN_INTERVAL == 0 and self.foods.active_count() < config.FOOD_ACTIVE_LIMIT:
            spawned = self.foods.try_spawn(self.rng)
            if spawned is not None:
                logger.debug("food %s at (%d, %d)", spawned.color.value, spawned.p.x, spawned.p.y)

        if self.frame == self.poo_spawn_frame:
            self._spawn_poo()

        for food in self.foods.eat_at(self.player.p):
            self._eat(food)

        for _ in self.poos.hit_at(self.player.p):
            self._game_over("hazard")
        self.world.update()

        if self.player.hits_own_body():
            self._game_over("self")

        if self.player.energy < 0:
            self._game_over("energy")

        self.frame += 1
        self.score = self.frame // config.SCORE_FRAMES

    def _apply_command(self, command: Command) -> None:
        direction = command.direction
        if direction is None:
            return
        self.player.set_direction(direction)
        self.requested_sounds.append(sounds.TONE_FOR_DIRECTION[direction])

    def _spawn_poo(self) -> None:
        if self.player.bodies:
            at = tail_end(self.player.p, self.player.bodies)
        else:
            at = self.player.p.neighbor(self.player.direction.opposite())
        self.poo_spawn_frame = NO_SPAWN_SCHEDULED
        if self.poos.place(at) is None:
            logger.debug("no free hazard slot, spawn dropped")
            return
        logger.debug("hazard at (%d, %d)", at.x, at.y)

    def _eat(self, food: Food) -> None:
        self.ate_counts[food.color] += 1

        if food.color.is_neutral:
            self.player.shrink()
            self.requested_sounds.append(sounds.SHRINK)
            return

        self.player.add_energy(food.color.energy)
        self.player.grow()
        self.ate_count += 1
        if self.ate_count % config.POO_EAT_PERIOD == 0:
            self.poo_spawn_frame = self.frame + config.POO_DELAY_FRAMES
            logger.debug("hazard scheduled for frame %d", self.poo_spawn_frame)
        self.requested_sounds.append(sounds.EAT)

    def _game_over(self, reason: str) -> None:
        if not self.is_over:
            logger.info("game over (%s) at frame %d, score %d", reason, self.frame, self.score)
            self.over_reason = reason
        self.is_over = True
        self.requested_sounds.append(sounds.CRASH)

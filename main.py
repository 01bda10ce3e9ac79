"""
Grid snake: eat colored food, keep your energy up, and stay clear of
what you leave behind.

    python main.py [seed]
"""

from __future__ import annotations
import functools
import logging
import sys

import pygame

import host
from audio.mixer import SoundBank
from game.game import Game

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args = sys.argv[1:] if argv is None else argv
    seed = int(args[0]) if args else None

    try:
        bank = SoundBank.load()
    except pygame.error:
        logger.exception("cannot open audio")
        raise

    host.run(functools.partial(Game, seed=seed), "poo-snake", sound_bank=bank)
    return 0


if __name__ == "__main__":
    sys.exit(main())

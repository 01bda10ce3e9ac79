"""
Shared pygame host loop: poll input -> one update -> render -> flush audio -> pace.
"""

from __future__ import annotations
import logging
from typing import Callable, Optional

import pygame

import config
from audio.mixer import SoundBank
from game.command import Command
from render.renderer import make_head_image, render_game

logger = logging.getLogger(__name__)

KEY_COMMANDS = {
    pygame.K_LEFT: Command.LEFT,
    pygame.K_RIGHT: Command.RIGHT,
    pygame.K_UP: Command.UP,
    pygame.K_DOWN: Command.DOWN,
}

HELP = """Keys:
    Up    : Move player up
    Down  : Move player down
    Left  : Move player left
    Right : Move player right
    Space : Restart when game over
    Esc   : Quit"""


def command_for_key(key: int) -> Command:
    return KEY_COMMANDS.get(key, Command.NONE)


def poll(events, game) -> tuple[Command, bool, bool]:
    """
    Returns (command, restart, quit) for one frame's events.
    The last arrow key pressed in the frame wins.
    """
    command = Command.NONE
    restart = False
    for e in events:
        if e.type == pygame.QUIT:
            return command, restart, True
        if e.type != pygame.KEYDOWN:
            continue
        if e.key == pygame.K_ESCAPE:
            return command, restart, True
        if e.key == pygame.K_SPACE:
            if game.is_over:
                restart = True
            continue
        command = command_for_key(e.key)
    return command, restart, False


def run(new_game: Callable[[], object], title: str, sound_bank: Optional[SoundBank] = None) -> None:
    pygame.init()
    screen = pygame.display.set_mode((config.SCREEN_W, config.SCREEN_H))
    pygame.display.set_caption(title)
    pygame.mouse.set_visible(False)
    clock = pygame.time.Clock()
    head_img = make_head_image()

    print(HELP)

    game = new_game()
    running = True
    try:
        while running:
            command, restart, quit_requested = poll(pygame.event.get(), game)
            if quit_requested:
                break
            if restart:
                logger.info("restart")
                game = new_game()

            game.update(command)
            render_game(screen, game, head_img)
            pygame.display.flip()

            if sound_bank is not None:
                sound_bank.play_requested(game)
            else:
                game.requested_sounds = []

            clock.tick(config.FPS)
    finally:
        pygame.quit()

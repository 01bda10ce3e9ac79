"""
Tests for host.py input polling.
"""

import pygame

from game.command import Command
from game.demo import DemoGame
from host import command_for_key, poll


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


class TestPoll:
    def test_no_events(self):
        assert poll([], DemoGame()) == (Command.NONE, False, False)

    def test_arrow_keys(self):
        assert command_for_key(pygame.K_LEFT) is Command.LEFT
        assert command_for_key(pygame.K_RIGHT) is Command.RIGHT
        assert command_for_key(pygame.K_UP) is Command.UP
        assert command_for_key(pygame.K_DOWN) is Command.DOWN
        assert command_for_key(pygame.K_a) is Command.NONE

    def test_last_key_of_frame_wins(self):
        command, _, _ = poll([key(pygame.K_LEFT), key(pygame.K_UP)], DemoGame())
        assert command is Command.UP

    def test_key_up_events_ignored(self):
        events = [key(pygame.K_LEFT), pygame.event.Event(pygame.KEYUP, key=pygame.K_RIGHT)]
        assert poll(events, DemoGame())[0] is Command.LEFT

    def test_escape_and_close_quit(self):
        assert poll([key(pygame.K_ESCAPE)], DemoGame())[2] is True
        assert poll([pygame.event.Event(pygame.QUIT)], DemoGame())[2] is True

    def test_space_restarts_only_when_over(self):
        game = DemoGame()
        assert poll([key(pygame.K_SPACE)], game)[1] is False
        game.is_over = True
        assert poll([key(pygame.K_SPACE)], game)[1] is True

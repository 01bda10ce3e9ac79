"""
Tests for game/demo.py - the movement demo.
"""

import config
from game.command import Command
from game.demo import DemoGame
from world.grid import Direction, Point


class TestDemoGame:
    def test_starts_at_origin_facing_up(self):
        demo = DemoGame()
        assert demo.player.p == Point(0, 0)
        assert demo.player.direction is Direction.UP
        assert not demo.is_over

    def test_never_moves_on_frame_zero(self):
        demo = DemoGame()
        demo.update()
        assert demo.player.p == Point(0, 0)

    def test_moves_on_the_fifteenth_frame(self):
        demo = DemoGame()
        for _ in range(config.DEMO_MOVE_INTERVAL):
            demo.update()
        assert demo.player.p == Point(0, 0)

        demo.update()
        assert demo.player.p == Point(0, config.CELLS_Y_LEN - 1)

    def test_command_turns_the_head(self):
        demo = DemoGame()
        demo.update(Command.RIGHT)
        assert demo.player.direction is Direction.RIGHT
        assert demo.player.get_angle() == 90.0
        for _ in range(config.DEMO_MOVE_INTERVAL):
            demo.update()
        assert demo.player.p == Point(1, 0)

    def test_no_body_no_sounds_no_score(self):
        demo = DemoGame()
        for i in range(config.DEMO_MOVE_INTERVAL * 40):
            demo.update(Command.LEFT if i % 50 == 0 else "bogus")
        assert demo.player.bodies == []
        assert demo.requested_sounds == []
        assert demo.score == 0
        assert not demo.is_over

"""
Tests for snake/player.py and snake/growth.py.
"""

import config
from snake.growth import tail_end, tail_extension
from snake.player import Player, clamp_energy
from world.grid import Direction, Point


class TestMove:
    def test_head_only_move_costs_one_energy(self):
        player = Player(p=Point(5, 5))
        player.do_move()
        assert player.p == Point(5, 4)
        assert player.energy == config.ENERGY_START - 1

    def test_segments_follow_the_head(self):
        player = Player(p=Point(5, 5), direction=Direction.RIGHT,
                        bodies=[Point(4, 5), Point(3, 5), Point(3, 6)])
        player.do_move()
        assert player.p == Point(6, 5)
        assert player.bodies == [Point(5, 5), Point(4, 5), Point(3, 5)]

    def test_energy_can_go_negative(self):
        player = Player(energy=0)
        player.do_move()
        assert player.energy == -1


class TestGrowth:
    def test_no_segments_grows_behind_head(self):
        player = Player(p=Point(5, 5), direction=Direction.UP)
        assert player.grow() == Point(5, 6)
        assert player.bodies == [Point(5, 6)]

    def test_no_segments_wraps(self):
        player = Player(p=Point(0, 0), direction=Direction.RIGHT)
        assert player.grow() == Point(config.CELLS_X_LEN - 1, 0)

    def test_one_segment_continues_head_to_segment(self):
        # heading up, but the single segment sits to the left
        player = Player(p=Point(5, 5), direction=Direction.UP, bodies=[Point(4, 5)])
        player.grow()
        assert player.bodies == [Point(4, 5), Point(3, 5)]

    def test_general_case_extends_straight(self):
        bodies = [Point(5, 6), Point(5, 7), Point(6, 7)]
        assert tail_extension(Point(5, 5), Direction.UP, bodies) == Point(7, 7)

    def test_tail_end(self):
        assert tail_end(Point(1, 1), []) == Point(1, 1)
        assert tail_end(Point(1, 1), [Point(1, 2), Point(1, 3)]) == Point(1, 3)


class TestShrinkAndEnergy:
    def test_shrink_drops_last_segment(self):
        player = Player(bodies=[Point(0, 1), Point(0, 2)])
        assert player.shrink()
        assert player.bodies == [Point(0, 1)]

    def test_shrink_without_segments_is_noop(self):
        player = Player()
        assert player.shrink() is False
        assert player.bodies == []

    def test_add_energy_clamps_high(self):
        player = Player(energy=config.ENERGY_MAX - 1)
        player.add_energy(50)
        assert player.energy == config.ENERGY_MAX

    def test_add_energy_clamps_low(self):
        player = Player(energy=-3)
        player.add_energy(1)
        assert player.energy == 0

    def test_clamp_energy(self):
        assert clamp_energy(-1) == 0
        assert clamp_energy(config.ENERGY_MAX + 1) == config.ENERGY_MAX
        assert clamp_energy(7) == 7


class TestPlayerMisc:
    def test_angle_follows_direction(self):
        player = Player()
        player.set_direction(Direction.LEFT)
        assert player.get_angle() == 270.0

    def test_hits_own_body(self):
        player = Player(p=Point(2, 2), bodies=[Point(2, 3)])
        assert not player.hits_own_body()
        player.bodies.append(Point(2, 2))
        assert player.hits_own_body()

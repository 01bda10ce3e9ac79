"""
Shared fixtures. pygame runs headless here.
"""

import os
import sys

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from game.game import Game


class ScriptedRng:
    """
    Stand-in for random.Random: randrange() returns queued values, then `default`.
    With the default of 0 every food spawn lands on cell (0, 0) as red.
    """

    def __init__(self, values=None, default=0):
        self.values = list(values or [])
        self.default = default

    def randrange(self, n):
        v = self.values.pop(0) if self.values else self.default
        assert 0 <= v < n
        return v


@pytest.fixture
def scripted_game():
    return Game(rng=ScriptedRng())


@pytest.fixture
def scripted_rng():
    return ScriptedRng

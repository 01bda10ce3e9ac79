"""
poo_snake module: game/sounds.py

Sound-effect identifiers queued by the games and played by audio/mixer.py.
"""

from world.grid import Direction

CRASH = "crash"
EAT = "eat"
SHRINK = "shrink"
TONE_LEFT = "tone_left"
TONE_RIGHT = "tone_right"
TONE_UP = "tone_up"
TONE_DOWN = "tone_down"

ALL = (CRASH, EAT, SHRINK, TONE_LEFT, TONE_RIGHT, TONE_UP, TONE_DOWN)

TONE_FOR_DIRECTION = {
    Direction.LEFT: TONE_LEFT,
    Direction.RIGHT: TONE_RIGHT,
    Direction.UP: TONE_UP,
    Direction.DOWN: TONE_DOWN,
}

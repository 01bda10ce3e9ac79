"""
poo_snake module: audio/tones.py

Procedural square-wave blips for every sound id, so no audio assets ship.
Samples are signed 16-bit, interleaved when channels > 1.
"""

from __future__ import annotations
import array
from typing import Dict, List, Tuple

from game import sounds

AMPLITUDE = 3000

# sound id -> notes as (frequency Hz, seconds); 0 Hz is a rest
SOUND_NOTES: Dict[str, List[Tuple[float, float]]] = {
    sounds.CRASH: [(180.0, 0.08), (120.0, 0.08), (80.0, 0.18)],
    sounds.EAT: [(660.0, 0.05), (990.0, 0.07)],
    sounds.SHRINK: [(880.0, 0.05), (440.0, 0.07)],
    # do, re, mi, fa
    sounds.TONE_LEFT: [(523.25, 0.06)],
    sounds.TONE_RIGHT: [(587.33, 0.06)],
    sounds.TONE_UP: [(659.25, 0.06)],
    sounds.TONE_DOWN: [(698.46, 0.06)],
}


def square_wave(freq: float, seconds: float, rate: int, amplitude: int = AMPLITUDE) -> List[int]:
    n = int(rate * seconds)
    if freq <= 0:
        return [0] * n
    out: List[int] = []
    for i in range(n):
        t = i / rate
        s = 1 if int(t * freq * 2) % 2 == 0 else -1
        out.append(amplitude * s)
    return out


def synthesize(sound_id: str, rate: int, channels: int = 1) -> array.array:
    """
    Render the notes for sound_id. Raises KeyError for unknown ids.
    """
    mono: List[int] = []
    for freq, seconds in SOUND_NOTES[sound_id]:
        mono.extend(square_wave(freq, seconds, rate))

    samples = array.array("h")
    for s in mono:
        for _ in range(channels):
            samples.append(s)
    return samples

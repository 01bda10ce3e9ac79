"""
poo_snake module: audio/mixer.py

Opens the pygame mixer, builds one Sound per id, and flushes the game's
queued sound requests once per frame. Failing to open audio is fatal.
"""

from __future__ import annotations
import logging
from typing import Dict

import pygame

import config
from audio.tones import SOUND_NOTES, synthesize

logger = logging.getLogger(__name__)


def open_mixer() -> tuple[int, int]:
    """
    Returns (frequency, channels) the device actually opened with.
    """
    pygame.mixer.init(
        frequency=config.AUDIO_FREQUENCY,
        size=-16,
        channels=1,
        buffer=config.AUDIO_CHUNK_SIZE,
    )
    init = pygame.mixer.get_init()
    if not init:
        raise pygame.error("cannot open audio")
    freq, _fmt, channels = init
    logger.info("audio open: %d Hz, %d channel(s)", freq, channels)
    return freq, channels


class SoundBank:
    def __init__(self, sounds: Dict[str, pygame.mixer.Sound]):
        self.sounds = sounds

    @staticmethod
    def load() -> "SoundBank":
        freq, channels = open_mixer()
        built: Dict[str, pygame.mixer.Sound] = {}
        for sound_id in SOUND_NOTES:
            snd = pygame.mixer.Sound(buffer=synthesize(sound_id, freq, channels).tobytes())
            snd.set_volume(config.AUDIO_VOLUME)
            built[sound_id] = snd
        return SoundBank(built)

    def play_requested(self, game) -> int:
        """
        Play everything the last update queued, then clear the queue.
        """
        played = 0
        for sound_id in game.requested_sounds:
            self.sounds[sound_id].play()
            played += 1
        game.requested_sounds = []
        return played

"""
audio.py: Simple synthesized beeps mapped to game events.
"""

import math
from array import array
from typing import Dict, Tuple

import pygame

from .data_models import EventKind, GameEvent
from .logger import get_logger

log = get_logger("audio")

SAMPLE_RATE = 22050


class BeepAudio:
    """
    Listener that turns flapped / scored / died events into sine beeps.
    Never blocks: pygame.mixer plays asynchronously.
    """

    def __init__(self, muted: bool = False):
        self.muted = muted
        self.enabled = False
        self.channels = 1
        self._cache: Dict[Tuple[int, int], pygame.mixer.Sound] = {}
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
            _, _, self.channels = pygame.mixer.get_init()
            self.enabled = True
        except pygame.error as e:
            log.warning("Audio disabled: %s", e)

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        return self.muted

    def _tone(self, freq: float, dur: float) -> pygame.mixer.Sound:
        key = (int(freq), int(dur * 1000))
        sound = self._cache.get(key)
        if sound is None:
            n = int(SAMPLE_RATE * dur)
            samples = array("h")
            for i in range(n):
                value = int(32767 * math.sin(2 * math.pi * freq * i / SAMPLE_RATE))
                samples.extend([value] * self.channels)
            sound = pygame.mixer.Sound(buffer=samples.tobytes())
            self._cache[key] = sound
        return sound

    def beep(self, freq: float, dur: float = 0.07, vol: float = 0.08):
        if not self.enabled or self.muted:
            return
        sound = self._tone(freq, dur)
        sound.set_volume(vol)
        sound.play()

    def __call__(self, event: GameEvent):
        if event.kind is EventKind.FLAPPED:
            self.beep(900, 0.05, 0.09)
        elif event.kind is EventKind.SCORED:
            # Pitch drops as the score climbs
            self.beep(1200 - min(600, event.score * 30), 0.06, 0.07)
        elif event.kind is EventKind.DIED:
            self.beep(140, 0.3, 0.18)

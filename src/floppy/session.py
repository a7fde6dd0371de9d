"""
session.py: The per-run aggregate of bird, pipes, spawn timer and score.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional

from .data_models import Bird, Phase, Pipe, Playfield
from .pipe_spawner import PipeSpawner, RandomSource


@dataclass
class Session:
    """
    Everything that belongs to one run. A retry builds a new Session
    rather than resetting this one.
    """
    bird: Bird
    spawner: PipeSpawner
    pipes: List[Pipe] = field(default_factory=list)
    score: int = 0
    phase: Phase = Phase.IDLE

    @classmethod
    def fresh(cls, playfield: Playfield, rng: Optional[RandomSource] = None) -> "Session":
        bird = Bird(y=float(math.floor(playfield.height / 2)))
        return cls(bird=bird, spawner=PipeSpawner(rng))

    @property
    def spawn_timer_ms(self) -> float:
        return self.spawner.timer_ms

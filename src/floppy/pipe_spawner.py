"""
pipe_spawner.py: Timed, randomized pipe placement.
"""

import random
from typing import Optional, Protocol

from .constants import (
    PIPE_GAP, PIPE_SPAWN_INTERVAL_MS, PIPE_SPAWN_OFFSET_X,
    PIPE_MIN_TOP, PIPE_GROUND_MARGIN
)
from .data_models import Pipe, Playfield
from .logger import get_logger
from .physics_core import ground_height

log = get_logger("pipe_spawner")


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def top_bounds(height: float) -> tuple[int, int]:
    """Inclusive range for a pipe's gap top at the given playfield height."""
    min_top = PIPE_MIN_TOP
    # Tall playfields grow the ground band past the fixed margin
    max_top = int(height - PIPE_GAP - max(PIPE_GROUND_MARGIN, ground_height(height)))
    # Degenerate playfields collapse to a single position
    return min_top, max(min_top, max_top)


class PipeSpawner:
    """
    Accumulates simulation time and emits one pipe per interval.
    The random source is injectable; the default is unseeded.
    """

    def __init__(self, rng: Optional[RandomSource] = None,
                 interval_ms: float = PIPE_SPAWN_INTERVAL_MS):
        self.rng = rng if rng is not None else random.Random()
        self.interval_ms = interval_ms
        self.timer_ms = 0.0

    def reset(self):
        self.timer_ms = 0.0

    def spawn(self, playfield: Playfield) -> Pipe:
        """Generates a new pipe off-screen to the right."""
        min_top, max_top = top_bounds(playfield.height)
        top = self.rng.randint(min_top, max_top)
        pipe = Pipe(x=float(playfield.width + PIPE_SPAWN_OFFSET_X), top=float(top))
        log.debug("Spawned pipe at x=%.1f top=%d", pipe.x, top,
                  extra={"data": {"x": pipe.x, "top": top, "bottom": pipe.bottom}})
        return pipe

    def tick(self, dt: float, playfield: Playfield) -> Optional[Pipe]:
        self.timer_ms += dt * 1000.0
        if self.timer_ms >= self.interval_ms:
            self.timer_ms = 0.0
            return self.spawn(playfield)
        return None

"""
clock.py: Turns frame callback timestamps into bounded simulation deltas.
"""

from typing import Optional

from .constants import MAX_FRAME_DT


class FrameClock:
    """
    Tracks the previous frame timestamp (milliseconds) and hands out
    deltas in seconds, capped at max_dt so a stalled frame cannot push
    the bird through a pipe or the ground in one step.
    """

    def __init__(self, max_dt: float = MAX_FRAME_DT):
        self.max_dt = max_dt
        self.last_ms: Optional[float] = None

    def mark(self, now_ms: float):
        """Resets the baseline without producing a delta."""
        self.last_ms = now_ms

    def step(self, now_ms: float) -> float:
        if self.last_ms is None:
            self.last_ms = now_ms
            return 0.0
        dt = (now_ms - self.last_ms) / 1000.0
        self.last_ms = now_ms
        # Non-monotonic timestamps count as no time passing
        return min(self.max_dt, max(0.0, dt))

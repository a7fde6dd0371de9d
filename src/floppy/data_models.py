"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .constants import BIRD_RADIUS, BIRD_X, FLAP_IMPULSE, MAX_ROT, PIPE_GAP


class Phase(str, Enum):
    """Session lifecycle."""
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


class EventKind(str, Enum):
    FLAPPED = "flapped"
    SCORED = "scored"
    DIED = "died"
    ENDED = "ended"


@dataclass
class Playfield:
    """Visible area in pixels, supplied by the environment."""
    width: float
    height: float


@dataclass
class Bird:
    """The player-controlled body. Only x is fixed."""
    y: float
    x: float = BIRD_X
    vy: float = 0.0
    radius: float = BIRD_RADIUS
    rot: float = 0.0
    alive: bool = True

    def flap(self):
        """Instantaneous upward impulse, nose up."""
        self.vy = FLAP_IMPULSE
        self.rot = MAX_ROT

    def kill(self):
        self.alive = False


@dataclass
class Pipe:
    """A pipe pair; the gap spans [top, bottom]."""
    x: float
    top: float
    passed: bool = False

    @property
    def bottom(self) -> float:
        return self.top + PIPE_GAP

    def advance(self, dx: float):
        self.x -= dx

    def mark_passed(self) -> bool:
        """Flags the pipe as scored. Returns False if it already was."""
        if self.passed:
            return False
        self.passed = True
        return True


@dataclass(frozen=True)
class SessionResult:
    score: int
    best: int
    new_best: bool


@dataclass(frozen=True)
class GameEvent:
    """Discrete notification for audio and presentation layers."""
    kind: EventKind
    score: int = 0
    result: Optional[SessionResult] = None


@dataclass(frozen=True)
class BirdSnapshot:
    x: float
    y: float
    radius: float
    rot: float
    alive: bool


@dataclass(frozen=True)
class PipeSnapshot:
    x: float
    top: float
    bottom: float
    passed: bool


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one tick, handed to the renderer."""
    phase: Phase
    paused: bool
    score: int
    best: int
    bird: BirdSnapshot
    pipes: Tuple[PipeSnapshot, ...]
    width: float
    height: float
    ground_height: int

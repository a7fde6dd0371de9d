"""Floppy Bird: a side-scrolling flap-through-the-pipes game."""

from .clock import FrameClock
from .data_models import (
    Bird, EventKind, GameEvent, Phase, Pipe, Playfield, SessionResult, Snapshot
)
from .game import FloppyGame
from .physics_engine import WorldEngine
from .pipe_spawner import PipeSpawner
from .score_db import ScoreDatabase
from .scoreboard import Scoreboard
from .session import Session

__all__ = [
    "Bird", "EventKind", "FloppyGame", "FrameClock", "GameEvent", "Phase",
    "Pipe", "PipeSpawner", "Playfield", "ScoreDatabase", "Scoreboard",
    "Session", "SessionResult", "Snapshot", "WorldEngine",
]

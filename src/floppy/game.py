"""
game.py: Session lifecycle (idle -> running -> ended), pause, and the
input contract. Driven one tick at a time by an outer frame loop.
"""

from typing import Callable, List, Optional

from .clock import FrameClock
from .data_models import (
    BirdSnapshot, EventKind, GameEvent, Phase, PipeSnapshot, Playfield,
    SessionResult, Snapshot
)
from .logger import get_logger
from .physics_core import ground_height
from .physics_engine import WorldEngine
from .pipe_spawner import RandomSource
from .scoreboard import BestRecordStore, Scoreboard
from .session import Session

log = get_logger("game")

Listener = Callable[[GameEvent], None]


class FloppyGame:
    """
    Owns the single live Session. All mutation happens on the caller's
    thread through the public methods below; invalid-phase calls are no-ops.
    """

    def __init__(self, width: float, height: float,
                 store: Optional[BestRecordStore] = None,
                 rng: Optional[RandomSource] = None,
                 engine: Optional[WorldEngine] = None,
                 clock: Optional[FrameClock] = None):
        self.playfield = Playfield(width, height)
        self.rng = rng
        self.engine = engine or WorldEngine()
        self.clock = clock or FrameClock()
        self.scoreboard = Scoreboard(store)
        self.listeners: List[Listener] = []
        self.paused = False
        self.last_result: Optional[SessionResult] = None
        self.session = Session.fresh(self.playfield, rng)

    # ---- observers ----

    def subscribe(self, listener: Listener):
        self.listeners.append(listener)

    def _emit(self, event: GameEvent):
        for listener in self.listeners:
            listener(event)

    @property
    def phase(self) -> Phase:
        return self.session.phase

    def current_score(self) -> int:
        return self.session.score

    def best_record(self) -> int:
        return self.scoreboard.best_record()

    # ---- environment ----

    def resize(self, width: float, height: float):
        """New geometry takes effect on the next tick or spawn."""
        self.playfield = Playfield(width, height)

    # ---- inputs ----

    def start(self, now_ms: Optional[float] = None):
        """Idle -> Running. No-op in any other phase."""
        if self.session.phase is not Phase.IDLE:
            return
        self.session.phase = Phase.RUNNING
        if now_ms is not None:
            self.clock.mark(now_ms)
        log.info("Session started")

    def flap(self, now_ms: Optional[float] = None):
        """First flap also starts the run."""
        if self.session.phase is Phase.ENDED or not self.session.bird.alive:
            log.debug("Ignored flap in phase %s", self.session.phase.value)
            return
        self.start(now_ms)
        self.session.bird.flap()
        self._emit(GameEvent(EventKind.FLAPPED, score=self.session.score))

    def toggle_pause(self, now_ms: Optional[float] = None):
        self.paused = not self.paused
        if not self.paused and now_ms is not None:
            # Time spent paused never reaches the simulation
            self.clock.mark(now_ms)
        log.debug("Paused" if self.paused else "Resumed")

    def retry(self, now_ms: Optional[float] = None):
        """Ended -> Idle with a brand-new session."""
        if self.session.phase is not Phase.ENDED:
            return
        self.session = Session.fresh(self.playfield, self.rng)
        if now_ms is not None:
            self.clock.mark(now_ms)
        log.debug("Session reset")

    # ---- ticking ----

    def tick(self, now_ms: float) -> Snapshot:
        """Frame callback entry point: timestamp in, snapshot out."""
        if self.paused:
            self.clock.mark(now_ms)
            return self.snapshot()
        self.advance(self.clock.step(now_ms))
        return self.snapshot()

    def advance(self, dt: float):
        """Runs one simulation step of dt seconds."""
        if self.paused or self.session.phase is not Phase.RUNNING:
            return
        events = self.engine.step(self.session, dt, self.playfield)
        for event in events:
            self._emit(event)
            if event.kind is EventKind.DIED:
                self._end_session()

    def _end_session(self):
        if self.session.phase is not Phase.RUNNING:
            return
        self.session.phase = Phase.ENDED
        result = self.scoreboard.record(self.session.score)
        self.last_result = result
        log.info("Session ended with score %d (best %d)", result.score, result.best,
                 extra={"data": {"score": result.score, "best": result.best,
                                 "new_best": result.new_best}})
        self._emit(GameEvent(EventKind.ENDED, score=result.score, result=result))

    def snapshot(self) -> Snapshot:
        bird = self.session.bird
        return Snapshot(
            phase=self.session.phase,
            paused=self.paused,
            score=self.session.score,
            best=self.scoreboard.best_record(),
            bird=BirdSnapshot(bird.x, bird.y, bird.radius, bird.rot, bird.alive),
            pipes=tuple(PipeSnapshot(p.x, p.top, p.bottom, p.passed) for p in self.session.pipes),
            width=self.playfield.width,
            height=self.playfield.height,
            ground_height=ground_height(self.playfield.height),
        )

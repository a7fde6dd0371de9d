"""
physics_engine.py: Advances one running session by a single tick.
"""

from dataclasses import dataclass
from typing import List

from .constants import PIPE_SPEED_PPS, PIPE_WIDTH, PIPE_DESPAWN_X
from .data_models import EventKind, GameEvent, Playfield
from .logger import get_logger
from .physics_core import (
    apply_gravity_and_movement, smooth_rotation, hits_ground,
    clamp_to_ceiling, collide_pipe
)
from .session import Session

log = get_logger("physics_engine")


@dataclass
class WorldEngine:
    """
    Integrates the bird, moves and scores pipes, and detects death.
    Phase transitions are left to the caller; a DIED event in the
    returned list is the signal to end the session.
    """
    speed: float = PIPE_SPEED_PPS

    def step(self, session: Session, dt: float, playfield: Playfield) -> List[GameEvent]:
        bird = session.bird
        if dt <= 0 or not bird.alive:
            return []

        events: List[GameEvent] = []

        # 1. Gravity and movement
        bird.y, bird.vy = apply_gravity_and_movement(bird.y, bird.vy, dt)

        # 2. Cosmetic rotation
        bird.rot = smooth_rotation(bird.rot, bird.vy, dt)

        # 3. Spawn
        pipe = session.spawner.tick(dt, playfield)
        if pipe is not None:
            session.pipes.append(pipe)

        # 4. Move pipes
        dx = self.speed * dt
        for pipe in session.pipes:
            pipe.advance(dx)

        # 5. Score every pipe whose trailing edge is behind the bird, oldest first
        for pipe in session.pipes:
            if not pipe.passed and pipe.x + PIPE_WIDTH < bird.x:
                pipe.mark_passed()
                session.score += 1
                events.append(GameEvent(EventKind.SCORED, score=session.score))

        # Off-screen pipes are dropped only once they had their chance to score
        session.pipes = [p for p in session.pipes if p.x + PIPE_WIDTH >= PIPE_DESPAWN_X]

        # 6. Ground kills, ceiling only stops
        if hits_ground(bird, playfield.height):
            bird.kill()
        clamp_to_ceiling(bird)

        # 7. Pipes
        for pipe in session.pipes:
            if collide_pipe(bird, pipe):
                bird.kill()
                break

        # 8. Death
        if not bird.alive:
            log.debug("Bird died at y=%.1f with score %d", bird.y, session.score,
                      extra={"data": {"y": bird.y, "vy": bird.vy, "score": session.score}})
            events.append(GameEvent(EventKind.DIED, score=session.score))

        return events

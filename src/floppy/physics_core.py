"""
physics_core.py: The shared kinematic functions and collision logic.
"""

import math
from typing import Tuple

from .constants import (
    GRAVITY_ACCEL, MAX_ROT, MIN_ROT, ROT_VY_RANGE, ROT_SMOOTHING,
    PIPE_WIDTH, GROUND_MIN_HEIGHT, GROUND_HEIGHT_RATIO
)
from .data_models import Bird, Pipe


def apply_gravity_and_movement(y: float, vy: float, dt: float) -> Tuple[float, float]:
    """Semi-implicit Euler: velocity first, then position. No clamping."""
    vy += GRAVITY_ACCEL * dt
    y += vy * dt
    return y, vy


def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


def remap(v: float, a: float, b: float, lo: float, hi: float) -> float:
    return lo + (v - a) * (hi - lo) / (b - a)


def target_rotation(vy: float) -> float:
    """Nose up while rising, diving while falling."""
    low, high = ROT_VY_RANGE
    return clamp(remap(vy, low, high, MAX_ROT, MIN_ROT), MIN_ROT, MAX_ROT)


def smooth_rotation(rot: float, vy: float, dt: float) -> float:
    """Eases rot toward target_rotation(vy). Cosmetic only."""
    return rot + (target_rotation(vy) - rot) * min(1.0, dt * ROT_SMOOTHING)


def ground_height(height: float) -> int:
    """Height of the ground band for the current playfield height."""
    # Half-up rounding, not Python's banker's rounding
    return max(GROUND_MIN_HEIGHT, int(math.floor(height * GROUND_HEIGHT_RATIO + 0.5)))


def hits_ground(bird: Bird, height: float) -> bool:
    return bird.y + bird.radius > height - ground_height(height)


def clamp_to_ceiling(bird: Bird) -> bool:
    """Stops the bird at the ceiling. Returns True if it had to clamp."""
    if bird.y - bird.radius < 0:
        bird.y = bird.radius
        bird.vy = 0.0
        return True
    return False


def collide_pipe(bird: Bird, pipe: Pipe) -> bool:
    """
    Circle vs pipe pair, approximated: if the bird's horizontal extent
    overlaps the pipe, any part of it outside [top, bottom] is a hit.
    Corners are not treated specially.
    """
    in_x = bird.x + bird.radius > pipe.x and bird.x - bird.radius < pipe.x + PIPE_WIDTH
    if not in_x:
        return False
    if bird.y - bird.radius < pipe.top:
        return True
    if bird.y + bird.radius > pipe.bottom:
        return True
    return False

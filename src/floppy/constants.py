"""
constants.py: Centralized tuning for the game simulation.
"""

import math

# -------- Clock --------
MAX_FRAME_DT = 0.035            # Upper bound on a single simulation step (seconds)

# -------- Bird Config --------
BIRD_X = 120                    # Fixed bird X position
BIRD_RADIUS = 18                # For collision detection
MAX_ROT = math.pi / 6           # 30 deg nose up
MIN_ROT = -math.pi / 2.6        # Nose dive
ROT_VY_RANGE = (-400.0, 600.0)  # Velocity span mapped onto [MAX_ROT, MIN_ROT]
ROT_SMOOTHING = 8.0             # Easing rate toward the target angle (1/s)

# -------- Physics Config (Pixels / Second / Second) --------
GRAVITY_ACCEL = 1100.0          # Vertical acceleration (pixels/s^2)
FLAP_IMPULSE = -350.0           # Velocity set by a flap (pixels/s)

# -------- Pipe Config --------
PIPE_WIDTH = 60
PIPE_GAP = 140
PIPE_SPEED_PPS = 180.0          # Horizontal speed (pixels/second)
PIPE_SPAWN_INTERVAL_MS = 1400.0
PIPE_SPAWN_OFFSET_X = 20        # Pipes appear just past the right edge
PIPE_MIN_TOP = 48               # Margin from the ceiling
PIPE_GROUND_MARGIN = 120        # Keeps the gap clear of the ground band
PIPE_DESPAWN_X = -40            # Removed once the trailing edge passes this

# -------- Ground Config --------
GROUND_MIN_HEIGHT = 34
GROUND_HEIGHT_RATIO = 0.12

# -------- Persistence --------
DB_FILE = "floppy_scores.db"
BEST_RECORD_KEY = "floppy_best"

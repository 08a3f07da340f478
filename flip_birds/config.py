from __future__ import annotations

"""Game configuration constants for Flip-Birds.

Motion is expressed per nominal 60 Hz frame; one unit of delta is one frame.
"""

# Game configuration
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 480
FPS = 60
GROUND_HEIGHT = 60
PLAYABLE_HEIGHT = WINDOW_HEIGHT - GROUND_HEIGHT

# Clock
NOMINAL_FRAME_MS = 1000.0 / 60.0
MAX_DELTA = 3.0  # frames; guards against tab/window suspension

# Bird
BIRD_X = 200
BIRD_SIZE = 40
HIT_INSET = 5  # forgiving hitbox
BIRD_SPAWN_Y = PLAYABLE_HEIGHT / 2 - BIRD_SIZE / 2

# Physics
GRAVITY = 0.5  # px/frame^2
JUMP_VELOCITY = -9.0  # px/frame
DEATH_SPIN = 12.0  # deg/frame while falling after a crash

# Obstacles
PIPE_SPEED = 3.0  # px/frame at score 0
PIPE_SPEED_RAMP = 0.02  # px/frame added per point
EPOCH2_SPEED_BONUS = 0.3
PIPE_SPEED_MAX = 4.5
PIPE_WIDTH = 80
PIPE_SPACING = 320
SPAWN_X = WINDOW_WIDTH + PIPE_WIDTH
# Next pipe is due once the last one scrolls past this x
SPAWN_THRESHOLD_X = WINDOW_WIDTH - PIPE_SPACING
# x-distance between consecutive pipes (400)
PIPE_PITCH = SPAWN_X - SPAWN_THRESHOLD_X
PRUNE_MARGIN = 10
GAP_EPOCH1 = 200
GAP_EPOCH2 = 150
GAP_MARGIN = 50

# Match
TOTAL_PIPES = 50
EPOCH_CHANGE = 30

# Timed screens
COUNTDOWN_MS = 3000
MID_TEXT_MS = 3000
STORY_CHARS_PER_SECOND = 30.0

# Cinematics: clip id -> (fallback duration ms, volume)
CINEMATICS = {
    "intro": (6000, 0.8),
    "mid": (5000, 0.8),
    "win": (7000, 0.9),
}
ASSET_DIR = "assets"

# Mute button (circle in the top-left corner)
MUTE_BUTTON_CENTER = (30, 30)
MUTE_BUTTON_RADIUS = 20
MUTE_BUTTON_TOLERANCE = 6

# Debug autopilot
AUTOPILOT_GAIN = 0.15

# Decorations
CLOUD_COUNT = 7
STAR_COUNT = 60

# Palettes per epoch
THEMES = {
    1: {
        "sky_top": (120, 196, 236),
        "sky_bottom": (178, 228, 250),
        "pipe": (45, 138, 45),
        "pipe_border": (26, 94, 26),
        "ground": (139, 105, 20),
        "ground_top": (90, 138, 0),
        "hud": (255, 255, 255),
        "epoch_label": (255, 255, 255),
    },
    2: {
        "sky_top": (13, 0, 26),
        "sky_bottom": (40, 6, 58),
        "pipe": (204, 34, 34),
        "pipe_border": (136, 0, 0),
        "ground": (58, 0, 0),
        "ground_top": (102, 0, 0),
        "hud": (255, 255, 255),
        "epoch_label": (255, 136, 255),
    },
}

BIRD_COLOR = (255, 215, 0)
BIRD_RIM = (200, 120, 0)
BEAK_COLOR = (255, 140, 0)
EYE_COLOR = (255, 255, 255)
PUPIL_COLOR = (20, 20, 20)
GOLD = (255, 215, 0)
PINK = (255, 204, 255)

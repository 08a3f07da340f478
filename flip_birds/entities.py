"""Game entities.

Plain data records for the bird, the pipe obstacles and the decorative
clouds. All mutation happens in the physics step; renderers only read them.
"""

from __future__ import annotations

import random

from .config import (
    BIRD_SIZE,
    BIRD_SPAWN_Y,
    BIRD_X,
    JUMP_VELOCITY,
    PIPE_WIDTH,
    PLAYABLE_HEIGHT,
    PRUNE_MARGIN,
    WINDOW_WIDTH,
)


class Bird:
    def __init__(self, x: float = BIRD_X, y: float = BIRD_SPAWN_Y) -> None:
        self.x = float(x)
        self.y = float(y)
        self.vy = 0.0
        # Visual-only accumulators
        self.tilt = 0.0  # degrees, positive = nose down
        self.squash = 0.0  # 0..1, kicked on flap and decays

    def reset(self, x: float = BIRD_X, y: float = BIRD_SPAWN_Y) -> None:
        self.x = float(x)
        self.y = float(y)
        self.vy = 0.0
        self.tilt = 0.0
        self.squash = 0.0

    def flap(self) -> None:
        self.vy = JUMP_VELOCITY
        self.squash = 1.0

    @property
    def center_y(self) -> float:
        return self.y + BIRD_SIZE / 2


class Obstacle:
    """A pipe pair with a passable vertical gap."""

    def __init__(self, x: float, gap_y: float, gap_size: float, skin: int = 0) -> None:
        self.x = float(x)
        self.gap_y = float(gap_y)
        self.gap_size = float(gap_size)
        self.skin = skin
        self.passed = False

    @property
    def right(self) -> float:
        return self.x + PIPE_WIDTH

    @property
    def gap_bottom(self) -> float:
        return self.gap_y + self.gap_size

    @property
    def gap_center(self) -> float:
        return self.gap_y + self.gap_size / 2

    def offscreen(self) -> bool:
        return self.right <= -PRUNE_MARGIN

    def __repr__(self) -> str:
        return f"Obstacle(x={self.x:.1f}, gap_y={self.gap_y:.1f}, gap_size={self.gap_size:.0f}, skin={self.skin})"


class Cloud:
    """Slow drifting cloud puff; wraps back to the right edge."""

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng
        self.reset()
        self.x = rng.uniform(0, WINDOW_WIDTH)

    def reset(self) -> None:
        rng = self._rng
        self.x = WINDOW_WIDTH + rng.uniform(20.0, 200.0)
        self.y = rng.uniform(20.0, PLAYABLE_HEIGHT * 0.55)
        self.speed = rng.uniform(0.3, 0.9)
        self.scale = rng.uniform(0.6, 1.4)

    def update(self, dt: float) -> None:
        self.x -= self.speed * dt
        if self.x < -160 * self.scale:
            self.reset()

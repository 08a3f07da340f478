"""Bird integration, obstacle spawning, scrolling and pruning."""

from __future__ import annotations

import logging
import random

from .config import (
    DEATH_SPIN,
    EPOCH2_SPEED_BONUS,
    EPOCH_CHANGE,
    GAP_EPOCH1,
    GAP_EPOCH2,
    GAP_MARGIN,
    GRAVITY,
    MAX_DELTA,
    NOMINAL_FRAME_MS,
    PIPE_PITCH,
    PIPE_SPEED,
    PIPE_SPEED_MAX,
    PIPE_SPEED_RAMP,
    PLAYABLE_HEIGHT,
    BIRD_SIZE,
    SPAWN_THRESHOLD_X,
    SPAWN_X,
    TOTAL_PIPES,
)
from .entities import Bird, Obstacle
from .utils import approach, clamp

logger = logging.getLogger(__name__)


def clamp_delta(elapsed_ms: float) -> float:
    """Convert elapsed wall time into frame units, clamped to MAX_DELTA."""
    return clamp(elapsed_ms / NOMINAL_FRAME_MS, 0.0, MAX_DELTA)


def epoch_for(score: int) -> int:
    return 2 if score >= EPOCH_CHANGE else 1


def gap_size_for(epoch: int) -> int:
    return GAP_EPOCH1 if epoch == 1 else GAP_EPOCH2


def pipe_speed(score: int) -> float:
    """Scroll speed for the given score; ramps gently and is capped."""
    speed = PIPE_SPEED + score * PIPE_SPEED_RAMP
    if epoch_for(score) == 2:
        speed += EPOCH2_SPEED_BONUS
    return min(speed, PIPE_SPEED_MAX)


def step_bird(bird: Bird, dt: float) -> None:
    """Semi-implicit Euler step plus the cosmetic tilt/squash easing."""
    bird.vy += GRAVITY * dt
    bird.y += bird.vy * dt
    bird.tilt = approach(bird.tilt, clamp(bird.vy * 4.0, -25.0, 70.0), 6.0 * dt)
    bird.squash = max(0.0, bird.squash - 0.12 * dt)


def step_falling_bird(bird: Bird, dt: float) -> None:
    """Post-crash tumble: fall and spin until resting on the ground."""
    floor = PLAYABLE_HEIGHT - BIRD_SIZE
    if bird.y >= floor:
        bird.y = floor
        bird.vy = 0.0
        return
    bird.vy += GRAVITY * dt
    bird.y = min(floor, bird.y + bird.vy * dt)
    bird.tilt = min(bird.tilt + DEATH_SPIN * dt, 90.0 + 360.0)


class Spawner:
    """Places new obstacles at a fixed spacing with seedable gap placement."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def gap_bounds(self, gap_size: float) -> tuple[float, float]:
        """Lowest and highest legal gap_y for a gap of this size."""
        return GAP_MARGIN, PLAYABLE_HEIGHT - gap_size - GAP_MARGIN

    def maybe_spawn(self, obstacles: list[Obstacle], score: int, total_spawned: int) -> Obstacle | None:
        if total_spawned >= TOTAL_PIPES:
            return None
        if obstacles:
            last = obstacles[-1]
            if last.x > SPAWN_THRESHOLD_X:
                return None
            x = last.x + PIPE_PITCH
        else:
            x = SPAWN_X
        gap_size = gap_size_for(epoch_for(score))
        lo, hi = self.gap_bounds(gap_size)
        gap_y = self.rng.uniform(lo, hi)
        obs = Obstacle(x, gap_y, gap_size, skin=total_spawned)
        obstacles.append(obs)
        logger.debug(f"Spawned pipe #{total_spawned + 1}: {obs!r}")
        return obs


def move_obstacles(obstacles: list[Obstacle], speed: float, dt: float) -> None:
    for obs in obstacles:
        obs.x -= speed * dt


def prune_obstacles(obstacles: list[Obstacle]) -> list[Obstacle]:
    """Drop obstacles that scrolled past the left edge, keeping order."""
    return [o for o in obstacles if not o.offscreen()]

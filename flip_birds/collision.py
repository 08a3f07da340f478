"""Hitbox tests against the play band and pipes, and pass-through scoring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from .config import BIRD_SIZE, HIT_INSET, PLAYABLE_HEIGHT
from .entities import Bird, Obstacle
from .utils import spans_overlap


@dataclass(frozen=True)
class Box:
    left: float
    top: float
    right: float
    bottom: float


def bird_hitbox(bird: Bird, inset: float = HIT_INSET) -> Box:
    """The bird's square bounds shrunk by inset on every side."""
    return Box(
        bird.x + inset,
        bird.y + inset,
        bird.x + BIRD_SIZE - inset,
        bird.y + BIRD_SIZE - inset,
    )


def hits_bounds(box: Box) -> bool:
    """Touching the ground band or leaving through the top of the screen."""
    return box.bottom >= PLAYABLE_HEIGHT or box.top < 0


def hits_obstacle(box: Box, obs: Obstacle) -> bool:
    if not spans_overlap(box.left, box.right, obs.x, obs.right):
        return False
    return box.top < obs.gap_y or box.bottom > obs.gap_bottom


def check_collision(bird: Bird, obstacles: Iterable[Obstacle]) -> bool:
    box = bird_hitbox(bird)
    if hits_bounds(box):
        return True
    return any(hits_obstacle(box, obs) for obs in obstacles)


def collect_passes(bird: Bird, obstacles: Iterable[Obstacle]) -> Iterator[Obstacle]:
    """Yield each obstacle the first time its right edge clears the bird.

    The ``passed`` flag is set before yielding so a consumer that stops early
    never sees the same obstacle twice.
    """
    for obs in obstacles:
        if not obs.passed and obs.right < bird.x:
            obs.passed = True
            yield obs

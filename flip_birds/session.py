"""Session aggregate: every piece of mutable game state lives here."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from .autopilot import AUTOPILOT, MANUAL, VelocitySource
from .config import CLOUD_COUNT, COUNTDOWN_MS, MID_TEXT_MS
from .entities import Bird, Cloud, Obstacle
from .physics import Spawner, epoch_for
from .states import Mode
from .story import ENDING_TEXT, STORY_TEXT, visible_chars

logger = logging.getLogger(__name__)

TIMED_MODES = {
    Mode.COUNTDOWN: COUNTDOWN_MS,
    Mode.MID_CUTSCENE_TEXT: MID_TEXT_MS,
}


@dataclass(frozen=True)
class BirdPose:
    x: float
    y: float
    vy: float
    tilt: float
    squash: float


@dataclass(frozen=True)
class ObstacleView:
    x: float
    gap_y: float
    gap_size: float
    skin: int


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a session handed to the renderer each frame."""

    mode: Mode
    bird: BirdPose
    obstacles: Tuple[ObstacleView, ...]
    clouds: Tuple[Tuple[float, float, float], ...]
    score: int
    best_score: int
    epoch: int
    muted: bool
    autopilot: bool
    progress: float
    countdown_ms: float
    story_chars: int
    ending_chars: int


class GameSession:
    """Owns the bird, obstacles, scores and flags for one game process.

    ``best_score``, ``muted`` and ``show_intro`` survive :meth:`reset`;
    everything else belongs to a single attempt.
    """

    def __init__(self, seed: Optional[int] = None, muted: bool = False) -> None:
        self.spawner = Spawner(random.Random(seed))
        self.decor_rng = random.Random(None if seed is None else seed + 1)
        self.best_score = 0
        self.muted = muted
        self.show_intro = True
        self.clouds = [Cloud(self.decor_rng) for _ in range(CLOUD_COUNT)]
        self.bird = Bird()
        self.obstacles: list[Obstacle] = []
        self.reset()

    def reset(self) -> None:
        """Start a new attempt from the menu."""
        self.bird.reset()
        self.obstacles = []
        self.score = 0
        self.total_spawned = 0
        self.mid_cutscene_played = False
        self.autopilot = False
        self.mode = Mode.MENU
        self.mode_ms = 0.0
        self.last_time_ms: Optional[float] = None
        logger.info(f"Session reset (best {self.best_score}, muted {self.muted}, intro next {self.show_intro})")

    def enter(self, mode: Mode) -> None:
        self.mode = mode
        self.mode_ms = 0.0

    @property
    def epoch(self) -> int:
        return epoch_for(self.score)

    @property
    def velocity_source(self) -> VelocitySource:
        return AUTOPILOT if self.autopilot else MANUAL

    def add_point(self) -> None:
        self.score += 1
        if self.score > self.best_score:
            self.best_score = self.score

    def progress(self) -> float:
        """Completion ratio of the current timed mode, 0 outside timed modes."""
        duration = TIMED_MODES.get(self.mode)
        if not duration:
            return 0.0
        return min(self.mode_ms / duration, 1.0)

    def timer_expired(self) -> bool:
        duration = TIMED_MODES.get(self.mode)
        return duration is not None and self.mode_ms >= duration

    def snapshot(self) -> Snapshot:
        b = self.bird
        return Snapshot(
            mode=self.mode,
            bird=BirdPose(b.x, b.y, b.vy, b.tilt, b.squash),
            obstacles=tuple(ObstacleView(o.x, o.gap_y, o.gap_size, o.skin) for o in self.obstacles),
            clouds=tuple((c.x, c.y, c.scale) for c in self.clouds),
            score=self.score,
            best_score=self.best_score,
            epoch=self.epoch,
            muted=self.muted,
            autopilot=self.autopilot,
            progress=self.progress(),
            countdown_ms=max(0.0, COUNTDOWN_MS - self.mode_ms) if self.mode is Mode.COUNTDOWN else 0.0,
            story_chars=visible_chars(STORY_TEXT, self.mode_ms) if self.mode is Mode.STORY else 0,
            ending_chars=visible_chars(ENDING_TEXT, self.mode_ms) if self.mode is Mode.ENDING else 0,
        )

"""Velocity sources: manual flaps or the debug autopilot."""

from __future__ import annotations

from typing import Sequence

from .config import AUTOPILOT_GAIN, JUMP_VELOCITY, PLAYABLE_HEIGHT
from .entities import Bird, Obstacle
from .utils import clamp


class VelocitySource:
    """Decides how the bird's vertical velocity is driven while playing."""

    def on_flap(self, bird: Bird) -> bool:
        """Handle a flap input. Returns True if it changed the bird's motion."""
        return False

    def steer(self, bird: Bird, obstacles: Sequence[Obstacle]) -> None:
        """Adjust velocity once per tick before gravity is applied."""


class ManualVelocity(VelocitySource):
    def on_flap(self, bird: Bird) -> bool:
        bird.flap()
        return True


class Autopilot(VelocitySource):
    """Proportional controller steering toward the next gap's centre."""

    def __init__(self, gain: float = AUTOPILOT_GAIN) -> None:
        self.gain = gain

    @staticmethod
    def target_y(bird: Bird, obstacles: Sequence[Obstacle]) -> float:
        for obs in obstacles:
            if not obs.passed and obs.right >= bird.x:
                return obs.gap_center
        return PLAYABLE_HEIGHT / 2

    def steer(self, bird: Bird, obstacles: Sequence[Obstacle]) -> None:
        error = self.target_y(bird, obstacles) - bird.center_y
        bird.vy = clamp(self.gain * error, JUMP_VELOCITY, -JUMP_VELOCITY)


MANUAL = ManualVelocity()
AUTOPILOT = Autopilot()

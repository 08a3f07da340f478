"""Shared builders for driving a session through the engine."""

from __future__ import annotations

from flip_birds.config import BIRD_SPAWN_Y, BIRD_X, COUNTDOWN_MS, PIPE_WIDTH
from flip_birds.engine import tick
from flip_birds.entities import Obstacle
from flip_birds.session import GameSession
from flip_birds.states import EventType, Mode

FRAME = 16  # ms; integer clock keeps timer sums exact


def start_playing(seed: int = 7) -> tuple[GameSession, int]:
    """Session that skipped the intro and just entered PLAYING."""
    s = GameSession(seed=seed)
    s.show_intro = False
    tick(s, 0, [EventType.FLAP])
    assert s.mode is Mode.COUNTDOWN
    tick(s, COUNTDOWN_MS)
    assert s.mode is Mode.PLAYING
    # First frame of play places the opening pipe at the right edge
    now = COUNTDOWN_MS + FRAME
    tick(s, now)
    assert len(s.obstacles) == 1
    return s, now


def feed_pass(s: GameSession, now: int) -> tuple[int, list]:
    """Hold the bird steady and slide in a pipe that clears it this frame."""
    s.bird.y = BIRD_SPAWN_Y
    s.bird.vy = 0.0
    s.obstacles.insert(0, Obstacle(BIRD_X - PIPE_WIDTH, 100, 200))
    now += FRAME
    return now, tick(s, now)


class FakeSound:
    def __init__(self) -> None:
        self.plays = 0

    def play(self, loops: int = 0) -> "FakeChannel":
        self.plays += 1
        return FakeChannel()


class FakeChannel:
    def __init__(self) -> None:
        self.volume = 1.0
        self.stopped = False

    def set_volume(self, volume: float) -> None:
        self.volume = volume

    def stop(self) -> None:
        self.stopped = True

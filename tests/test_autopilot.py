import pytest

from flip_birds.autopilot import AUTOPILOT, MANUAL, Autopilot
from flip_birds.config import BIRD_SIZE, BIRD_X, JUMP_VELOCITY, PIPE_WIDTH, PLAYABLE_HEIGHT
from flip_birds.entities import Bird, Obstacle


def test_manual_flap_sets_jump_velocity() -> None:
    bird = Bird()
    assert MANUAL.on_flap(bird) is True
    assert bird.vy == JUMP_VELOCITY
    bird.vy = 2.0
    MANUAL.steer(bird, [])
    assert bird.vy == 2.0


def test_autopilot_ignores_manual_flaps() -> None:
    bird = Bird()
    bird.vy = 2.0
    assert AUTOPILOT.on_flap(bird) is False
    assert bird.vy == 2.0


def test_autopilot_targets_next_unpassed_gap() -> None:
    bird = Bird(BIRD_X, 100)
    behind = Obstacle(BIRD_X - PIPE_WIDTH - 50, 0, 100)
    cleared = Obstacle(BIRD_X + 10, 0, 100)
    cleared.passed = True
    nxt = Obstacle(BIRD_X + 200, 200, 150)
    assert Autopilot.target_y(bird, [behind, cleared, nxt]) == nxt.gap_center
    assert Autopilot.target_y(bird, []) == PLAYABLE_HEIGHT / 2


def test_autopilot_velocity_is_proportional_and_clamped() -> None:
    pilot = Autopilot(gain=0.1)
    obs = Obstacle(BIRD_X + 200, 200, 100)  # centre 250
    bird = Bird(BIRD_X, 250 - BIRD_SIZE / 2 - 20)  # 20 px above target
    pilot.steer(bird, [obs])
    assert bird.vy == pytest.approx(2.0)
    bird.y = 0
    pilot.steer(bird, [obs])
    assert bird.vy == -JUMP_VELOCITY
    bird.y = PLAYABLE_HEIGHT
    pilot.steer(bird, [obs])
    assert bird.vy == JUMP_VELOCITY

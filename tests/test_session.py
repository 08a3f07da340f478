from flip_birds.config import BIRD_SPAWN_Y, BIRD_X, CLOUD_COUNT, EPOCH_CHANGE
from flip_birds.engine import tick
from flip_birds.entities import Obstacle
from flip_birds.session import GameSession
from flip_birds.states import EventType, Mode, transition
from flip_birds.story import STORY_TEXT

from helpers import FRAME, start_playing


def test_reset_round_trip_keeps_cross_attempt_state() -> None:
    s, now = start_playing()
    for _ in range(30):
        now += FRAME
        tick(s, now, [EventType.FLAP] if s.bird.y > 200 else [])
    s.score = 12
    s.best_score = 17
    s.muted = True
    s.mid_cutscene_played = True
    s.autopilot = True
    s.total_spawned = 9
    s.obstacles.append(Obstacle(300, 100, 200))

    s.reset()

    assert s.mode is Mode.MENU
    assert (s.bird.x, s.bird.y, s.bird.vy) == (BIRD_X, BIRD_SPAWN_Y, 0.0)
    assert s.obstacles == []
    assert s.score == 0
    assert s.total_spawned == 0
    assert not s.mid_cutscene_played
    assert not s.autopilot
    assert s.best_score == 17
    assert s.muted
    assert not s.show_intro


def test_best_score_tracks_maximum() -> None:
    s = GameSession(seed=1)
    for _ in range(5):
        s.add_point()
    s.reset()
    s.add_point()
    assert s.score == 1
    assert s.best_score == 5


def test_same_seed_same_pipes() -> None:
    a, now_a = start_playing(seed=21)
    b, now_b = start_playing(seed=21)
    for i in range(1, 200):
        a.bird.y = b.bird.y = BIRD_SPAWN_Y
        a.bird.vy = b.bird.vy = 0.0
        tick(a, now_a + i * FRAME)
        tick(b, now_b + i * FRAME)
    assert [o.gap_y for o in a.obstacles] == [o.gap_y for o in b.obstacles]


def test_snapshot_reflects_state() -> None:
    s = GameSession(seed=3, muted=True)
    tick(s, 0, [EventType.FLAP])
    tick(s, 1000)
    snap = s.snapshot()
    assert snap.mode is Mode.STORY
    assert snap.muted
    assert snap.epoch == 1
    assert 0 < snap.story_chars < len(STORY_TEXT)
    assert len(snap.clouds) == CLOUD_COUNT

    s.enter(Mode.PLAYING)
    s.score = EPOCH_CHANGE
    s.obstacles = [Obstacle(500, 80, 150)]
    s.obstacles[0].skin = 7
    snap = s.snapshot()
    assert snap.epoch == 2
    assert snap.obstacles[0].skin == 7
    assert snap.progress == 0.0
    assert snap.story_chars == 0


def test_snapshot_is_detached_from_session() -> None:
    s = GameSession(seed=3)
    s.obstacles = [Obstacle(500, 80, 150)]
    snap = s.snapshot()
    s.obstacles[0].x = 0
    s.bird.y = 1
    assert snap.obstacles[0].x == 500
    assert snap.bird.y == BIRD_SPAWN_Y


def test_two_sessions_are_independent() -> None:
    a = GameSession(seed=1)
    b = GameSession(seed=1)
    transition(a, EventType.TOGGLE_MUTE)
    transition(a, EventType.FLAP)
    assert not b.muted
    assert b.mode is Mode.MENU

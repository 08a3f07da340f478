"""Per-frame tick: clock, queued events, physics, collision and timers."""

from __future__ import annotations

import logging
from typing import Iterable, List

from .collision import check_collision, collect_passes
from .config import EPOCH_CHANGE, TOTAL_PIPES
from .physics import (
    clamp_delta,
    move_obstacles,
    pipe_speed,
    prune_obstacles,
    step_bird,
    step_falling_bird,
)
from .session import GameSession
from .states import Effect, EventType, Mode, cue, transition

logger = logging.getLogger(__name__)


def tick(session: GameSession, now_ms: float, events: Iterable[EventType] = ()) -> List[Effect]:
    """Advance the session to ``now_ms`` and return the effects to perform.

    Events are consumed in order before any movement; an event that has no
    meaning in the current mode is dropped.
    """
    if session.last_time_ms is None:
        elapsed = 0.0
    else:
        elapsed = max(0.0, now_ms - session.last_time_ms)
    session.last_time_ms = now_ms
    dt = clamp_delta(elapsed)
    session.mode_ms += elapsed

    effects: List[Effect] = []
    for event in events:
        effects.extend(transition(session, event))

    for cloud in session.clouds:
        cloud.update(dt)

    if session.mode is Mode.PLAYING:
        effects.extend(step_playing(session, dt))
    elif session.mode is Mode.DEAD:
        step_falling_bird(session.bird, dt)

    if session.timer_expired():
        effects.extend(transition(session, EventType.TIMER_EXPIRED))
    return effects


def step_playing(session: GameSession, dt: float) -> List[Effect]:
    """One frame of active play. May leave PLAYING part-way through."""
    bird = session.bird
    session.velocity_source.steer(bird, session.obstacles)
    step_bird(bird, dt)

    spawned = session.spawner.maybe_spawn(session.obstacles, session.score, session.total_spawned)
    if spawned is not None:
        session.total_spawned += 1

    move_obstacles(session.obstacles, pipe_speed(session.score), dt)

    effects: List[Effect] = []
    for _ in collect_passes(bird, session.obstacles):
        session.add_point()
        effects.append(cue("pass"))
        if session.score == EPOCH_CHANGE and not session.mid_cutscene_played:
            effects.extend(transition(session, EventType.EPOCH_REACHED))
        elif session.score >= TOTAL_PIPES:
            effects.extend(transition(session, EventType.MATCH_COMPLETE))
        if session.mode is not Mode.PLAYING:
            return effects

    session.obstacles = prune_obstacles(session.obstacles)
    if check_collision(bird, session.obstacles):
        effects.extend(transition(session, EventType.COLLIDED))
    return effects

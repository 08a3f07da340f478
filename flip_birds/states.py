"""Screen state machine.

All mode changes go through :func:`transition`, a table keyed by
``(Mode, EventType)``. Handlers mutate the session and return a list of
:class:`Effect` requests (audio cues, music, cinematics) for the
presentation layer to carry out; the core never performs I/O itself.
Pairs missing from the table are ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Callable, Dict, List, Tuple

from .config import CINEMATICS
from .story import ENDING_TEXT, STORY_TEXT, fully_revealed

if TYPE_CHECKING:
    from .session import GameSession

logger = logging.getLogger(__name__)


class Mode(Enum):
    MENU = auto()
    STORY = auto()
    INTRO = auto()
    COUNTDOWN = auto()
    PLAYING = auto()
    MID_CUTSCENE = auto()
    MID_CUTSCENE_TEXT = auto()
    DEAD = auto()
    WIN_CINEMATIC = auto()
    ENDING = auto()
    WIN_SEEN = auto()


class EventType(Enum):
    # From the input source / cinematic player
    FLAP = auto()
    TOGGLE_MUTE = auto()
    TOGGLE_AUTOPILOT = auto()
    CINEMATIC_ENDED = auto()
    SKIP = auto()
    # Raised by the engine
    TIMER_EXPIRED = auto()
    COLLIDED = auto()
    EPOCH_REACHED = auto()
    MATCH_COMPLETE = auto()


class EffectKind(Enum):
    CUE = auto()
    MUSIC = auto()
    STOP_MUSIC = auto()
    CINEMATIC = auto()


@dataclass(frozen=True)
class Effect:
    kind: EffectKind
    name: str = ""
    volume: float = 1.0
    epoch: int = 1


def cue(name: str) -> Effect:
    return Effect(EffectKind.CUE, name=name)


def music(epoch: int) -> Effect:
    return Effect(EffectKind.MUSIC, name=f"epoch{epoch}", epoch=epoch)


def stop_music() -> Effect:
    return Effect(EffectKind.STOP_MUSIC)


def cinematic(clip_id: str) -> Effect:
    _, volume = CINEMATICS[clip_id]
    return Effect(EffectKind.CINEMATIC, name=clip_id, volume=volume)


Handler = Callable[["GameSession"], List[Effect]]


def _menu_flap(s: GameSession) -> List[Effect]:
    if s.show_intro:
        s.show_intro = False
        s.enter(Mode.STORY)
    else:
        s.enter(Mode.COUNTDOWN)
    return []


def _story_advance(s: GameSession) -> List[Effect]:
    if not fully_revealed(STORY_TEXT, s.mode_ms):
        return []
    s.enter(Mode.INTRO)
    return [cinematic("intro")]


def _intro_done(s: GameSession) -> List[Effect]:
    s.enter(Mode.COUNTDOWN)
    return []


def _start_playing(s: GameSession) -> List[Effect]:
    s.enter(Mode.PLAYING)
    return [music(s.epoch)]


def _playing_flap(s: GameSession) -> List[Effect]:
    if s.velocity_source.on_flap(s.bird):
        return [cue("jump")]
    return []


def _toggle_autopilot(s: GameSession) -> List[Effect]:
    s.autopilot = not s.autopilot
    logger.info(f"Autopilot {'on' if s.autopilot else 'off'}")
    return []


def _collided(s: GameSession) -> List[Effect]:
    s.enter(Mode.DEAD)
    logger.info(f"Crashed with score {s.score} (best {s.best_score})")
    return [stop_music(), cue("death")]


def _epoch_reached(s: GameSession) -> List[Effect]:
    if s.mid_cutscene_played:
        return []
    s.mid_cutscene_played = True
    s.enter(Mode.MID_CUTSCENE)
    return [stop_music(), cue("epoch-change"), cinematic("mid")]


def _match_complete(s: GameSession) -> List[Effect]:
    s.enter(Mode.WIN_CINEMATIC)
    logger.info(f"Match complete with score {s.score}")
    return [stop_music(), cue("win"), cinematic("win")]


def _mid_done(s: GameSession) -> List[Effect]:
    s.enter(Mode.MID_CUTSCENE_TEXT)
    return []


def _retry(s: GameSession) -> List[Effect]:
    s.reset()
    return []


def _win_cinematic_done(s: GameSession) -> List[Effect]:
    s.enter(Mode.ENDING)
    return []


def _ending_flap(s: GameSession) -> List[Effect]:
    if not fully_revealed(ENDING_TEXT, s.mode_ms):
        return []
    s.enter(Mode.WIN_SEEN)
    return []


def _win_acknowledged(s: GameSession) -> List[Effect]:
    s.reset()
    s.show_intro = True
    return []


TRANSITIONS: Dict[Tuple[Mode, EventType], Handler] = {
    (Mode.MENU, EventType.FLAP): _menu_flap,
    (Mode.STORY, EventType.FLAP): _story_advance,
    (Mode.STORY, EventType.SKIP): _story_advance,
    (Mode.INTRO, EventType.CINEMATIC_ENDED): _intro_done,
    (Mode.INTRO, EventType.SKIP): _intro_done,
    (Mode.COUNTDOWN, EventType.TIMER_EXPIRED): _start_playing,
    (Mode.PLAYING, EventType.FLAP): _playing_flap,
    (Mode.PLAYING, EventType.TOGGLE_AUTOPILOT): _toggle_autopilot,
    (Mode.PLAYING, EventType.COLLIDED): _collided,
    (Mode.PLAYING, EventType.EPOCH_REACHED): _epoch_reached,
    (Mode.PLAYING, EventType.MATCH_COMPLETE): _match_complete,
    (Mode.MID_CUTSCENE, EventType.CINEMATIC_ENDED): _mid_done,
    (Mode.MID_CUTSCENE, EventType.SKIP): _mid_done,
    (Mode.MID_CUTSCENE_TEXT, EventType.TIMER_EXPIRED): _start_playing,
    (Mode.DEAD, EventType.FLAP): _retry,
    (Mode.WIN_CINEMATIC, EventType.CINEMATIC_ENDED): _win_cinematic_done,
    (Mode.WIN_CINEMATIC, EventType.SKIP): _win_cinematic_done,
    (Mode.ENDING, EventType.FLAP): _ending_flap,
    (Mode.WIN_SEEN, EventType.FLAP): _win_acknowledged,
}


def transition(session: GameSession, event: EventType) -> List[Effect]:
    """Apply one event to the session and return the requested side effects."""
    if event is EventType.TOGGLE_MUTE:
        session.muted = not session.muted
        logger.debug(f"Muted: {session.muted}")
        return []
    handler = TRANSITIONS.get((session.mode, event))
    if handler is None:
        return []
    before = session.mode
    effects = handler(session)
    if session.mode is not before:
        logger.debug(f"{before.name} --{event.name}--> {session.mode.name}")
    return effects

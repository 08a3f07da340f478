import os

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from flip_birds.audio import MUSIC_VOLUME
from flip_birds.config import MUTE_BUTTON_CENTER, MUTE_BUTTON_RADIUS, WINDOW_HEIGHT, WINDOW_WIDTH
from flip_birds.game import Game, main
from flip_birds.states import EventType, Mode, cinematic, cue, music, stop_music

from helpers import FakeChannel, FakeSound


@pytest.fixture
def game():
    g = Game(seed=123, muted=True)
    yield g
    pygame.quit()


def key(k: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def click(x: int, y: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(x, y), button=1)


def test_game_init(game: Game) -> None:
    assert game.session.mode is Mode.MENU
    assert game.session.muted
    assert game.mixer.muted
    assert game.screen.get_size() == (WINDOW_WIDTH, WINDOW_HEIGHT)


def test_key_mapping(game: Game) -> None:
    game.handle_input(key(pygame.K_SPACE))
    game.handle_input(key(pygame.K_m))
    game.handle_input(key(pygame.K_F1))
    assert game.pending == [EventType.FLAP, EventType.TOGGLE_MUTE, EventType.TOGGLE_AUTOPILOT]
    game.handle_input(key(pygame.K_q))
    assert not game.running


def test_click_on_mute_button_does_not_flap(game: Game) -> None:
    cx, cy = MUTE_BUTTON_CENTER
    game.handle_input(click(cx + MUTE_BUTTON_RADIUS + 2, cy))
    assert game.pending == [EventType.TOGGLE_MUTE]
    game.pending.clear()
    game.handle_input(click(WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2))
    assert game.pending == [EventType.FLAP]


def test_step_applies_input_and_mute(game: Game) -> None:
    game.handle_input(key(pygame.K_SPACE))
    game.step(0, 0)
    assert game.session.mode is Mode.STORY
    assert game.pending == []
    game.handle_input(key(pygame.K_m))
    game.step(16, 16)
    assert not game.session.muted
    assert not game.mixer.muted
    assert not game.cinematics.muted


def test_skip_key_ends_cinematic(game: Game) -> None:
    game.session.enter(Mode.INTRO)
    game.dispatch([cinematic("intro")])
    assert game.cinematics.playing
    game.handle_input(key(pygame.K_ESCAPE))
    assert not game.cinematics.playing
    game.step(0, 0)
    assert game.session.mode is Mode.COUNTDOWN


def test_cinematic_end_advances_state(game: Game) -> None:
    game.session.enter(Mode.MID_CUTSCENE)
    game.dispatch([cinematic("mid")])
    game.step(0, 0)
    assert game.session.mode is Mode.MID_CUTSCENE
    game.step(60_000, 60_000)
    assert game.session.mode is Mode.MID_CUTSCENE_TEXT


def test_dispatch_routes_audio_and_respects_mute(game: Game) -> None:
    jump = FakeSound()
    game.mixer.available = True
    game.mixer._sounds["jump"] = jump
    game.mixer._tracks[1] = FakeSound()
    game.dispatch([cue("jump"), music(1), cue("no-such-cue")])
    assert jump.plays == 0
    assert game.mixer._music_channel.volume == 0.0
    game.handle_input(key(pygame.K_m))
    game.step(0, 0)
    assert game.mixer._music_channel.volume == MUSIC_VOLUME
    game.dispatch([cue("jump")])
    assert jump.plays == 1
    game.dispatch([stop_music()])
    assert game.mixer._music_channel is None


def test_mute_toggle_reaches_cinematic_soundtrack(game: Game) -> None:
    game.dispatch([cinematic("intro")])
    channel = FakeChannel()
    game.cinematics._channel = channel
    game.cinematics._volume = 0.8
    game.handle_input(key(pygame.K_m))
    game.step(0, 0)
    assert channel.volume == 0.8
    game.handle_input(key(pygame.K_m))
    game.step(16, 16)
    assert channel.volume == 0.0


def test_draw_every_mode(game: Game) -> None:
    for mode in Mode:
        game.session.enter(mode)
        game.draw()
    game.dispatch([cinematic("win")])
    game.draw()


def test_main_rejects_unknown_arguments() -> None:
    with pytest.raises(SystemExit):
        main(["--no-such-flag"])

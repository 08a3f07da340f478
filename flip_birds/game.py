"""Window, input mapping, effect dispatch and the main loop for Flip-Birds."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import pygame

from .audio import AudioMixer
from .cinematics import CinematicPlayer
from .config import (
    FPS,
    MUTE_BUTTON_CENTER,
    MUTE_BUTTON_RADIUS,
    MUTE_BUTTON_TOLERANCE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from .engine import tick
from .render import Renderer
from .session import GameSession
from .states import Effect, EffectKind, EventType, Mode
from .utils import point_in_circle

logger = logging.getLogger(__name__)

FLAP_KEYS = (pygame.K_SPACE, pygame.K_UP, pygame.K_w)
SKIP_KEYS = (pygame.K_ESCAPE, pygame.K_s)
CINEMATIC_MODES = (Mode.INTRO, Mode.MID_CUTSCENE, Mode.WIN_CINEMATIC)


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


class Game:
    """Top-level controller: owns the window and wires the core to pygame."""

    def __init__(self, seed: Optional[int] = None, muted: bool = False) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.DOUBLEBUF)
        pygame.display.set_caption("Flip-Birds")
        self.clock = pygame.time.Clock()
        self.session = GameSession(seed=seed, muted=muted)
        self.renderer = Renderer(self.screen)
        self.mixer = AudioMixer(muted=muted)
        self.mixer.init()
        self.cinematics = CinematicPlayer(muted=muted)
        self.pending: List[EventType] = []
        self.running = True

    def handle_input(self, event: pygame.event.Event) -> None:
        """Translate a pygame event into zero or more core events."""
        if event.type == pygame.KEYDOWN:
            if event.key in FLAP_KEYS:
                self.pending.append(EventType.FLAP)
            elif event.key == pygame.K_m:
                self.pending.append(EventType.TOGGLE_MUTE)
            elif event.key == pygame.K_F1:
                self.pending.append(EventType.TOGGLE_AUTOPILOT)
            elif event.key in SKIP_KEYS:
                self.request_skip()
            elif event.key == pygame.K_q:
                self.running = False
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            cx, cy = MUTE_BUTTON_CENTER
            if point_in_circle(event.pos[0], event.pos[1], cx, cy, MUTE_BUTTON_RADIUS + MUTE_BUTTON_TOLERANCE):
                self.pending.append(EventType.TOGGLE_MUTE)
            elif self.session.mode in CINEMATIC_MODES:
                self.request_skip()
            else:
                self.pending.append(EventType.FLAP)

    def request_skip(self) -> None:
        if self.cinematics.playing:
            self.cinematics.skip()
        elif self.session.mode is Mode.STORY:
            self.pending.append(EventType.SKIP)

    def dispatch(self, effects: List[Effect]) -> None:
        for effect in effects:
            if effect.kind is EffectKind.CUE:
                self.mixer.play_cue(effect.name)
            elif effect.kind is EffectKind.MUSIC:
                self.mixer.play_music(effect.epoch)
            elif effect.kind is EffectKind.STOP_MUSIC:
                self.mixer.stop_music()
            elif effect.kind is EffectKind.CINEMATIC:
                self.cinematics.play(effect.name, effect.volume)

    def step(self, now_ms: float, elapsed_ms: float) -> None:
        """Run one frame of the core against the queued input."""
        events = self.pending + self.cinematics.update(elapsed_ms)
        self.pending = []
        effects = tick(self.session, now_ms, events)
        # Mute may have toggled during the tick
        self.mixer.set_muted(self.session.muted)
        self.cinematics.set_muted(self.session.muted)
        self.dispatch(effects)

    def draw(self) -> None:
        if self.cinematics.playing:
            self.cinematics.draw(self.screen, self.renderer.font_big, self.renderer.font_small)
        else:
            self.renderer.draw(self.session.snapshot())
        pygame.display.flip()

    def run(self) -> None:
        while self.running:
            elapsed_ms = self.clock.tick(FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                self.handle_input(event)
            self.step(pygame.time.get_ticks(), elapsed_ms)
            self.draw()
        self.mixer.stop_music()
        pygame.quit()


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="flip-birds", description="A narrative flappy-bird game.")
    parser.add_argument("--seed", type=int, default=None, help="seed for pipe placement")
    parser.add_argument("--muted", action="store_true", help="start with sound muted")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    args = parser.parse_args(argv)
    setup_logging(args.debug)
    logger.info(f"Starting Flip-Birds (seed={args.seed})")
    Game(seed=args.seed, muted=args.muted).run()
    sys.exit(0)

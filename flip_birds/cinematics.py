"""Cinematic playback for the intro, mid-match and win scenes.

A clip is an optional still image (``assets/<clip>.png``) with an optional
soundtrack (``assets/<clip>.ogg``) shown for a fixed duration. Missing or
broken assets fall back to a text card; playback timing is unaffected.
"""

from __future__ import annotations

import logging
import os
from typing import List, Optional

import pygame

from .config import ASSET_DIR, CINEMATICS, GOLD, PINK, WINDOW_HEIGHT, WINDOW_WIDTH
from .states import EventType

logger = logging.getLogger(__name__)

CAPTIONS = {
    "intro": ("The boy spreads his wings...", "and leaves the valley behind."),
    "mid": ("A girl flies past in the sunset.", "Then she is gone."),
    "win": ("Beyond the last pipe", "a song drifts over the hills."),
}


class CinematicPlayer:
    """Plays one clip at a time and reports exactly one end event per play."""

    def __init__(self, asset_dir: str = ASSET_DIR, muted: bool = False) -> None:
        self.asset_dir = asset_dir
        self.muted = muted
        self.clip_id: Optional[str] = None
        self.elapsed_ms = 0.0
        self.duration_ms = 0.0
        self._image: Optional[pygame.Surface] = None
        self._channel: Optional[pygame.mixer.Channel] = None
        self._volume = 1.0
        self._pending: List[EventType] = []

    @property
    def playing(self) -> bool:
        return self.clip_id is not None

    def play(self, clip_id: str, volume: float = 1.0) -> None:
        if self.playing:
            # The clip being replaced still reports exactly one end event
            self._finish(EventType.SKIP)
        duration, _ = CINEMATICS.get(clip_id, (3000, 1.0))
        self.clip_id = clip_id
        self.elapsed_ms = 0.0
        self.duration_ms = float(duration)
        self._image = self._load_image(clip_id)
        self._volume = volume
        self._channel = self._play_soundtrack(clip_id, volume)
        logger.debug(f"Cinematic '{clip_id}' started ({duration} ms)")

    def _load_image(self, clip_id: str) -> Optional[pygame.Surface]:
        path = os.path.join(self.asset_dir, f"{clip_id}.png")
        if not os.path.exists(path):
            return None
        try:
            image = pygame.image.load(path)
            return pygame.transform.smoothscale(image.convert(), (WINDOW_WIDTH, WINDOW_HEIGHT))
        except (pygame.error, OSError) as e:
            logger.warning(f"Cinematic image {path} unusable, using text card: {e}")
            return None

    def _play_soundtrack(self, clip_id: str, volume: float) -> Optional[pygame.mixer.Channel]:
        path = os.path.join(self.asset_dir, f"{clip_id}.ogg")
        if not os.path.exists(path) or not pygame.mixer.get_init():
            return None
        try:
            channel = pygame.mixer.Sound(path).play()
        except (pygame.error, OSError) as e:
            logger.warning(f"Cinematic soundtrack {path} unusable, skipping: {e}")
            return None
        if channel is not None:
            channel.set_volume(0.0 if self.muted else volume)
        return channel

    def set_muted(self, muted: bool) -> None:
        self.muted = muted
        if self._channel is not None:
            self._channel.set_volume(0.0 if muted else self._volume)

    def skip(self) -> None:
        if self.playing:
            self._finish(EventType.SKIP)

    def update(self, elapsed_ms: float) -> List[EventType]:
        """Advance playback; returns end events that occurred since last call."""
        if self.playing:
            self.elapsed_ms += elapsed_ms
            if self.elapsed_ms >= self.duration_ms:
                self._finish(EventType.CINEMATIC_ENDED)
        events, self._pending = self._pending, []
        return events

    def _finish(self, event: EventType) -> None:
        if self._channel is not None:
            self._channel.stop()
        logger.debug(f"Cinematic '{self.clip_id}' finished: {event.name}")
        self.clip_id = None
        self._image = None
        self._channel = None
        self._pending.append(event)

    def draw(self, surf: pygame.Surface, font_big: pygame.font.Font, font_small: pygame.font.Font) -> None:
        if not self.playing:
            return
        if self._image is not None:
            surf.blit(self._image, (0, 0))
        else:
            surf.fill((8, 4, 16))
            top, bottom = CAPTIONS.get(self.clip_id, ("", ""))
            # Fade captions in over the first second
            alpha = int(min(1.0, self.elapsed_ms / 1000.0) * 255)
            for text, color, dy, font in ((top, GOLD, -30, font_big), (bottom, PINK, 30, font_small)):
                label = font.render(text, True, color)
                label.set_alpha(alpha)
                surf.blit(label, label.get_rect(center=(WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2 + dy)))
        hint = font_small.render("Esc / S to skip", True, (170, 170, 180))
        surf.blit(hint, hint.get_rect(bottomright=(WINDOW_WIDTH - 16, WINDOW_HEIGHT - 12)))
        ratio = min(1.0, self.elapsed_ms / max(1.0, self.duration_ms))
        pygame.draw.rect(surf, (60, 60, 70), (0, WINDOW_HEIGHT - 4, WINDOW_WIDTH, 4))
        pygame.draw.rect(surf, PINK, (0, WINDOW_HEIGHT - 4, int(WINDOW_WIDTH * ratio), 4))

"""Drawing of a session snapshot. Reads state, never mutates it."""

from __future__ import annotations

import math

import pygame

from .config import (
    BEAK_COLOR,
    BIRD_COLOR,
    BIRD_RIM,
    BIRD_SIZE,
    EYE_COLOR,
    GOLD,
    MUTE_BUTTON_CENTER,
    MUTE_BUTTON_RADIUS,
    PINK,
    PIPE_WIDTH,
    PLAYABLE_HEIGHT,
    PUPIL_COLOR,
    STAR_COUNT,
    THEMES,
    TOTAL_PIPES,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from .session import Snapshot
from .states import Mode
from .story import (
    ENDING_TEXT,
    MID_HINT,
    MID_TEXT,
    MID_TITLE,
    STORY_TEXT,
    SUBTITLE,
    TITLE,
    WIN_SEEN_TEXT,
    WIN_SEEN_TITLE,
)
from .utils import scale_color, vertical_gradient

# Per-skin brightness tweak so neighbouring pipes read apart
SKIN_TINTS = (1.0, 0.9, 1.1, 0.95)


class Renderer:
    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.font_huge = pygame.font.SysFont(None, 96)
        self.font_big = pygame.font.SysFont(None, 64)
        self.font_mid = pygame.font.SysFont(None, 40)
        self.font_small = pygame.font.SysFont(None, 28)
        self.skies = {epoch: self._make_sky(theme) for epoch, theme in THEMES.items()}
        self.shade = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.SRCALPHA)
        self.shade.fill((0, 0, 0, 160))

    def _make_sky(self, theme: dict) -> pygame.Surface:
        """Precompute the sky gradient as a surface for fast blitting."""
        pixels = vertical_gradient(WINDOW_WIDTH, WINDOW_HEIGHT, theme["sky_top"], theme["sky_bottom"])
        return pygame.surfarray.make_surface(pixels)

    def draw(self, snap: Snapshot) -> None:
        theme = THEMES[snap.epoch]
        surf = self.screen
        surf.blit(self.skies[snap.epoch], (0, 0))
        if snap.epoch == 2:
            self._draw_stars(surf)
        else:
            self._draw_clouds(surf, snap)
        self._draw_pipes(surf, snap, theme)
        self._draw_ground(surf, theme)
        if snap.mode not in (Mode.MENU, Mode.STORY, Mode.ENDING, Mode.WIN_SEEN):
            self._draw_bird(surf, snap)
        if snap.mode in (Mode.PLAYING, Mode.COUNTDOWN, Mode.MID_CUTSCENE_TEXT):
            self._draw_hud(surf, snap, theme)

        overlay = getattr(self, f"_draw_{snap.mode.name.lower()}", None)
        if overlay is not None:
            overlay(surf, snap)
        self._draw_mute_button(surf, snap.muted)

    def _draw_stars(self, surf: pygame.Surface) -> None:
        for i in range(STAR_COUNT):
            sx = (i * 137 + 23) % WINDOW_WIDTH
            sy = (i * 89 + 17) % (PLAYABLE_HEIGHT - 20)
            size = 2 if i % 3 == 0 else 1
            pygame.draw.circle(surf, (255, 255, 255), (sx, sy), size)

    def _draw_clouds(self, surf: pygame.Surface, snap: Snapshot) -> None:
        for x, y, scale in snap.clouds:
            r = int(18 * scale)
            for ox, oy, k in ((0, 0, 1.0), (r, -r // 2, 1.2), (2 * r, 0, 1.0), (r, r // 3, 1.1)):
                pygame.draw.circle(surf, (250, 250, 255), (int(x + ox), int(y + oy)), int(r * k))

    def _draw_pipes(self, surf: pygame.Surface, snap: Snapshot, theme: dict) -> None:
        cap_w, cap_h = PIPE_WIDTH + 10, 14
        for obs in snap.obstacles:
            tint = SKIN_TINTS[obs.skin % len(SKIN_TINTS)]
            body = scale_color(theme["pipe"], tint)
            border = theme["pipe_border"]
            x = int(obs.x)
            top_h = int(obs.gap_y)
            bottom_y = int(obs.gap_y + obs.gap_size)
            bottom_h = PLAYABLE_HEIGHT - bottom_y
            for rect in (pygame.Rect(x, 0, PIPE_WIDTH, top_h), pygame.Rect(x, bottom_y, PIPE_WIDTH, bottom_h)):
                pygame.draw.rect(surf, body, rect)
                pygame.draw.rect(surf, border, rect, 3)
            for cap in (
                pygame.Rect(x - 5, top_h - cap_h, cap_w, cap_h),
                pygame.Rect(x - 5, bottom_y, cap_w, cap_h),
            ):
                pygame.draw.rect(surf, body, cap)
                pygame.draw.rect(surf, border, cap, 3)

    def _draw_ground(self, surf: pygame.Surface, theme: dict) -> None:
        pygame.draw.rect(surf, theme["ground"], (0, PLAYABLE_HEIGHT, WINDOW_WIDTH, WINDOW_HEIGHT - PLAYABLE_HEIGHT))
        pygame.draw.rect(surf, theme["ground_top"], (0, PLAYABLE_HEIGHT, WINDOW_WIDTH, 8))

    def _draw_bird(self, surf: pygame.Surface, snap: Snapshot) -> None:
        pose = snap.bird
        size = BIRD_SIZE
        # Squash: wider and flatter right after a flap
        w = int(size * (1.0 + 0.18 * pose.squash))
        h = int(size * (1.0 - 0.18 * pose.squash))
        sprite = pygame.Surface((size * 2, size * 2), pygame.SRCALPHA)
        cx, cy = size, size
        body = pygame.Rect(0, 0, w, h)
        body.center = (cx, cy)
        pygame.draw.ellipse(sprite, BIRD_COLOR, body)
        pygame.draw.ellipse(sprite, BIRD_RIM, body, 2)
        # Wing flicks up with the squash kick
        wing_lift = int(8 * pose.squash)
        pygame.draw.ellipse(sprite, scale_color(BIRD_COLOR, 0.85), (cx - 16, cy - 2 - wing_lift, 18, 12))
        pygame.draw.circle(sprite, EYE_COLOR, (cx + 9, cy - 7), 6)
        pygame.draw.circle(sprite, PUPIL_COLOR, (cx + 11, cy - 7), 3)
        pygame.draw.polygon(sprite, BEAK_COLOR, [(cx + 16, cy - 2), (cx + 28, cy + 2), (cx + 16, cy + 6)])
        rotated = pygame.transform.rotate(sprite, -pose.tilt)
        rect = rotated.get_rect(center=(int(pose.x + size / 2), int(pose.y + size / 2)))
        surf.blit(rotated, rect.topleft)

    def _draw_hud(self, surf: pygame.Surface, snap: Snapshot, theme: dict) -> None:
        score = self.font_big.render(f"{snap.score} / {TOTAL_PIPES}", True, theme["hud"])
        surf.blit(score, score.get_rect(midtop=(WINDOW_WIDTH // 2, 14)))
        best = self.font_small.render(f"Best: {snap.best_score}", True, theme["hud"])
        surf.blit(best, best.get_rect(topright=(WINDOW_WIDTH - 16, 16)))
        epoch = self.font_small.render(f"Epoch {snap.epoch}", True, theme["epoch_label"])
        surf.blit(epoch, epoch.get_rect(topright=(WINDOW_WIDTH - 16, 42)))
        if snap.autopilot:
            badge = self.font_small.render("AUTOPILOT", True, (120, 255, 160))
            surf.blit(badge, badge.get_rect(topleft=(64, 20)))

    def _draw_mute_button(self, surf: pygame.Surface, muted: bool) -> None:
        cx, cy = MUTE_BUTTON_CENTER
        r = MUTE_BUTTON_RADIUS
        s = r * 0.48
        disc = pygame.Surface((r * 2, r * 2), pygame.SRCALPHA)
        pygame.draw.circle(disc, (0, 0, 0, 110), (r, r), r)
        surf.blit(disc, (cx - r, cy - r))
        color = (255, 153, 153) if muted else (255, 255, 255)
        speaker = [
            (cx - s, cy - s * 0.38),
            (cx - s * 0.28, cy - s * 0.38),
            (cx + s * 0.28, cy - s),
            (cx + s * 0.28, cy + s),
            (cx - s * 0.28, cy + s * 0.38),
            (cx - s, cy + s * 0.38),
        ]
        pygame.draw.polygon(surf, color, speaker)
        if muted:
            pygame.draw.line(surf, (255, 68, 68), (cx + s * 0.5, cy - s * 0.9), (cx + s * 1.3, cy + s * 0.5), 2)
            pygame.draw.line(surf, (255, 68, 68), (cx + s * 1.3, cy - s * 0.9), (cx + s * 0.5, cy + s * 0.5), 2)
        else:
            for radius in (s * 0.6, s * 1.1):
                box = pygame.Rect(0, 0, int(radius * 2), int(radius * 2))
                box.center = (int(cx + s * 0.28), int(cy))
                pygame.draw.arc(surf, (255, 255, 255), box, -math.pi / 3, math.pi / 3, 1)

    # Mode overlays

    def _center_text(self, surf: pygame.Surface, text: str, font: pygame.font.Font, color, dy: int) -> None:
        label = font.render(text, True, color)
        surf.blit(label, label.get_rect(center=(WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2 + dy)))

    def _typewriter(self, surf: pygame.Surface, text: str, chars: int) -> None:
        lines = text[:chars].split("\n")
        top = WINDOW_HEIGHT // 2 - len(text.split("\n")) * 18
        for i, line in enumerate(lines):
            label = self.font_small.render(line, True, (235, 235, 240))
            surf.blit(label, label.get_rect(midtop=(WINDOW_WIDTH // 2, top + i * 36)))

    def _progress_bar(self, surf: pygame.Surface, ratio: float, color, dy: int) -> None:
        bw, bx, by = 260, WINDOW_WIDTH // 2 - 130, WINDOW_HEIGHT // 2 + dy
        pygame.draw.rect(surf, (70, 70, 80), (bx, by, bw, 6))
        pygame.draw.rect(surf, color, (bx, by, int(bw * ratio), 6))

    def _draw_menu(self, surf: pygame.Surface, snap: Snapshot) -> None:
        surf.blit(self.shade, (0, 0))
        self._center_text(surf, TITLE, self.font_huge, GOLD, -80)
        self._center_text(surf, SUBTITLE, self.font_small, (255, 204, 170), -30)
        self._center_text(surf, "Press Space, click or tap to start", self.font_mid, (255, 255, 255), 30)
        self._center_text(surf, "Space / Click - flap   M - mute", self.font_small, (170, 170, 170), 68)
        if snap.best_score > 0:
            self._center_text(surf, f"Session best: {snap.best_score}", self.font_small, GOLD, 110)

    def _draw_story(self, surf: pygame.Surface, snap: Snapshot) -> None:
        surf.fill((8, 4, 16))
        self._typewriter(surf, STORY_TEXT, snap.story_chars)
        if snap.story_chars >= len(STORY_TEXT):
            self._center_text(surf, "Space to continue", self.font_small, (170, 170, 180), 150)

    def _draw_countdown(self, surf: pygame.Surface, snap: Snapshot) -> None:
        seconds = max(1, math.ceil(snap.countdown_ms / 1000.0))
        self._center_text(surf, str(seconds), self.font_huge, GOLD, -20)
        self._center_text(surf, "Get ready!", self.font_mid, (255, 255, 255), 40)

    def _draw_mid_cutscene_text(self, surf: pygame.Surface, snap: Snapshot) -> None:
        surf.blit(self.shade, (0, 0))
        self._center_text(surf, MID_TITLE, self.font_big, PINK, -44)
        self._center_text(surf, MID_TEXT, self.font_mid, (221, 221, 221), 4)
        self._center_text(surf, MID_HINT, self.font_small, (153, 153, 153), 38)
        self._progress_bar(surf, snap.progress, PINK, 75)

    def _draw_dead(self, surf: pygame.Surface, snap: Snapshot) -> None:
        surf.blit(self.shade, (0, 0))
        self._center_text(surf, "CRASHED!", self.font_huge, (255, 68, 68), -70)
        self._center_text(surf, f"Pipes passed: {snap.score}", self.font_mid, (255, 255, 255), -10)
        self._center_text(surf, f"Best: {snap.best_score}", self.font_small, GOLD, 34)
        self._center_text(surf, "Space / Click to try again", self.font_small, (204, 204, 204), 85)

    def _draw_ending(self, surf: pygame.Surface, snap: Snapshot) -> None:
        surf.fill((13, 0, 26))
        self._draw_stars(surf)
        self._typewriter(surf, ENDING_TEXT, snap.ending_chars)
        if snap.ending_chars >= len(ENDING_TEXT):
            self._center_text(surf, "Space to continue", self.font_small, (170, 170, 180), 150)

    def _draw_win_seen(self, surf: pygame.Surface, snap: Snapshot) -> None:
        surf.fill((13, 0, 26))
        self._draw_stars(surf)
        self._center_text(surf, WIN_SEEN_TITLE, self.font_huge, GOLD, -60)
        self._center_text(surf, WIN_SEEN_TEXT, self.font_mid, PINK, 0)
        self._center_text(surf, f"Best: {snap.best_score}", self.font_small, (255, 255, 255), 44)
        self._center_text(surf, "Space / Click to play again", self.font_small, (170, 170, 170), 90)

"""Synthesized sound cues and per-epoch background loops.

Everything is generated with NumPy at start-up, so the game ships without
audio assets. If the mixer cannot be opened the game runs silently.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence, Tuple

import numpy as np
import pygame

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100

# (start Hz, end Hz, waveform, start offset s, duration s, volume)
Tone = Tuple[float, float, str, float, float, float]

CUES: Dict[str, Sequence[Tone]] = {
    "jump": [(380, 580, "sine", 0.0, 0.09, 0.22)],
    "pass": [(880, 880, "sine", 0.0, 0.055, 0.12)],
    "death": [
        (280, 45, "sawtooth", 0.0, 0.28, 0.35),
        (200, 30, "square", 0.05, 0.22, 0.15),
    ],
    "epoch-change": [(f, f, "sine", i * 0.13, 0.14, 0.18) for i, f in enumerate((523, 659, 784))],
    "win": [(f, f, "sine", i * 0.16, 0.18, 0.22) for i, f in enumerate((523, 659, 784, 1047))],
}

# Looping arpeggios; epoch 2 is darker and faster
MUSIC: Dict[int, Tuple[Sequence[float], float, str]] = {
    1: ((262, 330, 392, 523, 392, 330), 0.22, "triangle"),
    2: ((220, 262, 311, 370, 311, 262, 247, 196), 0.16, "square"),
}
MUSIC_VOLUME = 0.35


def _wave(kind: str, phase: np.ndarray) -> np.ndarray:
    frac = phase % 1.0
    if kind == "square":
        return np.where(frac < 0.5, 1.0, -1.0)
    if kind == "sawtooth":
        return 2.0 * frac - 1.0
    if kind == "triangle":
        return 4.0 * np.abs(frac - 0.5) - 1.0
    return np.sin(2.0 * np.pi * phase)


def render_tone(f1: float, f2: float, kind: str, duration: float, volume: float) -> np.ndarray:
    """One tone with an exponential pitch ramp and exponential decay."""
    n = max(1, int(SAMPLE_RATE * duration))
    t = np.arange(n, dtype=np.float64) / SAMPLE_RATE
    if f1 == f2:
        freq = np.full(n, float(f1))
    else:
        freq = f1 * (f2 / f1) ** (t / duration)
    phase = np.cumsum(freq) / SAMPLE_RATE
    env = volume * (0.001 / volume) ** (t / duration)
    return _wave(kind, phase) * env


def render_cue(tones: Sequence[Tone]) -> np.ndarray:
    length = max(start + dur for _, _, _, start, dur, _ in tones) + 0.01
    out = np.zeros(int(SAMPLE_RATE * length) + 1, dtype=np.float64)
    for f1, f2, kind, start, dur, vol in tones:
        samples = render_tone(f1, f2, kind, dur, vol)
        i = int(SAMPLE_RATE * start)
        out[i:i + len(samples)] += samples[: len(out) - i]
    return out


def render_loop(notes: Sequence[float], step: float, kind: str) -> np.ndarray:
    parts = []
    for f in notes:
        n = int(SAMPLE_RATE * step)
        t = np.arange(n, dtype=np.float64) / SAMPLE_RATE
        env = np.minimum(1.0, t * 80.0) * np.exp(-t * 6.0)
        parts.append(_wave(kind, f * t) * env * 0.3)
    return np.concatenate(parts)


def to_pcm(samples: np.ndarray, channels: int) -> np.ndarray:
    """Float samples in [-1, 1] to int16 PCM laid out for the mixer."""
    pcm = (np.clip(samples, -1.0, 1.0) * 32767).astype(np.int16)
    if channels > 1:
        pcm = np.ascontiguousarray(np.repeat(pcm[:, None], channels, axis=1))
    return pcm


class AudioMixer:
    """Fire-and-forget cues plus one looping track at a time."""

    def __init__(self, muted: bool = False) -> None:
        self.muted = muted
        self.available = False
        self._sounds: Dict[str, pygame.mixer.Sound] = {}
        self._tracks: Dict[int, pygame.mixer.Sound] = {}
        self._music_channel: Optional[pygame.mixer.Channel] = None
        self._current_epoch: Optional[int] = None

    def init(self) -> bool:
        try:
            current = pygame.mixer.get_init()
            # pygame.init() may already have opened the device at another rate
            if current and current[0] != SAMPLE_RATE:
                pygame.mixer.quit()
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
            _, _, channels = pygame.mixer.get_init()
            for name, tones in CUES.items():
                self._sounds[name] = pygame.sndarray.make_sound(to_pcm(render_cue(tones), channels))
            for epoch, (notes, step, kind) in MUSIC.items():
                self._tracks[epoch] = pygame.sndarray.make_sound(to_pcm(render_loop(notes, step, kind), channels))
        except (pygame.error, TypeError, ValueError) as e:
            logger.warning(f"Audio unavailable, continuing silently: {e}")
            self.available = False
            return False
        self.available = True
        logger.info(f"Audio mixer ready ({len(self._sounds)} cues, {len(self._tracks)} tracks)")
        return True

    def set_muted(self, muted: bool) -> None:
        if muted == self.muted:
            return
        self.muted = muted
        if self._music_channel is not None:
            self._music_channel.set_volume(0.0 if muted else MUSIC_VOLUME)

    def play_cue(self, name: str) -> None:
        if self.muted or not self.available:
            return
        sound = self._sounds.get(name)
        if sound is None:
            logger.debug(f"Unknown cue: {name}")
            return
        sound.play()

    def play_music(self, epoch: int) -> None:
        if not self.available:
            return
        track = self._tracks.get(epoch)
        if track is None:
            return
        self.stop_music()
        self._music_channel = track.play(loops=-1)
        self._current_epoch = epoch
        if self._music_channel is not None:
            self._music_channel.set_volume(0.0 if self.muted else MUSIC_VOLUME)

    def stop_music(self) -> None:
        if self._music_channel is not None:
            self._music_channel.stop()
        self._music_channel = None
        self._current_epoch = None

"""Narrative text for the story, mid-match and ending screens."""

from __future__ import annotations

from .config import STORY_CHARS_PER_SECOND

TITLE = "FLIP-BIRDS"
SUBTITLE = "The story of a bird-boy looking for love"

STORY_TEXT = (
    "Once upon a time there was a boy who was born with wings.\n"
    "Nobody in the valley could fly, so nobody understood him.\n"
    "One night he dreamed of a girl singing beyond the great pipes.\n"
    "At dawn he decided to find her, no matter how far."
)

MID_TITLE = "Who is that beautiful girl?"
MID_TEXT = "She vanished so quickly..."
MID_HINT = "Keep flying. Maybe you will meet her again."

ENDING_TEXT = (
    "Fifty pipes behind him, the boy landed on a quiet hill.\n"
    "She was there, humming the song from his dream.\n"
    "\"I knew you would fly this far,\" she said.\n"
    "And for the first time, he did not feel strange at all."
)

WIN_SEEN_TITLE = "THE END"
WIN_SEEN_TEXT = "Thank you for flying."


def visible_chars(text: str, elapsed_ms: float, rate: float = STORY_CHARS_PER_SECOND) -> int:
    """Number of characters of text revealed after elapsed_ms of typing."""
    if elapsed_ms <= 0:
        return 0
    return min(len(text), int(elapsed_ms * rate / 1000.0))


def reveal_duration_ms(text: str, rate: float = STORY_CHARS_PER_SECOND) -> float:
    """Time until the typewriter has shown the whole text."""
    return len(text) * 1000.0 / rate


def fully_revealed(text: str, elapsed_ms: float) -> bool:
    return visible_chars(text, elapsed_ms) >= len(text)

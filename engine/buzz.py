"""
Buzz cues requested by the game session.

Each cue carries the vibration pattern (alternating off/on durations in
milliseconds) the hardware layer should play.
"""

from enum import Enum


CORRECT_BUZZ_PATTERN = (100, 100, 100, 100, 100, 100)
PANIC_BUZZ_PATTERN = (0, 200)
GAME_OVER_BUZZ_PATTERN = (0, 2000)


class BuzzType(Enum):
    """Haptic cues the session can request."""
    CORRECT = "correct"
    GAME_OVER = "game_over"
    COUNTDOWN_PANIC = "countdown_panic"

    @property
    def pattern(self) -> tuple[int, ...]:
        return _PATTERNS[self]


_PATTERNS = {
    BuzzType.CORRECT: CORRECT_BUZZ_PATTERN,
    BuzzType.GAME_OVER: GAME_OVER_BUZZ_PATTERN,
    BuzzType.COUNTDOWN_PANIC: PANIC_BUZZ_PATTERN,
}

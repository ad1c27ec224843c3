"""
Game Session - core state machine for one round of Guess The Word.

The session owns the word queue, score, countdown, buzz cue and finished
flag. It runs independently of the GUI: every piece of state is exposed as
an ObservableValue so widgets and hardware services can subscribe.
"""

import logging
import random
import threading
from typing import Callable, Iterable, Optional

from config import GAME_SETTINGS, WORD_LIST, LOGGER_NAME_GAME, GameSettings
from engine.buzz import BuzzType
from engine.observable import ObservableValue
from engine.timer import QtTicker, Ticker, TickerHandle
from engine.word_queue import WordQueue

logger = logging.getLogger(LOGGER_NAME_GAME)


class SessionConfigError(ValueError):
    """Raised when a session is built from settings it cannot honour."""


def validate_settings(settings: GameSettings, words: tuple[str, ...]) -> None:
    """
    Check that the countdown lands exactly on zero and the queue can refill.

    Raises:
        SessionConfigError: If any setting is out of range
    """
    if settings.total_seconds <= 0:
        raise SessionConfigError(
            f"total_seconds must be positive, got {settings.total_seconds}")
    if settings.tick_seconds <= 0:
        raise SessionConfigError(
            f"tick_seconds must be positive, got {settings.tick_seconds}")
    if settings.total_seconds % settings.tick_seconds != 0:
        raise SessionConfigError(
            f"tick_seconds ({settings.tick_seconds}) must divide "
            f"total_seconds ({settings.total_seconds})")
    if settings.panic_threshold_seconds < 0:
        raise SessionConfigError(
            "panic_threshold_seconds cannot be negative, "
            f"got {settings.panic_threshold_seconds}")
    if not words:
        raise SessionConfigError("Canonical word list cannot be empty")
    if any(not word for word in words):
        raise SessionConfigError("Canonical word list cannot contain empty words")


class GameSession:
    """
    One round of the guessing game, from construction to countdown expiry.

    The countdown starts as soon as the session is built. Clock ticks and
    player actions are expected on the same Qt event loop; mutations are also
    held under a re-entrant lock so an off-thread caller cannot interleave
    with a tick.

    Observable state:
        current_word: Word being guessed ("" before the first draw)
        score: Corrects minus skips
        remaining_seconds: Whole seconds left on the clock
        buzz_cue: Last requested BuzzType, or None once acknowledged
        finished: True from expiry until acknowledge_finished()
    """

    def __init__(self, settings: Optional[GameSettings] = None,
                 words: Optional[Iterable[str]] = None,
                 ticker: Optional[Ticker] = None,
                 shuffle: Optional[Callable[[list[str]], None]] = None):
        """
        Build the session and start its countdown.

        Args:
            settings: Countdown settings (default: GAME_SETTINGS)
            words: Canonical word list (default: WORD_LIST)
            ticker: Tick source (default: QtTicker on the current thread)
            shuffle: In-place shuffle primitive (default: random.shuffle)

        Raises:
            SessionConfigError: If the settings or word list are malformed
        """
        self.settings = settings or GAME_SETTINGS
        canonical = tuple(words) if words is not None else WORD_LIST
        validate_settings(self.settings, canonical)

        self._lock = threading.RLock()
        self._is_disposed = False
        self._is_expired = False

        self.current_word: ObservableValue[str] = ObservableValue("")
        self.score: ObservableValue[int] = ObservableValue(0)
        self.remaining_seconds: ObservableValue[int] = ObservableValue(
            self.settings.total_seconds)
        self.buzz_cue: ObservableValue[Optional[BuzzType]] = ObservableValue(
            None, distinct=False)
        self.finished: ObservableValue[bool] = ObservableValue(False)

        self._word_queue = WordQueue(canonical, shuffle=shuffle or random.shuffle)

        logger.info("GameSession created")

        self._word_queue.reset()
        self._serve_next_word()

        self._ticker = ticker or QtTicker()
        self._timer: TickerHandle = self._ticker.schedule(
            self.settings.total_ms,
            self.settings.tick_ms,
            self._on_tick,
            self._on_expire,
        )

    @property
    def is_active(self) -> bool:
        """True while the countdown is still running."""
        return not (self._is_expired or self._is_disposed)

    @property
    def is_disposed(self) -> bool:
        return self._is_disposed

    # ============ Player Actions ============

    def on_skip(self) -> None:
        """Skip the current word for a one point penalty."""
        with self._lock:
            self.score.set(self.score.value - 1)
            self._serve_next_word()

    def on_correct(self) -> None:
        """Score the current word and buzz."""
        with self._lock:
            self.score.set(self.score.value + 1)
            self.buzz_cue.set(BuzzType.CORRECT)
            self._serve_next_word()

    # ============ Acknowledgements ============

    def acknowledge_finished(self) -> None:
        """Clear the finished flag once the observer has handled it."""
        with self._lock:
            self.finished.set(False)

    def acknowledge_buzz(self) -> None:
        """Clear the buzz cue once the observer has played it."""
        with self._lock:
            self.buzz_cue.set(None)

    # ============ Lifecycle ============

    def dispose(self) -> None:
        """Cancel the countdown. Further ticks are ignored."""
        with self._lock:
            if self._is_disposed:
                return
            self._is_disposed = True
            self._timer.cancel()
        logger.info("GameSession destroyed")

    # ============ Internals ============

    def _serve_next_word(self) -> None:
        """Move to the next word in the queue."""
        self.current_word.set(self._word_queue.next_word())

    def _on_tick(self, millis_remaining: int) -> None:
        """Apply one countdown tick."""
        with self._lock:
            if not self.is_active:
                return

            seconds = max(0, millis_remaining // 1000)
            self.remaining_seconds.set(seconds)

            if seconds < self.settings.panic_threshold_seconds:
                self.buzz_cue.set(BuzzType.COUNTDOWN_PANIC)

    def _on_expire(self) -> None:
        """Finish the round when the countdown runs out."""
        with self._lock:
            if not self.is_active:
                return
            self._is_expired = True

            # Expiry happens once, so a raising observer must not stop the
            # remaining fields from being written
            try:
                self.remaining_seconds.set(0)
            finally:
                try:
                    self.finished.set(True)
                finally:
                    self.buzz_cue.set(BuzzType.GAME_OVER)

        logger.debug("Countdown expired with score %d", self.score.value)

"""
Countdown Timer - fixed-schedule countdown for a guessing round.

Provides the ticker the game session consumes: a schedule of
``duration / interval`` ticks followed by a single expiry event.
"""

from typing import Callable, Protocol

from PySide6.QtCore import QObject, Qt, Signal, QTimer


class TickerHandle(Protocol):
    """Handle returned by a ticker; cancelling stops all further callbacks."""

    def cancel(self) -> None: ...


class Ticker(Protocol):
    """Source of countdown ticks."""

    def schedule(self, total_ms: int, interval_ms: int,
                 on_tick: Callable[[int], None],
                 on_expire: Callable[[], None]) -> TickerHandle: ...


class CountdownTimer(QObject):
    """
    Countdown timer that fires once per interval until the duration runs out.

    Remaining time is derived from the number of ticks delivered rather than
    wall-clock drift, so a 10 s / 1 s timer reports exactly
    9000, 8000, ..., 0 and then fires ``expired`` once.

    Usage:
        timer = CountdownTimer(duration_ms=10_000, interval_ms=1_000)
        timer.tick.connect(on_tick)
        timer.expired.connect(on_expired)
        timer.start()
    """

    # Signals
    tick = Signal(int)      # milliseconds remaining
    expired = Signal()      # time's up

    def __init__(self, duration_ms: int, interval_ms: int, parent=None):
        """
        Initialize the countdown timer.

        Args:
            duration_ms: Total countdown length in milliseconds
            interval_ms: Milliseconds between ticks
        """
        super().__init__(parent)

        if duration_ms <= 0 or interval_ms <= 0:
            raise ValueError("Duration and interval must be positive")

        self._duration_ms = duration_ms
        self._interval_ms = interval_ms
        self._remaining_ms = duration_ms
        self._tick_count = 0
        self._is_running = False
        self._is_cancelled = False

        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._timer.timeout.connect(self._on_timeout)

    @property
    def is_running(self) -> bool:
        """Check if the countdown is still ticking."""
        return self._is_running

    @property
    def is_cancelled(self) -> bool:
        return self._is_cancelled

    @property
    def remaining_ms(self) -> int:
        """Get remaining time in milliseconds as of the last tick."""
        return self._remaining_ms

    @property
    def tick_count(self) -> int:
        return self._tick_count

    def start(self) -> None:
        """Start the countdown from the full duration."""
        self._remaining_ms = self._duration_ms
        self._tick_count = 0
        self._is_running = True
        self._is_cancelled = False
        self._timer.start()

    def cancel(self) -> None:
        """
        Stop the countdown for good. Safe to call more than once.

        A running timer schedules its own deletion; an expired one has
        already done so.
        """
        if self._is_cancelled:
            return
        self._is_cancelled = True
        if self._is_running:
            self._timer.stop()
            self._is_running = False
            self.deleteLater()

    def _on_timeout(self) -> None:
        """Handle one interval elapsing."""
        # A queued timeout can still arrive after cancel()
        if self._is_cancelled or not self._is_running:
            return

        self._tick_count += 1
        remaining = max(0, self._duration_ms - self._tick_count * self._interval_ms)
        self._remaining_ms = remaining

        self.tick.emit(remaining)

        # A tick handler may have cancelled us
        if self._is_cancelled:
            return

        if remaining <= 0:
            self._timer.stop()
            self._is_running = False
            self.expired.emit()
            self.deleteLater()


class QtTicker:
    """Ticker backed by CountdownTimer on the current thread's event loop."""

    def __init__(self, parent: QObject = None):
        self._parent = parent

    def schedule(self, total_ms: int, interval_ms: int,
                 on_tick: Callable[[int], None],
                 on_expire: Callable[[], None]) -> CountdownTimer:
        timer = CountdownTimer(total_ms, interval_ms, self._parent)
        timer.tick.connect(on_tick)
        timer.expired.connect(on_expire)
        timer.start()
        return timer

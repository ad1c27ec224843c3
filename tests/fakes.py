"""
Test doubles for the game engine.
"""


class ManualTicker:
    """Ticker fake. Each advance() delivers the next scheduled tick."""

    def __init__(self):
        self.total_ms = None
        self.interval_ms = None
        self.on_tick = None
        self.on_expire = None
        self.tick_count = 0
        self.expired = False
        self.cancelled = False
        self.cancel_calls = 0

    def schedule(self, total_ms, interval_ms, on_tick, on_expire):
        self.total_ms = total_ms
        self.interval_ms = interval_ms
        self.on_tick = on_tick
        self.on_expire = on_expire
        return self

    def cancel(self):
        self.cancelled = True
        self.cancel_calls += 1

    @property
    def ticks_total(self) -> int:
        return self.total_ms // self.interval_ms

    def advance(self, ticks: int = 1) -> None:
        """Deliver up to `ticks` ticks, firing expiry after the last one."""
        for _ in range(ticks):
            if self.cancelled or self.expired:
                return
            self.tick_count += 1
            remaining = self.total_ms - self.tick_count * self.interval_ms
            self.on_tick(remaining)
            if self.tick_count == self.ticks_total and not self.cancelled:
                self.expired = True
                self.on_expire()

    def run_to_end(self) -> None:
        self.advance(self.ticks_total - self.tick_count)

    # Raw delivery, ignoring cancellation, for misbehaving-ticker tests
    def fire_tick(self, remaining_ms: int) -> None:
        self.on_tick(remaining_ms)

    def fire_expire(self) -> None:
        self.on_expire()


def keep_order(words: list[str]) -> None:
    """Shuffle stand-in that leaves the list as given."""

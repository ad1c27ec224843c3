"""
Observable Value - typed holder that pushes changes to subscribers.

Session state is exposed through these holders so any presentation layer
(Qt widgets, a buzzer service, a test) can react without polling.
"""

from collections import deque
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class ObservableValue(Generic[T]):
    """
    A single value with synchronous change notification.

    Subscribers are called on the writer's thread, in subscription order,
    with the new value. By default a write that does not change the value
    is not announced; event-like values (e.g. buzz cues) pass
    ``distinct=False`` so every write is delivered.

    Usage:
        score = ObservableValue(0)
        score.subscribe(label.setNum)
        score.set(5)   # label.setNum(5)
    """

    def __init__(self, initial: T, distinct: bool = True):
        self._value = initial
        self._distinct = distinct
        self._subscribers: list[Callable[[T], None]] = []
        self._pending: deque = deque()
        self._notifying = False

    @property
    def value(self) -> T:
        """Current value."""
        return self._value

    def set(self, value: T) -> None:
        """
        Store a new value and notify subscribers.

        A write made by a subscriber while a notification is running is
        stored at once but delivered only after every subscriber has seen
        the current value, so all subscribers see writes in the same order.
        """
        if self._distinct and value == self._value:
            return
        self._value = value
        self._pending.append(value)
        if self._notifying:
            return

        self._notifying = True
        try:
            while self._pending:
                current = self._pending.popleft()
                for callback in list(self._subscribers):
                    callback(current)
        finally:
            self._notifying = False
            self._pending.clear()

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[T], None]:
        """Register a callback. Returns the callback so it can be unsubscribed."""
        self._subscribers.append(callback)
        return callback

    def unsubscribe(self, callback: Callable[[T], None]) -> None:
        """Remove a callback. Unknown callbacks are ignored."""
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def __repr__(self) -> str:
        return f"ObservableValue({self._value!r})"

"""
Buzzer - plays a session's buzz cues.

The session only records which cue it wants; the Buzzer turns that into a
vibration pattern for whatever output is available and acknowledges the cue.
"""

import logging
from typing import Callable, Optional

from PySide6.QtWidgets import QApplication

from config import LOGGER_NAME_GAME
from engine.buzz import BuzzType
from engine.session import GameSession

logger = logging.getLogger(LOGGER_NAME_GAME)


def default_vibrate(pattern: tuple[int, ...]) -> None:
    """Desktop stand-in for a vibration motor: log and beep."""
    logger.debug("Buzz pattern %s", pattern)
    if isinstance(QApplication.instance(), QApplication):
        QApplication.beep()


class Buzzer:
    """
    Subscribes to a GameSession's buzz cue.

    Usage:
        buzzer = Buzzer()
        buzzer.attach(session)
        ...
        buzzer.detach()
    """

    def __init__(self, vibrate: Optional[Callable[[tuple[int, ...]], None]] = None):
        self._vibrate = vibrate or default_vibrate
        self._session: Optional[GameSession] = None

    @property
    def session(self) -> Optional[GameSession]:
        return self._session

    def attach(self, session: GameSession) -> None:
        """Start playing cues from the given session."""
        self.detach()
        self._session = session
        session.buzz_cue.subscribe(self._on_buzz)

    def detach(self) -> None:
        """Stop listening to the current session."""
        if self._session is not None:
            self._session.buzz_cue.unsubscribe(self._on_buzz)
            self._session = None

    def _on_buzz(self, cue: Optional[BuzzType]) -> None:
        if cue is None:
            return
        self._vibrate(cue.pattern)
        self._session.acknowledge_buzz()

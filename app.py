"""
Guess The Word Application Controller

Top-level controller that wires together all application components.
"""

from typing import Iterable, Optional

from PySide6.QtCore import QObject

from config import GAME_SETTINGS, WORD_LIST, GameSettings
from engine.session import GameSession
from engine.timer import QtTicker
from gui.game_window import GameWindow
from services.buzzer import Buzzer


class GuessTheWordApp(QObject):
    """
    Top-level application controller.
    Owns the active GameSession and disposes it when the round is replaced
    or the window closes.
    """

    def __init__(self, settings: Optional[GameSettings] = None,
                 words: Optional[Iterable[str]] = None):
        super().__init__()

        self.settings = settings or GAME_SETTINGS
        self.words = tuple(words) if words is not None else WORD_LIST

        self.ticker = QtTicker(self)
        self.buzzer = Buzzer()
        self.session: Optional[GameSession] = None

        self.main_window = GameWindow()
        self.main_window.play_again_requested.connect(self.new_game)
        self.main_window.closing.connect(self.shutdown)

    def show(self) -> None:
        """Start the first round and show the window."""
        self.new_game()
        self.main_window.show()

    def new_game(self) -> GameSession:
        """Dispose the current round (if any) and start a fresh one."""
        self._dispose_session()

        self.session = GameSession(
            settings=self.settings,
            words=self.words,
            ticker=self.ticker,
        )
        self.buzzer.attach(self.session)
        self.main_window.bind_session(self.session)
        return self.session

    def shutdown(self) -> None:
        """Tear down the active round."""
        self._dispose_session()

    def _dispose_session(self) -> None:
        if self.session is None:
            return
        self.main_window.unbind_session()
        self.buzzer.detach()
        self.session.dispose()
        self.session = None

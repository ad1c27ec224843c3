"""
Tests for GameWindow session binding.

The window's widgets are replaced with mocks so no display is needed.
"""

from unittest.mock import MagicMock, call

from config import GameSettings
from engine.session import GameSession
from gui.game_window import GameWindow
from tests.fakes import ManualTicker


class TestBindSession:
    """Tests for pushing a session's state into the widgets."""

    def setup_method(self):
        self.window = MagicMock(spec=["unbind_session", "timer_widget", "scoreboard",
                                      "stack", "_on_finished_changed", "GAME_PAGE",
                                      "session", "_bindings"])
        self.window.GAME_PAGE = GameWindow.GAME_PAGE
        self.session = GameSession(
            settings=GameSettings(total_seconds=10, tick_seconds=1,
                                  panic_threshold_seconds=4),
            ticker=ManualTicker(),
        )

    def test_timer_rendered_once_after_threshold(self):
        """The timer is drawn once, with the session's panic threshold already set."""
        GameWindow.bind_session(self.window, self.session)

        assert self.window.timer_widget.mock_calls == [
            call.set_panic_threshold(4),
            call.update_time(10),
        ]

    def test_initial_values_pushed(self):
        GameWindow.bind_session(self.window, self.session)

        self.window.scoreboard.update_word.assert_called_once_with(
            self.session.current_word.value)
        self.window.scoreboard.update_score.assert_called_once_with(0)
        self.window.stack.setCurrentIndex.assert_called_once_with(GameWindow.GAME_PAGE)

    def test_later_ticks_reach_timer(self):
        ticker = ManualTicker()
        session = GameSession(ticker=ticker)
        GameWindow.bind_session(self.window, session)

        ticker.advance(1)

        self.window.timer_widget.update_time.assert_called_with(9)

"""
Game Window

Main window: the guessing screen while a round runs and the final score
screen once it ends.
"""

from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QStackedWidget,
)
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QKeySequence, QShortcut

from config import APP_NAME, UI_SETTINGS
from engine.session import GameSession
from gui.styles.theme import SURFACE_MAIN, TEXT_PRIMARY, PRIMARY, SUCCESS, DANGER
from gui.widgets.round_timer import RoundTimerWidget
from gui.widgets.scoreboard import ScoreboardWidget


class GameWindow(QMainWindow):
    """
    Renders a GameSession and forwards button presses to it.

    The window never owns the session: the controller binds one with
    bind_session() and builds a new one when play_again_requested fires.
    """

    play_again_requested = Signal()
    closing = Signal()

    GAME_PAGE = 0
    SCORE_PAGE = 1

    def __init__(self, parent=None):
        super().__init__(parent)
        self.session: Optional[GameSession] = None
        self._bindings: list[tuple] = []

        self.setWindowTitle(APP_NAME)
        self.setMinimumSize(UI_SETTINGS.min_width, UI_SETTINGS.min_height)
        self.setStyleSheet(f"background-color: {SURFACE_MAIN}; color: {TEXT_PRIMARY};")

        self._build_ui()
        self._build_shortcuts()

    def _build_ui(self) -> None:
        """Build both pages of the window."""
        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)

        # Game page
        game_page = QWidget()
        layout = QVBoxLayout(game_page)

        self.timer_widget = RoundTimerWidget()
        layout.addWidget(self.timer_widget)

        self.scoreboard = ScoreboardWidget()
        layout.addWidget(self.scoreboard, stretch=1)

        buttons = QHBoxLayout()
        self.skip_button = self._make_button("Skip", DANGER)
        self.skip_button.clicked.connect(self._on_skip_clicked)
        buttons.addWidget(self.skip_button)

        self.correct_button = self._make_button("Got It", SUCCESS)
        self.correct_button.clicked.connect(self._on_correct_clicked)
        buttons.addWidget(self.correct_button)
        layout.addLayout(buttons)

        self.stack.addWidget(game_page)

        # Score page
        score_page = QWidget()
        score_layout = QVBoxLayout(score_page)
        score_layout.addStretch()

        caption = QLabel("Final Score")
        caption.setAlignment(Qt.AlignmentFlag.AlignCenter)
        caption.setStyleSheet("font-size: 18pt;")
        score_layout.addWidget(caption)

        self.final_score_label = QLabel("0")
        self.final_score_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.final_score_label.setStyleSheet("font-size: 64pt; font-weight: bold;")
        score_layout.addWidget(self.final_score_label)

        score_layout.addStretch()
        self.play_again_button = self._make_button("Play Again", PRIMARY)
        self.play_again_button.clicked.connect(self.play_again_requested.emit)
        score_layout.addWidget(self.play_again_button)

        self.stack.addWidget(score_page)

    def _make_button(self, text: str, color: str) -> QPushButton:
        button = QPushButton(text)
        button.setMinimumHeight(56)
        button.setStyleSheet(f"""
            QPushButton {{
                background-color: {color};
                border-radius: 8px;
                font-size: 14pt;
                font-weight: bold;
            }}
        """)
        return button

    def _build_shortcuts(self) -> None:
        """Keyboard shortcuts for the two actions."""
        QShortcut(QKeySequence(Qt.Key.Key_Left), self, activated=self._on_skip_clicked)
        QShortcut(QKeySequence(Qt.Key.Key_Right), self, activated=self._on_correct_clicked)

    def bind_session(self, session: GameSession) -> None:
        """Render the given session, dropping any previous one."""
        self.unbind_session()
        self.session = session
        self.timer_widget.set_panic_threshold(session.settings.panic_threshold_seconds)

        bindings = [
            (session.current_word, self.scoreboard.update_word),
            (session.score, self.scoreboard.update_score),
            (session.remaining_seconds, self.timer_widget.update_time),
            (session.finished, self._on_finished_changed),
        ]
        for observable, callback in bindings:
            observable.subscribe(callback)
            callback(observable.value)
        self._bindings = bindings

        self.stack.setCurrentIndex(self.GAME_PAGE)

    def unbind_session(self) -> None:
        """Stop rendering the current session."""
        for observable, callback in self._bindings:
            observable.unsubscribe(callback)
        self._bindings = []
        self.session = None

    def _on_skip_clicked(self) -> None:
        if self.session and self.stack.currentIndex() == self.GAME_PAGE:
            self.session.on_skip()

    def _on_correct_clicked(self) -> None:
        if self.session and self.stack.currentIndex() == self.GAME_PAGE:
            self.session.on_correct()

    def _on_finished_changed(self, finished: bool) -> None:
        """Switch to the score page when the round ends."""
        if not finished or self.session is None:
            return
        self.final_score_label.setText(str(self.session.score.value))
        self.stack.setCurrentIndex(self.SCORE_PAGE)
        self.session.acknowledge_finished()

    def closeEvent(self, event) -> None:
        """Handle window close."""
        self.closing.emit()
        super().closeEvent(event)

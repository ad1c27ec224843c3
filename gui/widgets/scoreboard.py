"""
Scoreboard Widget

Shows the word being guessed and the running score.
"""

from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel
from PySide6.QtCore import Qt, Slot

from config import UI_SETTINGS
from gui.styles.theme import TEXT_PRIMARY, TEXT_SECONDARY


class ScoreboardWidget(QWidget):
    """
    Compact scoreboard showing:
    - The current word
    - The current score
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._build_ui()

    def _build_ui(self) -> None:
        """Build the scoreboard UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)

        caption = QLabel("The word is")
        caption.setStyleSheet(f"font-size: 12pt; color: {TEXT_SECONDARY};")
        caption.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(caption)

        self.word_label = QLabel("")
        self.word_label.setObjectName("word")
        self.word_label.setStyleSheet(
            f"font-size: {UI_SETTINGS.word_font_size}pt; font-weight: bold; color: {TEXT_PRIMARY};"
        )
        self.word_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.word_label)

        self.score_label = QLabel("Score: 0")
        self.score_label.setObjectName("score")
        self.score_label.setStyleSheet(
            f"font-size: {UI_SETTINGS.score_font_size}pt; color: {TEXT_SECONDARY};"
        )
        self.score_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.score_label)

    @Slot(str)
    def update_word(self, word: str) -> None:
        self.word_label.setText(f"“{word}”")

    @Slot(int)
    def update_score(self, score: int) -> None:
        self.score_label.setText(f"Score: {score}")

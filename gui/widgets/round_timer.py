"""
Round Timer Widget

Countdown display for the game screen.
"""

from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel
from PySide6.QtCore import Qt, Slot

from config import UI_SETTINGS
from gui.styles.theme import DANGER, TEXT_PRIMARY, FONT_MONO
from services.formatting import format_elapsed_time


class RoundTimerWidget(QWidget):
    """
    Visual timer display widget.

    Shows the remaining seconds as "M:SS", turning red once the
    panic threshold is reached.
    """

    def __init__(self, panic_threshold_seconds: int = 3, parent=None):
        super().__init__(parent)
        self._panic_threshold = panic_threshold_seconds
        self._build_ui()

    def _build_ui(self) -> None:
        """Build the timer display UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.time_label = QLabel("0:00")
        self.time_label.setObjectName("timer_display")
        self.time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._set_color(TEXT_PRIMARY)
        layout.addWidget(self.time_label)

    def set_panic_threshold(self, seconds: int) -> None:
        self._panic_threshold = seconds

    @Slot(int)
    def update_time(self, remaining_seconds: int) -> None:
        """Update the timer display."""
        self.time_label.setText(format_elapsed_time(remaining_seconds))

        if remaining_seconds < self._panic_threshold:
            self._set_color(DANGER)
        else:
            self._set_color(TEXT_PRIMARY)

    def _set_color(self, color: str) -> None:
        """Set the timer text color."""
        self.time_label.setStyleSheet(f"""
            font-size: {UI_SETTINGS.timer_font_size}pt;
            font-weight: bold;
            font-family: {FONT_MONO};
            color: {color};
        """)

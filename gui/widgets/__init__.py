"""
Guess The Word GUI Widgets

Reusable widget components for the game window.
"""

from gui.widgets.round_timer import RoundTimerWidget
from gui.widgets.scoreboard import ScoreboardWidget

__all__ = [
    "RoundTimerWidget",
    "ScoreboardWidget",
]

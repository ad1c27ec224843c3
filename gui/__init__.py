"""
Guess The Word GUI

PySide6 user interface components.
"""

from gui.game_window import GameWindow

__all__ = ["GameWindow"]

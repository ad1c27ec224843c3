"""
Guess The Word Services

Application services around the game engine: buzz output, formatting, settings.
"""

from services.buzzer import Buzzer
from services.formatting import format_elapsed_time
from services.settings import load_game_settings, load_game_settings_or_defaults

__all__ = [
    "Buzzer",
    "format_elapsed_time",
    "load_game_settings",
    "load_game_settings_or_defaults",
]

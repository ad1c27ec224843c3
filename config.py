"""
Guess The Word Configuration

Centralized settings, paths, and constants for the application.
"""

from pathlib import Path
from dataclasses import dataclass
import appdirs


# Application info
APP_NAME = "GuessTheWord"
APP_AUTHOR = "GuessTheWord"
APP_VERSION = "1.0.0"

# Logger names
LOGGER_NAME_MAIN = "guesstheword"
LOGGER_NAME_GAME = "guesstheword.game"


@dataclass(frozen=True)
class Paths:
    """Application paths."""
    # Config directory (stores user preferences)
    config_dir: Path = Path(appdirs.user_config_dir(APP_NAME, APP_AUTHOR))

    # Log directory
    log_dir: Path = Path(appdirs.user_log_dir(APP_NAME, APP_AUTHOR))

    @property
    def settings(self) -> Path:
        return self.config_dir / "settings.json"

    @property
    def log_file(self) -> Path:
        return self.log_dir / "guesstheword.log"

    def ensure_directories(self) -> None:
        """Create all required directories."""
        for dir_path in [self.config_dir, self.log_dir]:
            dir_path.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class GameSettings:
    """Countdown settings for a single round."""
    # Total length of the round in seconds
    total_seconds: int = 10

    # Seconds between countdown ticks
    tick_seconds: int = 1

    # Panic cue fires once remaining seconds drop below this
    panic_threshold_seconds: int = 3

    @property
    def total_ms(self) -> int:
        return self.total_seconds * 1000

    @property
    def tick_ms(self) -> int:
        return self.tick_seconds * 1000


# Words the queue is refilled from
WORD_LIST: tuple[str, ...] = (
    "queen",
    "hospital",
    "basketball",
    "cat",
    "change",
    "snail",
    "soup",
    "calendar",
    "sad",
    "desk",
    "guitar",
    "home",
    "railway",
    "zebra",
    "jelly",
    "car",
    "crow",
    "trade",
    "bag",
    "roll",
    "bubble",
    "Jiu-Jitsu",
)


@dataclass(frozen=True)
class UISettings:
    """UI-related settings."""
    # Minimum window size
    min_width: int = 480
    min_height: int = 640

    # Font sizes
    word_font_size: int = 40
    score_font_size: int = 18
    timer_font_size: int = 28


# Singleton instances
PATHS = Paths()
GAME_SETTINGS = GameSettings()
UI_SETTINGS = UISettings()


def init_config() -> None:
    """Initialize configuration and create required directories."""
    PATHS.ensure_directories()

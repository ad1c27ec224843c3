"""
Guess The Word - timed single-player word guessing game

Entry point for the application.
"""

import logging
import sys

from PySide6.QtWidgets import QApplication

from config import (
    init_config, PATHS, APP_NAME, APP_VERSION, LOGGER_NAME_MAIN, LOGGER_NAME_GAME,
)


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure console and file logging."""
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.DEBUG if debug else logging.INFO)

    file_handler = logging.FileHandler(PATHS.log_file, encoding="utf-8")
    file_handler.setFormatter(formatter)
    file_handler.setLevel(logging.DEBUG)

    # Game logger propagates to the main one
    main_logger = logging.getLogger(LOGGER_NAME_MAIN)
    main_logger.setLevel(logging.DEBUG)
    main_logger.addHandler(console_handler)
    main_logger.addHandler(file_handler)
    logging.getLogger(LOGGER_NAME_GAME).setLevel(logging.DEBUG)

    return main_logger


def main() -> int:
    """Main entry point for Guess The Word."""
    # Initialize configuration and directories
    init_config()
    logger = setup_logging(debug="--debug" in sys.argv)

    from services.settings import load_game_settings_or_defaults
    settings, words = load_game_settings_or_defaults()

    # Create application
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)

    from app import GuessTheWordApp
    game_app = GuessTheWordApp(settings=settings, words=words)
    game_app.show()
    logger.info("%s %s started", APP_NAME, APP_VERSION)

    # Run event loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())

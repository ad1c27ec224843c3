"""
Settings Loader - reads optional game overrides from settings.json.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from config import PATHS, GAME_SETTINGS, WORD_LIST, LOGGER_NAME_MAIN, GameSettings
from engine.session import SessionConfigError
from models.schemas import GameSettingsSchema

logger = logging.getLogger(LOGGER_NAME_MAIN)


def load_game_settings(path: Optional[Path] = None) -> tuple[GameSettings, tuple[str, ...]]:
    """
    Load game settings and the canonical word list.

    Falls back to the built-in defaults when the file does not exist.

    Args:
        path: Settings file (default: PATHS.settings)

    Returns:
        (settings, words)

    Raises:
        SessionConfigError: If the file cannot be read, is not valid JSON
            or fails validation
    """
    path = path or PATHS.settings
    if not path.exists():
        return GAME_SETTINGS, WORD_LIST

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
        schema = GameSettingsSchema.model_validate(raw)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
        raise SessionConfigError(f"Invalid settings file {path}: {e}") from e

    logger.info("Loaded game settings from %s", path)
    return schema.to_settings(), tuple(schema.words)


def load_game_settings_or_defaults(path: Optional[Path] = None) -> tuple[GameSettings, tuple[str, ...]]:
    """Like load_game_settings(), but log a bad settings file and use the defaults."""
    try:
        return load_game_settings(path)
    except SessionConfigError as e:
        logger.error("%s; using default settings", e)
        return GAME_SETTINGS, WORD_LIST

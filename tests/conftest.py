"""
Shared fixtures for the game engine tests.
"""

import pytest

from config import GameSettings
from tests.fakes import ManualTicker


@pytest.fixture
def ticker():
    """A hand-driven ticker so session tests never wait on a clock."""
    return ManualTicker()


@pytest.fixture
def settings():
    return GameSettings(total_seconds=10, tick_seconds=1, panic_threshold_seconds=3)

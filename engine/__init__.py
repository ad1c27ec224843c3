"""
Guess The Word Game Engine

Core game logic for a timed guessing round.
This module contains no GUI dependencies.
"""

from engine.buzz import BuzzType
from engine.observable import ObservableValue
from engine.session import GameSession, SessionConfigError, validate_settings
from engine.timer import CountdownTimer, QtTicker, Ticker, TickerHandle
from engine.word_queue import WordQueue

__all__ = [
    "BuzzType",
    "ObservableValue",
    "GameSession",
    "SessionConfigError",
    "validate_settings",
    "CountdownTimer",
    "QtTicker",
    "Ticker",
    "TickerHandle",
    "WordQueue",
]

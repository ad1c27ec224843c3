"""
Word Queue

Holds the words left to guess in the current round. The front of the
queue is served next; once the queue runs dry it is rebuilt from the
canonical word list and reshuffled.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Callable

from config import LOGGER_NAME_GAME

logger = logging.getLogger(LOGGER_NAME_GAME)


@dataclass
class WordQueue:
    """
    Shuffled queue of words drawn from a canonical list.

    Attributes:
        words: Canonical word list used for every refill
        shuffle: In-place shuffle primitive (default: random.shuffle)
        refill_count: Number of times the queue has been rebuilt
    """
    words: tuple[str, ...]
    shuffle: Callable[[list[str]], None] = random.shuffle
    refill_count: int = 0
    _queue: list[str] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self.words = tuple(self.words)
        if not self.words:
            raise ValueError("Canonical word list cannot be empty")

    def __len__(self) -> int:
        return len(self._queue)

    @property
    def is_empty(self) -> bool:
        return not self._queue

    def reset(self) -> None:
        """Rebuild the queue from the canonical list and shuffle it."""
        self._queue = list(self.words)
        self.shuffle(self._queue)
        self.refill_count += 1
        logger.debug("Word queue refilled (%d words, refill #%d)",
                     len(self._queue), self.refill_count)

    def next_word(self) -> str:
        """Remove and return the front word, refilling first if empty."""
        if not self._queue:
            self.reset()
        return self._queue.pop(0)

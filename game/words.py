"""
Word selection for Whisper Rooms.

Defines the WordProvider contract the state machine depends on and a
static, difficulty-aware implementation backed by the built-in word bank.
"""

import random
import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Dict, List, Optional, Tuple

from utils.constants import WORD_BANK, WORD_HISTORY_SIZE
from utils.helpers import normalize_difficulty

logger = logging.getLogger(__name__)

class WordProvider(ABC):
    """Supplies a secret word and its category for each new game."""

    @abstractmethod
    def select_word(self, difficulty: str) -> Tuple[str, str]:
        """
        Pick the word for a new game.

        Args:
            difficulty: One of the known difficulty levels

        Returns:
            Tuple of (word, category)
        """

class StaticWordProvider(WordProvider):
    """
    Picks words from an in-memory word bank.

    Recently served words are skipped while alternatives remain, so
    consecutive games do not repeat the same word.
    """

    def __init__(self, word_bank: Optional[Dict[str, Dict[str, List[str]]]] = None,
                 history_size: int = WORD_HISTORY_SIZE,
                 rng: Optional[random.Random] = None):
        self.word_bank = word_bank or WORD_BANK
        self.rng = rng or random.Random()
        self.recent_words = deque(maxlen=history_size)

    def select_word(self, difficulty: str) -> Tuple[str, str]:
        level = normalize_difficulty(difficulty)
        candidates = [
            (word, category)
            for category, words in self.word_bank.get(level, {}).items()
            for word in words
        ]
        if not candidates:
            raise ValueError(f"No words available for difficulty {level}")

        fresh = [c for c in candidates if c[0] not in self.recent_words]
        word, category = self.rng.choice(fresh or candidates)
        self.recent_words.append(word)

        logger.debug(f"Selected {level} word from category {category}")
        return word, category

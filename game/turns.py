"""
Turn order generation for Whisper Rooms.

The order is shuffled once when a game starts and reused for both clue
rounds; only the turn index resets between rounds.
"""

import random
import logging
from typing import List, Optional

from .models import GamePlayer

logger = logging.getLogger(__name__)

class TurnOrderGenerator:
    """Produces a uniformly random traversal order of player ids."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def generate(self, players: List[GamePlayer]) -> List[str]:
        """
        Shuffle the full player id set.

        Args:
            players: Game players

        Returns:
            Permutation of the player ids
        """
        turn_order = [p.id for p in players]
        self.rng.shuffle(turn_order)
        logger.debug(f"Created turn order of {len(turn_order)} players")
        return turn_order

"""
Role Assigner for Whisper Rooms.

Chooses the single impostor for a new game. Contains no turn or vote
logic - purely role selection.
"""

import random
import logging
from typing import List, Optional, Tuple

from .models import GamePlayer, Role

logger = logging.getLogger(__name__)

class RoleAssigner:
    """Selects exactly one impostor uniformly at random."""

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize role assigner.

        Args:
            rng: Random source; defaults to the module-level generator
        """
        self.rng = rng or random.Random()

    def assign(self, players: List[GamePlayer]) -> Tuple[List[GamePlayer], str]:
        """
        Label one player impostor and every other player civilian.

        Args:
            players: Game players in lobby order

        Returns:
            Tuple of (players_with_roles, impostor_id)
        """
        if not players:
            raise ValueError("Cannot assign roles - no players provided")

        impostor_index = self.rng.randrange(len(players))
        for index, player in enumerate(players):
            player.role = Role.IMPOSTOR if index == impostor_index else Role.CIVILIAN

        impostor_id = players[impostor_index].id
        logger.debug(f"Assigned impostor among {len(players)} players")
        return players, impostor_id

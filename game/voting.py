"""
Vote counting for Whisper Rooms.

Pure functions that turn recorded votes into an elimination and a
winner. Contains no phase logic - the state machine decides when to
call them.
"""

import random
import logging
from typing import Dict, Iterable, List, Optional

from .models import GamePlayer, Winner

logger = logging.getLogger(__name__)

def tally_votes(players: Iterable[GamePlayer]) -> Dict[str, int]:
    """
    Count votes by target id.

    Args:
        players: Game players; players without a vote are skipped

    Returns:
        Mapping of target id to number of votes received
    """
    vote_counts: Dict[str, int] = {}
    for player in players:
        if player.voted_for:
            vote_counts[player.voted_for] = vote_counts.get(player.voted_for, 0) + 1
    return vote_counts

def get_top_voted(vote_counts: Dict[str, int]) -> List[str]:
    """Return every id that received the maximum number of votes."""
    if not vote_counts:
        return []
    max_votes = max(vote_counts.values())
    return [target for target, count in vote_counts.items() if count == max_votes]

def choose_eliminated(vote_counts: Dict[str, int],
                      rng: Optional[random.Random] = None) -> Optional[str]:
    """
    Pick the eliminated player.

    A single leader is eliminated outright; a tie at the maximum is
    broken uniformly at random among the tied ids.

    Args:
        vote_counts: Mapping of target id to votes
        rng: Random source for the tie-break

    Returns:
        Eliminated id, or None if nobody received a vote
    """
    leaders = get_top_voted(vote_counts)
    if not leaders:
        return None
    if len(leaders) == 1:
        return leaders[0]

    eliminated = (rng or random).choice(leaders)
    logger.info(f"Vote tie between {len(leaders)} players broken at random")
    return eliminated

def determine_winner(eliminated_id: Optional[str], impostor_id: str) -> Winner:
    """Civilians win only when the impostor is the one eliminated."""
    if eliminated_id is not None and eliminated_id == impostor_id:
        return Winner.CIVILIANS
    return Winner.IMPOSTOR

"""
Data models for game management.

These represent game-specific data structures that live inside a room
from the moment a game starts until it is reset or aborted.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any
from enum import Enum

class Phase(Enum):
    """Game phase enumeration."""
    SETUP = "setup"
    ROLE_REVEAL = "roleReveal"
    ROUND1 = "round1"
    ROUND2 = "round2"
    VOTING = "voting"
    RESULT = "result"

class Role(Enum):
    """Player role enumeration."""
    CIVILIAN = "civilian"
    IMPOSTOR = "impostor"

class Winner(Enum):
    """Winning side enumeration."""
    CIVILIANS = "civilians"
    IMPOSTOR = "impostor"

CLUE_PHASES = (Phase.ROUND1, Phase.ROUND2)

@dataclass
class GamePlayer:
    """Represents a participant inside a running game."""
    id: str
    name: str
    is_bot: bool = False
    role: Role = Role.CIVILIAN
    clues: List[str] = field(default_factory=list)
    voted_for: Optional[str] = None

    @property
    def has_voted(self) -> bool:
        return self.voted_for is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'id': self.id,
            'name': self.name,
            'isBot': self.is_bot,
            'role': self.role.value,
            'clues': list(self.clues),
            'votedFor': self.voted_for
        }

@dataclass
class GameState:
    """
    Authoritative state of one game.

    ``secret_word`` is server-only: it is present in ``to_dict`` so the
    server can reason about the full state, and is removed by the
    redaction functions before anything leaves the process.
    """
    turn_order: List[str]
    players: List[GamePlayer]
    secret_word: str
    category: str
    impostor_id: str
    phase: Phase = Phase.SETUP
    current_round: int = 1
    current_turn_index: int = 0
    winner: Optional[Winner] = None
    vote_counts: Dict[str, int] = field(default_factory=dict)
    eliminated_id: Optional[str] = None
    show_role_reveal: bool = False

    @property
    def current_turn_player_id(self) -> Optional[str]:
        """Id of the player whose turn it is, if a clue round is running."""
        if self.phase not in CLUE_PHASES:
            return None
        if 0 <= self.current_turn_index < len(self.turn_order):
            return self.turn_order[self.current_turn_index]
        return None

    def get_player(self, player_id: str) -> Optional[GamePlayer]:
        """Find game player by id."""
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, including server-only fields."""
        return {
            'phase': self.phase.value,
            'currentRound': self.current_round,
            'currentTurnIndex': self.current_turn_index,
            'turnOrder': list(self.turn_order),
            'players': [p.to_dict() for p in self.players],
            'secretWord': self.secret_word,
            'category': self.category,
            'impostorId': self.impostor_id,
            'winner': self.winner.value if self.winner else None,
            'voteCounts': dict(self.vote_counts),
            'eliminatedId': self.eliminated_id,
            'showRoleReveal': self.show_role_reveal
        }

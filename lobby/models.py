"""
Data models for lobby management.

These are the data structures the room registry owns and the game
state machine mutates, plus the serialized views sent to clients.
"""

import threading
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any, Set, TYPE_CHECKING
from datetime import datetime, timezone

from utils.constants import MAX_PLAYERS, DEFAULT_DIFFICULTY

if TYPE_CHECKING:
    from game.models import GameState

@dataclass
class Participant:
    """Represents a connection that has joined a room."""
    id: str
    name: str
    is_host: bool = False
    is_ready: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'id': self.id,
            'name': self.name,
            'isHost': self.is_host,
            'isReady': self.is_ready
        }

@dataclass
class RoomSettings:
    """Settings chosen by the host when creating a room."""
    difficulty: str = DEFAULT_DIFFICULTY
    impostor_hint_enabled: bool = True

@dataclass(eq=False)
class Room:
    """
    One isolated game session addressed by a short code.

    All reads and writes go through ``lock``; the registry hands rooms
    out already locked (see ``RoomRegistry.locked_room``).
    """
    code: str
    host_id: Optional[str]
    settings: RoomSettings = field(default_factory=RoomSettings)
    players: List[Participant] = field(default_factory=list)
    game_state: Optional["GameState"] = None
    role_reveal_dismissals: Optional[Set[str]] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    @property
    def player_count(self) -> int:
        return len(self.players)

    @property
    def is_empty(self) -> bool:
        return not self.players

    @property
    def is_full(self) -> bool:
        return self.player_count >= MAX_PLAYERS

    @property
    def all_ready(self) -> bool:
        return all(p.is_ready for p in self.players)

    @property
    def player_ids(self) -> List[str]:
        return [p.id for p in self.players]

    def get_player(self, player_id: str) -> Optional[Participant]:
        """Find participant by connection id."""
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def players_to_dict(self) -> List[Dict[str, Any]]:
        return [p.to_dict() for p in self.players]

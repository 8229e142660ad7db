"""
Game Module for Whisper Rooms.

Contains all game-specific logic and components.
Games run inside rooms but are separate from room management.
"""

from .models import Phase, Role, Winner, GamePlayer, GameState
from .exceptions import GameError
from .roles import RoleAssigner
from .turns import TurnOrderGenerator
from .words import WordProvider, StaticWordProvider
from .redaction import filter_game_state, player_role_payload
from .state_machine import SessionStateMachine, GameEvent, DepartureOutcome

__all__ = [
    # Data models
    'Phase',
    'Role',
    'Winner',
    'GamePlayer',
    'GameState',

    # Errors
    'GameError',

    # Components
    'RoleAssigner',
    'TurnOrderGenerator',
    'WordProvider',
    'StaticWordProvider',
    'SessionStateMachine',
    'GameEvent',
    'DepartureOutcome',

    # Redaction
    'filter_game_state',
    'player_role_payload'
]

"""
Utilities module for Whisper Rooms.

This module contains constants and helper functions
used throughout the application.
"""

from .constants import MIN_PLAYERS, MAX_PLAYERS, DIFFICULTIES, EVENTS
from .helpers import (
    generate_room_code, generate_unique_room_code, normalize_clue,
    normalize_player_name, normalize_difficulty
)

__all__ = [
    'MIN_PLAYERS',
    'MAX_PLAYERS',
    'DIFFICULTIES',
    'EVENTS',
    'generate_room_code',
    'generate_unique_room_code',
    'normalize_clue',
    'normalize_player_name',
    'normalize_difficulty'
]

"""
Lobby Module for Whisper Rooms.

Contains room lifecycle management: creation, joining, leaving, host
reassignment and reaping of empty rooms.
"""

from .models import Participant, Room, RoomSettings
from .manager import RoomRegistry

__all__ = [
    # Data models
    'Participant',
    'Room',
    'RoomSettings',

    # Managers
    'RoomRegistry'
]
